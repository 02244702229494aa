from __future__ import annotations

import itertools
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from tests.helpers.sightings import BLUE_JAY, CARDINAL, FIXED_NOW, ROBIN, at, make_entry
from wingdex.domain.checklist_import import (
    IMPORTED_OUTING_NOTES,
    detect_import_conflicts,
    group_previews_into_outings,
    random_id,
)
from wingdex.domain.model import Certainty, ImportConflict, ImportPreview

if TYPE_CHECKING:
    from wingdex.domain.checklist_import import IdFactory
    from wingdex.domain.clock import Clock


def _preview(
    species: str,
    observed_at: datetime,
    *,
    location: str = "Central Park",
    count: int = 1,
) -> ImportPreview:
    return ImportPreview(
        species_name=species,
        observed_at=observed_at,
        location=location,
        count=count,
        lat=40.78,
        lon=-73.97,
    )


def _sequential_ids() -> tuple[list[str], IdFactory]:
    issued: list[str] = []
    numbers = itertools.count(1)

    def factory(prefix: str) -> str:
        value = f"{prefix}-{next(numbers)}"
        issued.append(value)
        return value

    return issued, factory


def test_rows_group_by_date_and_location(fixed_clock: Clock) -> None:
    previews = [
        _preview(BLUE_JAY, datetime(2025, 3, 1, 8, 0, tzinfo=UTC), count=2),
        _preview(CARDINAL, datetime(2025, 3, 1, 8, 45, tzinfo=UTC)),
        _preview(BLUE_JAY, datetime(2025, 3, 1, 9, 30, tzinfo=UTC)),
        _preview(BLUE_JAY, datetime(2025, 3, 1, 10, 0, tzinfo=UTC), location="Jamaica Bay"),
        _preview(ROBIN, datetime(2025, 3, 2, 7, 0, tzinfo=UTC)),
    ]

    batch = group_previews_into_outings(previews, user_id="user-7", clock=fixed_clock)

    assert len(batch.outings) == 3
    park = batch.outings[0]
    assert park.user_id == "user-7"
    assert park.location_name == "Central Park"
    assert park.start_time == datetime(2025, 3, 1, 8, 0, tzinfo=UTC)
    assert park.end_time == datetime(2025, 3, 1, 9, 30, tzinfo=UTC) + timedelta(hours=1)
    assert park.notes == IMPORTED_OUTING_NOTES
    assert park.created_at == FIXED_NOW
    assert (park.lat, park.lon) == (40.78, -73.97)

    park_observations = [item for item in batch.observations if item.outing_id == park.id]
    assert {item.species_name: item.count for item in park_observations} == {
        BLUE_JAY: 3,
        CARDINAL: 1,
    }
    assert all(item.certainty is Certainty.CONFIRMED for item in batch.observations)
    assert batch.species_names == frozenset({BLUE_JAY, CARDINAL, ROBIN})


def test_grouping_uses_the_utc_calendar_date(fixed_clock: Clock) -> None:
    late_evening = datetime(2025, 3, 1, 23, 30, tzinfo=UTC)
    previews = [
        _preview(BLUE_JAY, late_evening),
        _preview(ROBIN, late_evening + timedelta(hours=1)),
    ]

    batch = group_previews_into_outings(previews, user_id="user-1", clock=fixed_clock)

    assert len(batch.outings) == 2


def test_ids_come_from_the_factory(fixed_clock: Clock) -> None:
    issued, factory = _sequential_ids()

    batch = group_previews_into_outings(
        [_preview(BLUE_JAY, at(1))],
        user_id="user-1",
        clock=fixed_clock,
        id_factory=factory,
    )

    assert issued == ["outing_import-1", "obs_import-2"]
    assert batch.outings[0].id == "outing_import-1"
    assert batch.observations[0].outing_id == "outing_import-1"


def test_random_ids_carry_prefix() -> None:
    first = random_id("obs_import")

    assert first.startswith("obs_import_")
    assert first != random_id("obs_import")


def test_conflicts_are_labelled_against_existing_dex() -> None:
    existing = make_entry(BLUE_JAY, first_seen=at(5), last_seen=at(10))
    previews = [
        _preview(BLUE_JAY, at(5, hour=18)),
        _preview(BLUE_JAY, at(1)),
        _preview(BLUE_JAY, at(12)),
        _preview(BLUE_JAY, at(7)),
        _preview(ROBIN, at(7)),
    ]

    labelled = detect_import_conflicts(previews, [existing])

    assert [item.conflict for item in labelled] == [
        ImportConflict.DUPLICATE,
        ImportConflict.UPDATE_DATES,
        ImportConflict.UPDATE_DATES,
        ImportConflict.NEW,
        ImportConflict.NEW,
    ]
    assert labelled[3].existing_entry == existing
    assert labelled[4].existing_entry is None
