"""Turn imported checklist rows into outings, observations and conflict labels."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import TYPE_CHECKING, Final, Protocol

from wingdex.domain.clock import as_utc, utcnow
from wingdex.domain.model import Certainty, ImportConflict, Observation, Outing

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date, datetime

    from wingdex.domain.clock import Clock
    from wingdex.domain.model import DexEntry, ImportPreview, SpeciesName, UserId

IMPORTED_OUTING_NOTES: Final[str] = "Imported from eBird"
IMPORTED_OUTING_DURATION: Final[timedelta] = timedelta(hours=1)

log = logging.getLogger(__name__)


class IdFactory(Protocol):
    def __call__(self, prefix: str) -> str: ...


def random_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True, slots=True)
class ImportBatch:
    outings: tuple[Outing, ...]
    observations: tuple[Observation, ...]

    @property
    def species_names(self) -> frozenset[SpeciesName]:
        return frozenset(observation.species_name for observation in self.observations)


def group_previews_into_outings(
    previews: Iterable[ImportPreview],
    *,
    user_id: UserId,
    clock: Clock = utcnow,
    id_factory: IdFactory = random_id,
) -> ImportBatch:
    """Group rows sharing a UTC calendar date and location into one outing each.

    The outing starts at the earliest row and ends an hour after the latest one. Rows of
    the same species within an outing collapse into one confirmed observation whose count
    is the sum of the rows.
    """

    groups: dict[tuple[date, str], list[ImportPreview]] = {}
    for preview in previews:
        key = (as_utc(preview.observed_at).date(), preview.location)
        groups.setdefault(key, []).append(preview)

    created_at = clock()
    outings: list[Outing] = []
    observations: list[Observation] = []
    for group in groups.values():
        outing = _outing_for_group(group, user_id=user_id, created_at=created_at, ids=id_factory)
        outings.append(outing)

        counts: dict[SpeciesName, int] = {}
        for preview in group:
            counts[preview.species_name] = counts.get(preview.species_name, 0) + preview.count
        observations.extend(
            Observation(
                id=id_factory("obs_import"),
                outing_id=outing.id,
                species_name=species_name,
                count=count,
                certainty=Certainty.CONFIRMED,
            )
            for species_name, count in counts.items()
        )

    log.info(
        "Grouped imported rows into %s outings, %s observations",
        len(outings),
        len(observations),
    )
    return ImportBatch(outings=tuple(outings), observations=tuple(observations))


def _outing_for_group(
    group: Sequence[ImportPreview],
    *,
    user_id: UserId,
    created_at: datetime,
    ids: IdFactory,
) -> Outing:
    first = group[0]
    times = [preview.observed_at for preview in group]
    return Outing(
        id=ids("outing_import"),
        user_id=user_id,
        start_time=min(times, key=as_utc),
        end_time=max(times, key=as_utc) + IMPORTED_OUTING_DURATION,
        location_name=first.location,
        lat=first.lat,
        lon=first.lon,
        notes=IMPORTED_OUTING_NOTES,
        created_at=created_at,
    )


def detect_import_conflicts(
    previews: Iterable[ImportPreview],
    existing_dex: Iterable[DexEntry],
) -> list[ImportPreview]:
    """Label each row against the current Dex.

    ``duplicate``: the species is known and the row falls on its first-seen date.
    ``update_dates``: the row lies outside the known first/last-seen range.
    ``new``: anything else, including species not yet in the Dex.
    """

    dex = {entry.species_name: entry for entry in existing_dex}
    labelled: list[ImportPreview] = []
    for preview in previews:
        existing = dex.get(preview.species_name)
        if existing is None:
            labelled.append(replace(preview, conflict=ImportConflict.NEW, existing_entry=None))
            continue
        observed = as_utc(preview.observed_at)
        first_seen = as_utc(existing.first_seen_date)
        last_seen = as_utc(existing.last_seen_date)
        if observed.date() == first_seen.date():
            conflict = ImportConflict.DUPLICATE
        elif observed < first_seen or observed > last_seen:
            conflict = ImportConflict.UPDATE_DATES
        else:
            conflict = ImportConflict.NEW
        labelled.append(replace(preview, conflict=conflict, existing_entry=existing))
    return labelled


__all__ = [
    "IMPORTED_OUTING_DURATION",
    "IMPORTED_OUTING_NOTES",
    "IdFactory",
    "ImportBatch",
    "detect_import_conflicts",
    "group_previews_into_outings",
    "random_id",
]
