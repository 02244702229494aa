from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tests.helpers.sightings import (
    BLUE_JAY,
    CARDINAL,
    at,
    make_entry,
    make_observation,
    make_outing,
)
from wingdex.adapters.ebird import (
    DEX_HEADERS,
    EBIRD_RECORD_HEADERS,
    export_dex_csv,
    export_outing_csv,
    sanitize_cell,
    split_scientific_name,
)
from wingdex.domain.model import Certainty

if TYPE_CHECKING:
    from wingdex.domain.taxonomy import NameResolver


def _quoted(values: tuple[str, ...] | list[str]) -> str:
    return ",".join(f'"{value}"' for value in values)


def test_outing_export_writes_confirmed_records(resolver: NameResolver) -> None:
    outing = make_outing(
        "o1",
        datetime(2025, 3, 1, 8, 5, tzinfo=UTC),
        location_name='Central "Park"',
        lat=40.78,
        lon=-73.97,
        notes="Sunny\nwarm",
    )
    observations = [
        make_observation("o1", BLUE_JAY, count=3, notes="Near feeder"),
        make_observation("o1", CARDINAL, certainty=Certainty.PENDING),
        make_observation("o1", "Osprey", count=0),
    ]

    lines = export_outing_csv(outing, observations, resolver=resolver).split("\n")

    assert lines[0] == _quoted(EBIRD_RECORD_HEADERS)
    common_tail = [
        "Central Park",
        "40.780000",
        "-73.970000",
        "03/01/2025",
        "08:05",
        "",
        "",
        "Incidental",
        "1",
        "",
        "N",
        "",
        "",
        "Sunny warm",
    ]
    assert lines[1:] == [
        _quoted(["Blue Jay", "Cyanocitta", "cristata", "3", "Near feeder", *common_tail]),
        _quoted(["Osprey", "Pandion", "haliaetus", "X", "", *common_tail]),
    ]


def test_outing_export_without_header_or_resolver() -> None:
    outing = make_outing("o1", at(1), location_name="Lake")
    observations = [make_observation("o1", "Osprey")]

    csv_text = export_outing_csv(outing, observations, include_header=False)

    assert csv_text.count("\n") == 0
    assert csv_text.startswith('"Osprey","","","1","","Lake","",""')


def test_dex_export() -> None:
    entries = [
        make_entry(
            BLUE_JAY,
            first_seen=at(1),
            last_seen=at(5),
            total_outings=2,
            total_count=8,
            notes='Says "jay"',
        ),
        make_entry("Mystery Warbler", first_seen=at(2)),
    ]

    lines = export_dex_csv(entries).split("\n")

    assert lines == [
        _quoted(DEX_HEADERS),
        '"Blue Jay","Cyanocitta cristata","2025-03-01","2025-03-05","2","8","Says ""jay"""',
        '"Mystery Warbler","","2025-03-02","2025-03-02","1","1",""',
    ]


def test_sanitize_cell() -> None:
    assert sanitize_cell(' A "quoted"\r\nline ') == "A quoted line"


def test_split_scientific_name() -> None:
    assert split_scientific_name("Cyanocitta cristata") == ("Cyanocitta", "cristata")
    assert split_scientific_name("Larus argentatus smithsonianus") == (
        "Larus",
        "argentatus smithsonianus",
    )
    assert split_scientific_name("  ") == ("", "")
