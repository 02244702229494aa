"""Parse eBird-style checklist CSV exports into import previews."""

from __future__ import annotations

import csv
import io
import logging
from datetime import UTC, datetime, time
from typing import TYPE_CHECKING, Final

from wingdex.domain.model import ImportPreview

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from wingdex.domain.taxonomy import NameResolver

SPECIES_COLUMNS: Final[tuple[str, ...]] = ("common name", "species", "species name")
SCIENTIFIC_COLUMNS: Final[tuple[str, ...]] = ("scientific name",)
DATE_COLUMNS: Final[tuple[str, ...]] = ("date", "observation date", "obs date")
TIME_COLUMNS: Final[tuple[str, ...]] = ("time", "start time")
LOCATION_COLUMNS: Final[tuple[str, ...]] = ("location", "location name", "locality")
COUNT_COLUMNS: Final[tuple[str, ...]] = ("count", "number")
LATITUDE_COLUMNS: Final[tuple[str, ...]] = ("latitude", "lat")
LONGITUDE_COLUMNS: Final[tuple[str, ...]] = ("longitude", "lon", "lng")

UNKNOWN_LOCATION: Final[str] = "Unknown"

_DATE_FORMATS: Final[tuple[str, ...]] = ("%m/%d/%Y", "%Y/%m/%d", "%d %b %Y", "%b %d, %Y")
_TIME_FORMATS: Final[tuple[str, ...]] = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M:%S %p")

log = logging.getLogger(__name__)


def parse_ebird_csv(
    content: str,
    *,
    resolver: NameResolver | None = None,
) -> list[ImportPreview]:
    """Read checklist rows, skipping rows without a species or a usable date.

    Headers are matched case-insensitively against common aliases. When a ``resolver`` is
    given, species names are canonicalized to ``Common (Scientific)`` labels.
    """

    reader = csv.reader(io.StringIO(content.lstrip("\ufeff")))
    header = next(reader, None)
    if header is None:
        return []
    columns = [name.strip().strip('"').lower() for name in header]

    previews: list[ImportPreview] = []
    skipped = 0
    for values in reader:
        if not any(value.strip() for value in values):
            continue
        row = {column: value.strip() for column, value in zip(columns, values, strict=False)}
        preview = _preview_from_row(row, resolver)
        if preview is None:
            skipped += 1
            continue
        previews.append(preview)

    if skipped:
        log.info("Skipped %s checklist rows without species or a parseable date", skipped)
    return previews


def _preview_from_row(
    row: Mapping[str, str],
    resolver: NameResolver | None,
) -> ImportPreview | None:
    species = _first(row, SPECIES_COLUMNS)
    date_text = _first(row, DATE_COLUMNS)
    if not species or not date_text:
        return None
    observed_at = parse_observed_at(date_text, _first(row, TIME_COLUMNS))
    if observed_at is None:
        return None

    scientific = _first(row, SCIENTIFIC_COLUMNS)
    label = f"{species} ({scientific})" if scientific and "(" not in species else species
    if resolver is not None:
        label = resolver.canonical_label(label)

    return ImportPreview(
        species_name=label,
        observed_at=observed_at,
        location=_first(row, LOCATION_COLUMNS) or UNKNOWN_LOCATION,
        count=_parse_count(_first(row, COUNT_COLUMNS)),
        lat=_parse_coordinate(_first(row, LATITUDE_COLUMNS)),
        lon=_parse_coordinate(_first(row, LONGITUDE_COLUMNS)),
    )


def _first(row: Mapping[str, str], aliases: Sequence[str]) -> str:
    for alias in aliases:
        value = row.get(alias, "")
        if value:
            return value
    return ""


def parse_observed_at(date_text: str, time_text: str = "") -> datetime | None:
    """Combine checklist date and time columns into a UTC instant.

    Accepts ISO-8601 dates/timestamps and the common US and day-month layouts. Naive
    values are taken as UTC.
    """

    parsed = _parse_date(date_text.strip())
    if parsed is None:
        return None
    if time_text.strip() and parsed.time() == time(0, 0):
        clock_time = _parse_time(time_text.strip())
        if clock_time is not None:
            parsed = datetime.combine(parsed.date(), clock_time, tzinfo=parsed.tzinfo)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def _parse_date(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        pass
    for pattern in _DATE_FORMATS:
        try:
            return datetime.strptime(value, pattern)  # noqa: DTZ007
        except ValueError:
            continue
    return None


def _parse_time(value: str) -> time | None:
    for pattern in _TIME_FORMATS:
        try:
            return datetime.strptime(value.upper(), pattern).time()  # noqa: DTZ007
        except ValueError:
            continue
    return None


def _parse_count(value: str) -> int:
    # eBird uses "X" for "present, not counted".
    try:
        count = int(value)
    except ValueError:
        return 1
    return max(count, 1)


def _parse_coordinate(value: str) -> float | None:
    try:
        return float(value)
    except ValueError:
        return None
