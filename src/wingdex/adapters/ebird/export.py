"""Export outings and the life list as CSV."""

from __future__ import annotations

import csv
import io
import re
from typing import TYPE_CHECKING, Final

from wingdex.domain.clock import as_utc
from wingdex.domain.taxonomy import display_name, scientific_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from wingdex.domain.model import DexEntry, Observation, Outing
    from wingdex.domain.taxonomy import NameResolver

EBIRD_RECORD_HEADERS: Final[tuple[str, ...]] = (
    "Common Name",
    "Genus",
    "Species",
    "Number",
    "Species Comments",
    "Location Name",
    "Latitude",
    "Longitude",
    "Date",
    "Start Time",
    "State/Province",
    "Country Code",
    "Protocol",
    "Number of Observers",
    "Duration",
    "All observations reported?",
    "Effort Distance Miles",
    "Effort area acres",
    "Submission Comments",
)

DEX_HEADERS: Final[tuple[str, ...]] = (
    "Common Name",
    "Scientific Name",
    "First Seen Date",
    "Last Seen Date",
    "Total Outings",
    "Total Count",
    "Notes",
)

_LINE_BREAKS = re.compile(r"[\r\n]+")


def sanitize_cell(value: str) -> str:
    """Collapse line breaks and drop double quotes, which the eBird importer rejects."""

    return _LINE_BREAKS.sub(" ", value).replace('"', "").strip()


def split_scientific_name(name: str) -> tuple[str, str]:
    parts = sanitize_cell(name).split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


def export_outing_csv(
    outing: Outing,
    observations: Iterable[Observation],
    *,
    include_header: bool = True,
    resolver: NameResolver | None = None,
) -> str:
    """Render the confirmed observations of ``outing`` in eBird record format.

    Date and time are written as recorded on the outing, without timezone conversion.
    """

    date_cell = outing.start_time.strftime("%m/%d/%Y")
    time_cell = outing.start_time.strftime("%H:%M")
    rows: list[Sequence[str]] = []
    for observation in observations:
        if not observation.is_confirmed:
            continue
        genus, species = split_scientific_name(
            _scientific_for(observation.species_name, resolver) or ""
        )
        rows.append(
            (
                sanitize_cell(display_name(observation.species_name)),
                genus,
                species,
                str(observation.count) if observation.count > 0 else "X",
                sanitize_cell(observation.notes),
                sanitize_cell(outing.location_name),
                f"{outing.lat:.6f}" if outing.lat is not None else "",
                f"{outing.lon:.6f}" if outing.lon is not None else "",
                date_cell,
                time_cell,
                "",
                "",
                "Incidental",
                "1",
                "",
                "N",
                "",
                "",
                sanitize_cell(outing.notes),
            )
        )
    return _render(EBIRD_RECORD_HEADERS if include_header else None, rows)


def export_dex_csv(entries: Iterable[DexEntry]) -> str:
    rows = [
        (
            display_name(entry.species_name),
            scientific_name(entry.species_name) or "",
            as_utc(entry.first_seen_date).date().isoformat(),
            as_utc(entry.last_seen_date).date().isoformat(),
            str(entry.total_outings),
            str(entry.total_count),
            entry.notes,
        )
        for entry in entries
    ]
    return _render(DEX_HEADERS, rows)


def _scientific_for(species_name: str, resolver: NameResolver | None) -> str | None:
    scientific = scientific_name(species_name)
    if scientific is None and resolver is not None:
        match = resolver.find_best_match(species_name)
        return match.scientific_name if match is not None else None
    return scientific


def _render(header: Sequence[str] | None, rows: Iterable[Sequence[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    if header is not None:
        writer.writerow(header)
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")
