"""Shared fold from confirmed observations to a single Dex entry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wingdex.domain.clock import as_utc
from wingdex.domain.model import DexEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from datetime import datetime

    from wingdex.domain.model import Observation, Outing, OutingId, SpeciesName

log = logging.getLogger(__name__)


def index_outings(outings: Iterable[Outing]) -> dict[OutingId, Outing]:
    return {outing.id: outing for outing in outings}


def index_dex(entries: Iterable[DexEntry]) -> dict[SpeciesName, DexEntry]:
    return {entry.species_name: entry for entry in entries}


def sort_entries(entries: Iterable[DexEntry]) -> list[DexEntry]:
    """Order entries by species name using plain code-point comparison."""

    return sorted(entries, key=lambda entry: entry.species_name)


def group_confirmed(
    observations: Iterable[Observation],
    outings_by_id: Mapping[OutingId, Outing],
) -> dict[SpeciesName, list[Observation]]:
    """Group confirmed observations backed by a live outing, keeping input order."""

    grouped: dict[SpeciesName, list[Observation]] = {}
    dangling = 0
    for observation in observations:
        if not observation.is_confirmed:
            continue
        if observation.outing_id not in outings_by_id:
            dangling += 1
            continue
        grouped.setdefault(observation.species_name, []).append(observation)
    if dangling:
        log.debug("Dropped %s confirmed observations without a live outing", dangling)
    return grouped


def summarize_species(
    species_name: SpeciesName,
    observations: Sequence[Observation],
    outings_by_id: Mapping[OutingId, Outing],
    *,
    existing: DexEntry | None,
    now: datetime,
) -> DexEntry:
    """Fold the confirmed observations of one species into its Dex entry.

    ``observations`` must be non-empty and every outing id must resolve. ``added_date`` and
    ``notes`` are carried over from ``existing``; the photo comes from the last observation
    that has one, falling back to the stored photo.
    """

    start_times = [outings_by_id[item.outing_id].start_time for item in observations]
    latest_photo = next(
        (
            item.representative_photo_id
            for item in reversed(observations)
            if item.representative_photo_id
        ),
        None,
    )
    stored_photo = existing.best_photo_id if existing is not None else None
    return DexEntry(
        species_name=species_name,
        first_seen_date=min(start_times, key=as_utc),
        last_seen_date=max(start_times, key=as_utc),
        added_date=(existing.added_date if existing is not None else None) or now,
        total_outings=len({item.outing_id for item in observations}),
        total_count=sum(item.count for item in observations),
        best_photo_id=latest_photo or stored_photo,
        notes=existing.notes if existing is not None else "",
    )
