"""Merging Dex entries that are not backed by local observations."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from wingdex.domain.aggregation.summary import index_dex, sort_entries
from wingdex.domain.clock import as_utc

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wingdex.domain.model import DexEntry, DexMetaPatch

log = logging.getLogger(__name__)


def merge_external(
    incoming_entries: Iterable[DexEntry],
    existing_dex: Iterable[DexEntry],
) -> list[DexEntry]:
    """Merge an exported Dex (e.g. a backup) into the current one.

    Overlapping species widen their first/last-seen range and *sum* their totals, since
    the raw observations behind the incoming entries are unknown. Importing a set that
    repeats local sightings therefore double-counts them.
    """

    merged = index_dex(existing_dex)
    overlapping = 0
    for entry in incoming_entries:
        current = merged.get(entry.species_name)
        if current is None:
            merged[entry.species_name] = entry
            continue
        overlapping += 1
        merged[entry.species_name] = _combine(current, entry)
    if overlapping:
        log.info("Merged %s overlapping species by summing their totals", overlapping)
    return sort_entries(merged.values())


def _combine(current: DexEntry, incoming: DexEntry) -> DexEntry:
    return replace(
        current,
        first_seen_date=min(current.first_seen_date, incoming.first_seen_date, key=as_utc),
        last_seen_date=max(current.last_seen_date, incoming.last_seen_date, key=as_utc),
        total_outings=current.total_outings + incoming.total_outings,
        total_count=current.total_count + incoming.total_count,
        added_date=current.added_date or incoming.added_date,
        best_photo_id=current.best_photo_id or incoming.best_photo_id,
        notes=current.notes or incoming.notes,
    )


def patch_metadata(
    existing_dex: Iterable[DexEntry],
    patches: Iterable[DexMetaPatch],
) -> list[DexEntry]:
    """Apply explicit user edits to the sticky fields of existing entries.

    Patches naming a species without an entry are ignored: an entry only exists while a
    confirmed observation backs it.
    """

    entries = index_dex(existing_dex)
    for patch in patches:
        entry = entries.get(patch.species_name)
        if entry is None:
            log.debug("Ignoring metadata patch for unknown species %r", patch.species_name)
            continue
        entries[patch.species_name] = replace(
            entry,
            added_date=patch.added_date if patch.added_date is not None else entry.added_date,
            best_photo_id=patch.best_photo_id
            if patch.best_photo_id is not None
            else entry.best_photo_id,
            notes=patch.notes if patch.notes is not None else entry.notes,
        )
    return sort_entries(entries.values())
