"""Incremental Dex update after the observations of one outing are confirmed."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wingdex.domain.aggregation.summary import (
    group_confirmed,
    index_dex,
    index_outings,
    sort_entries,
    summarize_species,
)
from wingdex.domain.clock import utcnow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wingdex.domain.clock import Clock
    from wingdex.domain.model import (
        DexEntry,
        Observation,
        ObservationId,
        Outing,
        SpeciesName,
    )

log = logging.getLogger(__name__)


def apply_new_confirmed(
    outing: Outing,
    newly_confirmed: Iterable[Observation],
    all_observations: Iterable[Observation],
    existing_dex: Iterable[DexEntry],
    *,
    outings: Iterable[Outing],
    clock: Clock = utcnow,
) -> tuple[list[DexEntry], int]:
    """Recompute only the species touched by ``newly_confirmed``.

    Each touched species is folded from *all* of its confirmed observations, so the result
    for those species equals a full :func:`rebuild`; every other entry is passed through
    untouched. ``outings`` must be every known live outing (``outing`` is added when missing);
    a confirmed observation whose outing is absent is dropped as dangling, so a partial set
    shrinks the history of the touched species.

    Returns the updated entries and the number of incoming species that had no entry yet.
    """

    existing_entries = list(existing_dex)
    incoming = [observation for observation in newly_confirmed if observation.is_confirmed]
    if not incoming:
        return sort_entries(existing_entries), 0

    existing_by_species = index_dex(existing_entries)
    touched: dict[SpeciesName, None] = dict.fromkeys(item.species_name for item in incoming)
    new_species_count = sum(1 for name in touched if name not in existing_by_species)

    combined: dict[ObservationId, Observation] = {item.id: item for item in all_observations}
    combined.update((item.id, item) for item in incoming)

    outings_by_id = index_outings(outings)
    outings_by_id[outing.id] = outing

    grouped = group_confirmed(
        (item for item in combined.values() if item.species_name in touched),
        outings_by_id,
    )
    now = clock()
    updated = {
        name: entry for name, entry in existing_by_species.items() if name not in touched
    }
    for species_name, species_observations in grouped.items():
        updated[species_name] = summarize_species(
            species_name,
            species_observations,
            outings_by_id,
            existing=existing_by_species.get(species_name),
            now=now,
        )

    log.debug(
        "Applied %s confirmed observations from outing %s: touched=%s, new_species=%s",
        len(incoming),
        outing.id,
        len(touched),
        new_species_count,
    )
    return sort_entries(updated.values()), new_species_count
