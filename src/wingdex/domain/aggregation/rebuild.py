"""Full life-list rebuild from raw outings and observations."""

from __future__ import annotations

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
    from wingdex.domain.model import DexEntry, Observation, Outing


def rebuild(
    outings: Iterable[Outing],
    observations: Iterable[Observation],
    existing_dex: Iterable[DexEntry] = (),
    *,
    clock: Clock = utcnow,
) -> list[DexEntry]:
    """Recompute every Dex entry from scratch.

    Only confirmed observations whose outing still exists count. Species that lose their
    last such observation drop out of the result; user-owned fields of surviving species are
    carried over from ``existing_dex``.
    """

    outings_by_id = index_outings(outings)
    existing_by_species = index_dex(existing_dex)
    grouped = group_confirmed(observations, outings_by_id)
    now = clock()
    return sort_entries(
        summarize_species(
            species_name,
            species_observations,
            outings_by_id,
            existing=existing_by_species.get(species_name),
            now=now,
        )
        for species_name, species_observations in grouped.items()
    )
