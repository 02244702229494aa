"""Closed set of aggregation requests and a single dispatch entry point.

Callers describe *what* changed (a full rebuild, one outing confirmed, an external Dex
imported) and :func:`aggregate` picks the matching reducer. All modes are pure.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import singledispatch
from typing import TypeAlias

from wingdex.domain.aggregation.incremental import apply_new_confirmed
from wingdex.domain.aggregation.merge import merge_external
from wingdex.domain.aggregation.rebuild import rebuild
from wingdex.domain.clock import Clock, utcnow
from wingdex.domain.model import DexEntry, Observation, Outing


@dataclass(frozen=True, slots=True)
class AggregationResult:
    entries: tuple[DexEntry, ...]
    new_species_count: int = 0

    @property
    def species_names(self) -> tuple[str, ...]:
        return tuple(entry.species_name for entry in self.entries)


@dataclass(frozen=True, slots=True, kw_only=True)
class Rebuild:
    outings: Sequence[Outing]
    observations: Sequence[Observation]
    existing_dex: Sequence[DexEntry] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class IncrementalUpdate:
    outing: Outing
    newly_confirmed: Sequence[Observation]
    all_observations: Sequence[Observation]
    outings: Sequence[Outing]
    existing_dex: Sequence[DexEntry] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalMerge:
    incoming_entries: Sequence[DexEntry]
    existing_dex: Sequence[DexEntry] = ()


AggregationRequest: TypeAlias = Rebuild | IncrementalUpdate | ExternalMerge


@singledispatch
def aggregate(request: object, *, clock: Clock = utcnow) -> AggregationResult:
    raise TypeError(f"Unsupported aggregation request: {type(request).__name__}")


@aggregate.register
def _(request: Rebuild, *, clock: Clock = utcnow) -> AggregationResult:
    entries = rebuild(request.outings, request.observations, request.existing_dex, clock=clock)
    return AggregationResult(
        entries=tuple(entries),
        new_species_count=_count_new_species(entries, request.existing_dex),
    )


@aggregate.register
def _(request: IncrementalUpdate, *, clock: Clock = utcnow) -> AggregationResult:
    entries, new_species_count = apply_new_confirmed(
        request.outing,
        request.newly_confirmed,
        request.all_observations,
        request.existing_dex,
        outings=request.outings,
        clock=clock,
    )
    return AggregationResult(entries=tuple(entries), new_species_count=new_species_count)


@aggregate.register
def _(request: ExternalMerge, *, clock: Clock = utcnow) -> AggregationResult:  # noqa: ARG001
    entries = merge_external(request.incoming_entries, request.existing_dex)
    return AggregationResult(
        entries=tuple(entries),
        new_species_count=_count_new_species(entries, request.existing_dex),
    )


def _count_new_species(entries: Sequence[DexEntry], existing_dex: Sequence[DexEntry]) -> int:
    known = {entry.species_name for entry in existing_dex}
    return sum(1 for entry in entries if entry.species_name not in known)


__all__ = [
    "AggregationRequest",
    "AggregationResult",
    "ExternalMerge",
    "IncrementalUpdate",
    "Rebuild",
    "aggregate",
]
