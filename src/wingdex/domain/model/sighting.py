"""Outings, observations and the per-species life-list entries derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wingdex.domain.model.enums import Certainty

if TYPE_CHECKING:
    from datetime import datetime

    from wingdex.domain.model.primitives import (
        ObservationId,
        OutingId,
        PhotoId,
        SpeciesName,
        UserId,
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class Outing:
    """A single birding trip with a time range and a location."""

    id: OutingId
    user_id: UserId
    start_time: datetime
    end_time: datetime
    location_name: str = ""
    lat: float | None = None
    lon: float | None = None
    notes: str = ""
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class Observation:
    """A sighting of one species during an outing.

    ``outing_id`` is a reference, not ownership: deleting the outing removes the
    observation from every aggregate even if the observation record lingers.
    """

    id: ObservationId
    outing_id: OutingId
    species_name: SpeciesName
    certainty: Certainty
    count: int = 1
    representative_photo_id: PhotoId | None = None
    ai_confidence: float | None = None
    notes: str = ""

    @property
    def is_confirmed(self) -> bool:
        return self.certainty is Certainty.CONFIRMED


@dataclass(frozen=True, slots=True, kw_only=True)
class DexEntry:
    """Rolled-up summary of every confirmed sighting of one species."""

    species_name: SpeciesName
    first_seen_date: datetime
    last_seen_date: datetime
    added_date: datetime | None = None
    total_outings: int = 0
    total_count: int = 0
    best_photo_id: PhotoId | None = None
    notes: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class DexMetaPatch:
    """User edits to the sticky fields of a Dex entry.

    ``None`` means "leave unchanged"; an empty ``notes`` string clears the notes.
    """

    species_name: SpeciesName
    added_date: datetime | None = None
    best_photo_id: PhotoId | None = None
    notes: str | None = None


@dataclass(frozen=True, slots=True)
class LifeListSnapshot:
    """Everything a user has recorded, as exchanged with a snapshot store."""

    outings: tuple[Outing, ...] = ()
    observations: tuple[Observation, ...] = ()
    dex: tuple[DexEntry, ...] = ()
