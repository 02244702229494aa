"""Public domain model surface."""

from __future__ import annotations

from wingdex.domain.model.checklist import ImportPreview
from wingdex.domain.model.enums import Certainty, ImportConflict
from wingdex.domain.model.primitives import (
    ObservationId,
    OutingId,
    PhotoId,
    ReferenceCode,
    SpeciesName,
    UserId,
)
from wingdex.domain.model.sighting import (
    DexEntry,
    DexMetaPatch,
    LifeListSnapshot,
    Observation,
    Outing,
)
from wingdex.domain.model.taxon import SearchResult, SpeciesRecord

__all__ = [  # noqa: RUF022
    # enums
    "Certainty",
    "ImportConflict",
    # primitives
    "ObservationId",
    "OutingId",
    "PhotoId",
    "ReferenceCode",
    "SpeciesName",
    "UserId",
    # taxonomy
    "SearchResult",
    "SpeciesRecord",
    # sightings
    "DexEntry",
    "DexMetaPatch",
    "LifeListSnapshot",
    "Observation",
    "Outing",
    # import
    "ImportPreview",
]
