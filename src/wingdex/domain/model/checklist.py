"""Rows parsed from an imported checklist, before they become outings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from wingdex.domain.model.enums import ImportConflict
    from wingdex.domain.model.primitives import SpeciesName
    from wingdex.domain.model.sighting import DexEntry


@dataclass(frozen=True, slots=True, kw_only=True)
class ImportPreview:
    species_name: SpeciesName
    observed_at: datetime
    location: str
    count: int = 1
    lat: float | None = None
    lon: float | None = None
    conflict: ImportConflict | None = None
    existing_entry: DexEntry | None = None
