"""Taxonomy reference records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wingdex.domain.model.primitives import ReferenceCode


@dataclass(frozen=True, slots=True, kw_only=True)
class SpeciesRecord:
    """One species as listed in the taxonomy."""

    common_name: str
    scientific_name: str
    reference_code: ReferenceCode | None = None
    article_title: str | None = None

    @property
    def label(self) -> str:
        """Display form used as the life-list key, e.g. ``Blue Jay (Cyanocitta cristata)``."""
        return f"{self.common_name} ({self.scientific_name})"


@dataclass(frozen=True, slots=True)
class SearchResult:
    common: str
    scientific: str

    @classmethod
    def from_record(cls, record: SpeciesRecord) -> SearchResult:
        return cls(common=record.common_name, scientific=record.scientific_name)
