"""Resolve free-form species names onto taxonomy records.

Names arrive from AI vision output ("Common Kingfisher (Alcedo atthis)"), imported checklists
and manual entry. Resolution tries progressively looser strategies and stops at the first hit:

1. exact common name, then exact scientific name
2. the parenthesised scientific name of a ``Common (Scientific)`` label
3. the common-name portion of such a label
4. word overlap against common names

Every entry point is total; unmatched or malformed input resolves to ``None``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from wingdex.domain.taxonomy.species_names import (
    derive_reference_code,
    display_name,
    scientific_name,
    tokenize,
)

if TYPE_CHECKING:
    from wingdex.domain.model import SpeciesRecord
    from wingdex.domain.taxonomy.catalog import TaxonomyCatalog

DEFAULT_FUZZY_THRESHOLD: Final[float] = 0.5

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Candidate:
    record: SpeciesRecord
    words: frozenset[str]


class NameResolver:
    """Canonicalizes species names against an injected :class:`TaxonomyCatalog`.

    ``fuzzy_threshold`` is the share of a candidate's common-name words that must appear in
    the input for the word-overlap fallback; the share has to be strictly greater, so the
    default of 0.5 asks for a majority (2 of 3 words, 1 of 1, but not 1 of 2).
    """

    __slots__ = ("_candidates", "_catalog", "_fuzzy_threshold")

    def __init__(
        self,
        catalog: TaxonomyCatalog,
        *,
        fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD,
    ) -> None:
        if not 0.0 <= fuzzy_threshold < 1.0:
            raise ValueError("Fuzzy threshold must be within [0, 1)")
        self._catalog = catalog
        self._fuzzy_threshold = fuzzy_threshold
        self._candidates = tuple(
            _Candidate(record=record, words=frozenset(tokenize(record.common_name)))
            for record in catalog
        )

    @property
    def catalog(self) -> TaxonomyCatalog:
        return self._catalog

    @property
    def fuzzy_threshold(self) -> float:
        return self._fuzzy_threshold

    def find_best_match(self, raw_name: object) -> SpeciesRecord | None:
        if not isinstance(raw_name, str) or not raw_name.strip():
            return None
        name = raw_name.strip()

        exact = self._catalog.by_common_name(name) or self._catalog.by_scientific_name(name)
        if exact is not None:
            return exact

        if "(" in name:
            # The scientific name is authoritative even when the common part is misspelled.
            by_scientific = self._catalog.by_scientific_name(scientific_name(name))
            if by_scientific is not None:
                return by_scientific
            by_common = self._catalog.by_common_name(display_name(name))
            if by_common is not None:
                return by_common

        return self._fuzzy_match(name)

    def normalize_species_name(self, name: str) -> str:
        """Return the canonical common name, or ``name`` unchanged when nothing matches."""

        match = self.find_best_match(name)
        return match.common_name if match is not None else name

    def canonical_label(self, name: str) -> str:
        """Return ``Common (Scientific)`` for a match, or ``name`` unchanged.

        This is the form stored on observations, so every ingestion path should funnel
        through it before an observation is created.
        """

        match = self.find_best_match(name)
        return match.label if match is not None else name

    def get_wiki_title(self, name: object) -> str | None:
        record = self._direct_lookup(name)
        return record.article_title if record is not None else None

    def get_reference_code(self, name: object, *, derive: bool = False) -> str | None:
        record = self._direct_lookup(name)
        if record is not None and record.reference_code:
            return record.reference_code
        if derive and isinstance(name, str):
            return derive_reference_code(display_name(name)) or None
        return None

    def _direct_lookup(self, name: object) -> SpeciesRecord | None:
        return self._catalog.by_common_name(name) or self._catalog.by_scientific_name(name)

    def _fuzzy_match(self, name: str) -> SpeciesRecord | None:
        words = frozenset(tokenize(name))
        if not words:
            return None

        best: SpeciesRecord | None = None
        best_score: tuple[int, float] = (0, 0.0)
        for candidate in self._candidates:
            if not candidate.words:
                continue
            shared = len(candidate.words & words)
            if shared == 0:
                continue
            ratio = shared / len(candidate.words)
            if ratio <= self._fuzzy_threshold:
                continue
            score = (shared, ratio)
            # Strictly greater keeps the earliest catalog entry on ties.
            if score > best_score:
                best, best_score = candidate.record, score

        if best is not None:
            log.debug("Fuzzy matched %r to %r (score=%s)", name, best.common_name, best_score)
        return best


__all__ = ["DEFAULT_FUZZY_THRESHOLD", "NameResolver"]
