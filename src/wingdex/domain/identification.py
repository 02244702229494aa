"""Canonicalize species candidates proposed by an AI vision model."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, cast

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wingdex.domain.taxonomy import NameResolver

DEFAULT_MIN_CONFIDENCE: Final[float] = 0.3
MAX_CANDIDATES: Final[int] = 5

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class IdentificationCandidate:
    species: str
    confidence: float
    article_title: str | None = None


def canonicalize_candidates(
    candidates: Iterable[object],
    resolver: NameResolver,
    *,
    min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    max_candidates: int = MAX_CANDIDATES,
) -> list[IdentificationCandidate]:
    """Filter, rank and canonicalize raw model candidates.

    Candidates may be mappings with ``species`` and ``confidence`` keys (decoded model
    output) or :class:`IdentificationCandidate` instances. Entries without a species name or
    with a non-finite confidence below ``min_confidence`` are dropped. Matched species become
    ``Common (Scientific)`` labels; unmatched names are kept verbatim.
    """

    usable: list[IdentificationCandidate] = []
    for raw in candidates:
        candidate = _coerce_candidate(raw)
        if candidate is None or candidate.confidence < min_confidence:
            continue
        usable.append(candidate)

    usable.sort(key=lambda candidate: candidate.confidence, reverse=True)

    results: list[IdentificationCandidate] = []
    for candidate in usable[:max_candidates]:
        match = resolver.find_best_match(candidate.species)
        if match is None:
            log.debug("No taxonomy match for candidate %r", candidate.species)
            results.append(candidate)
            continue
        results.append(
            IdentificationCandidate(
                species=match.label,
                confidence=candidate.confidence,
                article_title=resolver.get_wiki_title(match.common_name),
            )
        )
    return results


def _coerce_candidate(raw: object) -> IdentificationCandidate | None:
    if isinstance(raw, IdentificationCandidate):
        species: object = raw.species
        confidence: object = raw.confidence
    elif isinstance(raw, Mapping):
        mapping = cast("Mapping[str, object]", raw)
        species = mapping.get("species")
        confidence = mapping.get("confidence")
    else:
        return None

    name = str(species).strip() if species is not None else ""
    if not name:
        return None
    if isinstance(confidence, bool) or not isinstance(confidence, int | float | str):
        return None
    try:
        value = float(confidence)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return IdentificationCandidate(species=name, confidence=value)


__all__ = [
    "DEFAULT_MIN_CONFIDENCE",
    "MAX_CANDIDATES",
    "IdentificationCandidate",
    "canonicalize_candidates",
]
