"""Taxonomy and name-resolution configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from wingdex.domain.identification import DEFAULT_MIN_CONFIDENCE
from wingdex.domain.taxonomy import DEFAULT_FUZZY_THRESHOLD, DEFAULT_SEARCH_LIMIT

from .env import env_float, env_int, optional_env_var
from .errors import ConfigurationError

TAXONOMY_PATH_VAR: Final[str] = "WINGDEX_TAXONOMY_PATH"
SEARCH_LIMIT_VAR: Final[str] = "WINGDEX_SEARCH_LIMIT"
FUZZY_THRESHOLD_VAR: Final[str] = "WINGDEX_FUZZY_THRESHOLD"
CANDIDATE_MIN_CONFIDENCE_VAR: Final[str] = "WINGDEX_CANDIDATE_MIN_CONFIDENCE"


@dataclass(frozen=True, slots=True, kw_only=True)
class TaxonomyConfig:
    """Where the taxonomy lives and how loosely names are matched against it.

    ``path`` of ``None`` selects the sample taxonomy bundled with the package.
    """

    path: Path | None = None
    search_limit: int = DEFAULT_SEARCH_LIMIT
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
    candidate_min_confidence: float = DEFAULT_MIN_CONFIDENCE

    def __post_init__(self) -> None:
        if not 0.0 <= self.fuzzy_threshold < 1.0:
            raise ConfigurationError("Fuzzy threshold must be within [0, 1)")
        if not 0.0 <= self.candidate_min_confidence <= 1.0:
            raise ConfigurationError("Candidate confidence must be within [0, 1]")

    @classmethod
    def from_environment(cls) -> TaxonomyConfig:
        raw_path = optional_env_var(TAXONOMY_PATH_VAR)
        return cls(
            path=Path(raw_path).expanduser() if raw_path else None,
            search_limit=env_int(SEARCH_LIMIT_VAR, DEFAULT_SEARCH_LIMIT),
            fuzzy_threshold=env_float(FUZZY_THRESHOLD_VAR, DEFAULT_FUZZY_THRESHOLD),
            candidate_min_confidence=env_float(
                CANDIDATE_MIN_CONFIDENCE_VAR, DEFAULT_MIN_CONFIDENCE
            ),
        )


def get_taxonomy_config() -> TaxonomyConfig:
    return TaxonomyConfig.from_environment()
