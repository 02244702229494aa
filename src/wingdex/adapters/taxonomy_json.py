"""Load taxonomy rows from a JSON array of arrays."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from importlib import resources
from typing import TYPE_CHECKING, Final, cast

if TYPE_CHECKING:
    from pathlib import Path

BUNDLED_PACKAGE: Final[str] = "wingdex.data"
BUNDLED_FILENAME: Final[str] = "taxonomy.json"

log = logging.getLogger(__name__)


class TaxonomySourceError(RuntimeError):
    """Raised when a taxonomy file cannot be read or is not a JSON array."""


def parse_taxonomy_rows(text: str, *, origin: str = "<memory>") -> list[object]:
    try:
        payload: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TaxonomySourceError(f"Taxonomy {origin} is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise TaxonomySourceError(f"Taxonomy {origin} must be a JSON array of rows")
    rows = cast("list[object]", payload)
    log.debug("Read %s taxonomy rows from %s", len(rows), origin)
    return rows


def load_taxonomy_rows(path: Path) -> list[object]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TaxonomySourceError(f"Cannot read taxonomy file {path}: {exc}") from exc
    return parse_taxonomy_rows(text, origin=str(path))


def bundled_taxonomy_rows() -> list[object]:
    resource = resources.files(BUNDLED_PACKAGE).joinpath(BUNDLED_FILENAME)
    return parse_taxonomy_rows(resource.read_text(encoding="utf-8"), origin=BUNDLED_FILENAME)


@dataclass(frozen=True, slots=True)
class JsonTaxonomySource:
    """:class:`~wingdex.domain.ports.TaxonomySource` backed by a file or the bundled sample."""

    path: Path | None = None

    def __call__(self) -> list[object]:
        if self.path is None:
            return bundled_taxonomy_rows()
        return load_taxonomy_rows(self.path)


__all__ = [
    "JsonTaxonomySource",
    "TaxonomySourceError",
    "bundled_taxonomy_rows",
    "load_taxonomy_rows",
    "parse_taxonomy_rows",
]
