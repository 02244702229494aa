"""In-memory species taxonomy with case-insensitive lookups and ranked search.

The catalog is built once per process from a flat ordered list of taxonomy rows and is
read-only afterwards, so it can be shared between threads without locking. Every lookup is
total: blank or non-string input yields ``None`` or an empty result instead of raising.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Final, cast

from wingdex.domain.model import SearchResult, SpeciesRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

DEFAULT_SEARCH_LIMIT: Final[int] = 8
MIN_SEARCH_LIMIT: Final[int] = 1
MAX_SEARCH_LIMIT: Final[int] = 25

log = logging.getLogger(__name__)

class SearchRank(IntEnum):
    """Search tiers; lower values sort first."""

    COMMON_PREFIX = 0
    SCIENTIFIC_PREFIX = 1
    SUBSTRING = 2


def lookup_key(value: object) -> str:
    """Case- and whitespace-insensitive key for names, codes and queries."""

    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def clamp_search_limit(limit: object) -> int:
    """Coerce ``limit`` into ``[1, 25]``; anything unusable becomes the default of 8."""

    if isinstance(limit, bool):
        return DEFAULT_SEARCH_LIMIT
    if isinstance(limit, str):
        try:
            limit = int(limit.strip())
        except ValueError:
            return DEFAULT_SEARCH_LIMIT
    if isinstance(limit, float):
        if not math.isfinite(limit):
            return DEFAULT_SEARCH_LIMIT
        limit = int(limit)
    if not isinstance(limit, int):
        return DEFAULT_SEARCH_LIMIT
    return max(MIN_SEARCH_LIMIT, min(MAX_SEARCH_LIMIT, limit))


def species_record_from_row(row: object) -> SpeciesRecord | None:
    """Translate a ``(common, scientific, code, article)`` row.

    The code and article columns are optional; an empty code or a missing fourth element
    means the value is absent. Rows without both names are rejected.
    """

    if isinstance(row, str | bytes) or not isinstance(row, Sequence):
        return None
    fields = cast("Sequence[object]", row)
    if len(fields) < 2:
        return None
    common = _clean(fields[0])
    scientific = _clean(fields[1])
    if common is None or scientific is None:
        return None
    return SpeciesRecord(
        common_name=common,
        scientific_name=scientific,
        reference_code=_clean(fields[2]) if len(fields) > 2 else None,
        article_title=_clean(fields[3]) if len(fields) > 3 else None,
    )


def _clean(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True, slots=True)
class _IndexedRecord:
    record: SpeciesRecord
    common: str
    scientific: str

    def rank(self, query: str) -> SearchRank | None:
        if self.common.startswith(query):
            return SearchRank.COMMON_PREFIX
        if self.scientific.startswith(query):
            return SearchRank.SCIENTIFIC_PREFIX
        if query in self.common or query in self.scientific:
            return SearchRank.SUBSTRING
        return None


class TaxonomyCatalog:
    """Ordered, immutable set of species records plus lookup indexes."""

    __slots__ = ("_by_code", "_by_common", "_by_scientific", "_indexed", "_records")

    def __init__(self, records: Iterable[SpeciesRecord]) -> None:
        self._records: tuple[SpeciesRecord, ...] = tuple(records)
        self._indexed = tuple(
            _IndexedRecord(
                record=record,
                common=lookup_key(record.common_name),
                scientific=lookup_key(record.scientific_name),
            )
            for record in self._records
        )
        self._by_common: dict[str, SpeciesRecord] = {}
        self._by_scientific: dict[str, SpeciesRecord] = {}
        self._by_code: dict[str, SpeciesRecord] = {}
        # First occurrence wins so lookups agree with catalog order.
        for entry in self._indexed:
            self._by_common.setdefault(entry.common, entry.record)
            self._by_scientific.setdefault(entry.scientific, entry.record)
            if entry.record.reference_code:
                self._by_code.setdefault(lookup_key(entry.record.reference_code), entry.record)
        log.debug("Built taxonomy catalog with %s species", len(self._records))

    @classmethod
    def from_rows(cls, rows: Iterable[object]) -> TaxonomyCatalog:
        records: list[SpeciesRecord] = []
        skipped = 0
        for row in rows:
            record = species_record_from_row(row)
            if record is None:
                skipped += 1
                continue
            records.append(record)
        if skipped:
            log.warning("Skipped %s malformed taxonomy rows", skipped)
        return cls(records)

    @property
    def records(self) -> tuple[SpeciesRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SpeciesRecord]:
        return iter(self._records)

    def by_common_name(self, name: object) -> SpeciesRecord | None:
        key = lookup_key(name)
        return self._by_common.get(key) if key else None

    def by_scientific_name(self, name: object) -> SpeciesRecord | None:
        key = lookup_key(name)
        return self._by_scientific.get(key) if key else None

    def by_reference_code(self, code: object) -> SpeciesRecord | None:
        key = lookup_key(code)
        return self._by_code.get(key) if key else None

    def search(self, query: object, limit: object = DEFAULT_SEARCH_LIMIT) -> list[SearchResult]:
        """Rank species whose names start with or contain ``query``.

        Common-name prefixes come first, then scientific-name prefixes, then substring matches
        in either name. Ties are broken alphabetically by common name so that the order never
        depends on catalog order or sort stability.
        """

        normalized = lookup_key(query)
        if not normalized:
            return []
        effective_limit = clamp_search_limit(limit)

        ranked: list[tuple[SearchRank, str, str, SpeciesRecord]] = []
        for entry in self._indexed:
            rank = entry.rank(normalized)
            if rank is None:
                continue
            record = entry.record
            ranked.append((rank, record.common_name.casefold(), record.common_name, record))

        best = heapq.nsmallest(effective_limit, ranked, key=lambda item: item[:3])
        return [SearchResult.from_record(record) for *_, record in best]


__all__ = [
    "DEFAULT_SEARCH_LIMIT",
    "MAX_SEARCH_LIMIT",
    "MIN_SEARCH_LIMIT",
    "SearchRank",
    "TaxonomyCatalog",
    "clamp_search_limit",
    "lookup_key",
    "species_record_from_row",
]
