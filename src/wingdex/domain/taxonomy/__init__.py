"""Species taxonomy: catalog lookups, search and name resolution."""

from __future__ import annotations

from .catalog import (
    DEFAULT_SEARCH_LIMIT,
    MAX_SEARCH_LIMIT,
    MIN_SEARCH_LIMIT,
    SearchRank,
    TaxonomyCatalog,
    clamp_search_limit,
    species_record_from_row,
)
from .resolver import DEFAULT_FUZZY_THRESHOLD, NameResolver
from .species_names import (
    derive_reference_code,
    display_name,
    format_species_label,
    scientific_name,
    tokenize,
)

__all__ = [
    "DEFAULT_FUZZY_THRESHOLD",
    "DEFAULT_SEARCH_LIMIT",
    "MAX_SEARCH_LIMIT",
    "MIN_SEARCH_LIMIT",
    "NameResolver",
    "SearchRank",
    "TaxonomyCatalog",
    "clamp_search_limit",
    "derive_reference_code",
    "display_name",
    "format_species_label",
    "scientific_name",
    "species_record_from_row",
    "tokenize",
]
