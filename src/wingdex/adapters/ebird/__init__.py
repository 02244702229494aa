"""Public interface for the eBird checklist adapter."""

from __future__ import annotations

from .export import (
    DEX_HEADERS,
    EBIRD_RECORD_HEADERS,
    export_dex_csv,
    export_outing_csv,
    sanitize_cell,
    split_scientific_name,
)
from .parser import parse_ebird_csv, parse_observed_at

__all__ = [
    "DEX_HEADERS",
    "EBIRD_RECORD_HEADERS",
    "export_dex_csv",
    "export_outing_csv",
    "parse_ebird_csv",
    "parse_observed_at",
    "sanitize_cell",
    "split_scientific_name",
]
