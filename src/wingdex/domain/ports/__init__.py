"""Ports the domain expects adapters to provide."""

from __future__ import annotations

from .persistence import SnapshotStore
from .taxonomy import TaxonomySource

__all__ = ["SnapshotStore", "TaxonomySource"]
