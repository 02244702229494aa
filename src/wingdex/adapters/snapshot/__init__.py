"""Public interface for the JSON snapshot adapter."""

from __future__ import annotations

from .schema import DexEntryPayload, ObservationPayload, OutingPayload, SnapshotPayload
from .store import JsonSnapshotStore, SnapshotError, load_exported_dex
from .translator import snapshot_from_payload, snapshot_to_payload

__all__ = [
    "DexEntryPayload",
    "JsonSnapshotStore",
    "ObservationPayload",
    "OutingPayload",
    "SnapshotError",
    "SnapshotPayload",
    "load_exported_dex",
    "snapshot_from_payload",
    "snapshot_to_payload",
]
