"""Life-list aggregation: roll confirmed sightings up into per-species Dex entries.

Three modes share one fold:

- :func:`rebuild` recomputes everything from outings and observations
- :func:`apply_new_confirmed` recomputes only the species of a freshly confirmed outing
- :func:`merge_external` folds in an exported Dex that has no local observations

None of them perform I/O or keep state; callers serialize writes per user.
"""

from __future__ import annotations

from .incremental import apply_new_confirmed
from .merge import merge_external, patch_metadata
from .modes import (
    AggregationRequest,
    AggregationResult,
    ExternalMerge,
    IncrementalUpdate,
    Rebuild,
    aggregate,
)
from .rebuild import rebuild

__all__ = [
    "AggregationRequest",
    "AggregationResult",
    "ExternalMerge",
    "IncrementalUpdate",
    "Rebuild",
    "aggregate",
    "apply_new_confirmed",
    "merge_external",
    "patch_metadata",
    "rebuild",
]
