"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Certainty(StrEnum):
    """How sure the observer is about an observation.

    Only ``CONFIRMED`` observations contribute to the life list.
    """

    CONFIRMED = "confirmed"
    POSSIBLE = "possible"
    PENDING = "pending"
    REJECTED = "rejected"


class ImportConflict(StrEnum):
    """Classification of an imported checklist row against the current Dex."""

    NEW = "new"
    DUPLICATE = "duplicate"
    UPDATE_DATES = "update_dates"
