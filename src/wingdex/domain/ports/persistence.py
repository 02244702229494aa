"""Persistence port for a user's life-list snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wingdex.domain.model import LifeListSnapshot


@runtime_checkable
class SnapshotStore(Protocol):
    """Load and replace a whole snapshot.

    Callers own read-modify-write atomicity: the aggregation core never merges
    concurrent writes for the same user.
    """

    def load(self) -> LifeListSnapshot: ...

    def save(self, snapshot: LifeListSnapshot) -> None: ...


__all__ = ["SnapshotStore"]
