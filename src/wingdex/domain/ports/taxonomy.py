"""Port for the static taxonomy data source."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable


@runtime_checkable
class TaxonomySource(Protocol):
    """Callable returning taxonomy rows in catalog order.

    Each row is ``(common, scientific, reference_code | "", article_title | None)``; the
    last element may be missing in older data.
    """

    def __call__(self) -> Iterable[object]: ...


__all__ = ["TaxonomySource"]
