"""JSON file store for a user's life-list snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from wingdex.domain.model import LifeListSnapshot

from .schema import DexEntryList, SnapshotPayload
from .translator import dex_entry_from_payload, snapshot_from_payload, snapshot_to_payload

if TYPE_CHECKING:
    from pathlib import Path

    from wingdex.domain.model import DexEntry

log = logging.getLogger(__name__)


class SnapshotError(RuntimeError):
    """Raised when a snapshot or exported Dex cannot be read or does not validate."""


@dataclass(frozen=True, slots=True)
class JsonSnapshotStore:
    """Keep ``{outings, observations, dex}`` in a single JSON document.

    Writes go to a sibling temporary file that then replaces the target, so readers never
    see a half-written snapshot. A missing file reads as an empty snapshot.
    """

    path: Path

    def load(self) -> LifeListSnapshot:
        if not self.path.exists():
            log.debug("Snapshot %s does not exist yet", self.path)
            return LifeListSnapshot()
        text = _read_text(self.path)
        try:
            payload = SnapshotPayload.model_validate_json(text)
        except ValidationError as exc:
            raise SnapshotError(f"Invalid snapshot {self.path}: {exc}") from exc
        return snapshot_from_payload(payload)

    def save(self, snapshot: LifeListSnapshot) -> None:
        document = snapshot_to_payload(snapshot).model_dump_json(indent=2, by_alias=True)
        temporary = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temporary.write_text(document, encoding="utf-8")
            temporary.replace(self.path)
        except OSError as exc:
            temporary.unlink(missing_ok=True)
            raise SnapshotError(f"Cannot write snapshot {self.path}: {exc}") from exc
        log.debug(
            "Saved snapshot %s: outings=%s, observations=%s, dex=%s",
            self.path,
            len(snapshot.outings),
            len(snapshot.observations),
            len(snapshot.dex),
        )


def load_exported_dex(path: Path) -> list[DexEntry]:
    """Read an exported Dex: either a bare JSON array or a snapshot with a ``dex`` key."""

    text = _read_text(path)
    try:
        if text.lstrip().startswith("["):
            payloads = DexEntryList.validate_json(text)
        else:
            payloads = SnapshotPayload.model_validate_json(text).dex
    except ValidationError as exc:
        raise SnapshotError(f"Invalid Dex export {path}: {exc}") from exc
    return [dex_entry_from_payload(payload) for payload in payloads]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Cannot read {path}: {exc}") from exc
