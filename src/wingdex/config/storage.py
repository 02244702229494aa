"""Where the life-list snapshot lives on disk."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

APP_DIR_NAME: Final[str] = "wingdex"
DEFAULT_SNAPSHOT_FILENAME: Final[str] = "wingdex.json"
DEFAULT_USER_ID: Final[str] = "local-user"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Snapshot location plus the user id stamped on imported outings."""

    data_dir: Path
    snapshot_filename: str = DEFAULT_SNAPSHOT_FILENAME
    user_id: str = DEFAULT_USER_ID

    @classmethod
    def from_environment(cls) -> StorageConfig:
        data_dir = optional_env_var("WINGDEX_DATA_DIR")
        return cls(
            data_dir=Path(data_dir) if data_dir else platform_data_dir(),
            snapshot_filename=(
                optional_env_var("WINGDEX_SNAPSHOT_FILENAME") or DEFAULT_SNAPSHOT_FILENAME
            ),
            user_id=optional_env_var("WINGDEX_USER_ID") or DEFAULT_USER_ID,
        )

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def ensure_data_dir(self) -> Path:
        resolved = self.resolve_data_dir()
        resolved.mkdir(parents=True, exist_ok=True)
        return resolved

    def snapshot_path(self, *, ensure: bool = True) -> Path:
        """Full path of the snapshot file; creates the data directory unless ``ensure`` is off."""

        directory = self.ensure_data_dir() if ensure else self.resolve_data_dir()
        return directory / self.snapshot_filename


def platform_data_dir() -> Path:
    """Per-user data directory: ``%LOCALAPPDATA%`` on Windows, XDG elsewhere."""

    if os.name == "nt":
        root = optional_env_var("LOCALAPPDATA")
        home_default = Path.home() / "AppData" / "Local"
    else:
        root = optional_env_var("XDG_DATA_HOME")
        home_default = Path.home() / ".local" / "share"
    return ((Path(root) if root else home_default) / APP_DIR_NAME).expanduser().resolve()


def get_storage_config() -> StorageConfig:
    return StorageConfig.from_environment()
