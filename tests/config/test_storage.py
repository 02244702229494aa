from __future__ import annotations

from typing import TYPE_CHECKING

from wingdex.config import StorageConfig, get_storage_config

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def test_storage_config_ensure_data_dir(tmp_path: Path) -> None:
    target = tmp_path / "data"
    config = StorageConfig(data_dir=target)

    resolved = config.ensure_data_dir()

    assert resolved == target.resolve()
    assert resolved.exists()
    assert config.snapshot_path() == resolved / "wingdex.json"


def test_snapshot_path_without_ensure_does_not_create(tmp_path: Path) -> None:
    config = StorageConfig(data_dir=tmp_path / "later", snapshot_filename="life.json")

    path = config.snapshot_path(ensure=False)

    assert path.name == "life.json"
    assert not path.parent.exists()


def test_get_storage_config_uses_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WINGDEX_DATA_DIR", str(tmp_path / "env-data"))
    monkeypatch.setenv("WINGDEX_USER_ID", "birder-42")
    monkeypatch.setenv("WINGDEX_SNAPSHOT_FILENAME", "life.json")

    config = get_storage_config()

    assert config.data_dir == tmp_path / "env-data"
    assert config.user_id == "birder-42"
    assert config.snapshot_path(ensure=False).name == "life.json"


def test_get_storage_config_defaults_to_xdg(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("WINGDEX_DATA_DIR", raising=False)
    monkeypatch.delenv("WINGDEX_USER_ID", raising=False)
    monkeypatch.setenv("WINGDEX_SNAPSHOT_FILENAME", "  ")
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg"))

    config = get_storage_config()

    assert config.data_dir == (tmp_path / "xdg" / "wingdex").resolve()
    assert config.user_id == "local-user"
    assert config.snapshot_filename == "wingdex.json"
