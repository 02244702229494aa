from __future__ import annotations

from pathlib import Path

import pytest

from wingdex.config import (
    ConfigurationError,
    TaxonomyConfig,
    env_float,
    env_int,
    get_taxonomy_config,
    optional_env_var,
)

_TAXONOMY_VARS = (
    "WINGDEX_TAXONOMY_PATH",
    "WINGDEX_SEARCH_LIMIT",
    "WINGDEX_FUZZY_THRESHOLD",
    "WINGDEX_CANDIDATE_MIN_CONFIDENCE",
)


@pytest.fixture(autouse=True)
def _clear_taxonomy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _TAXONOMY_VARS:
        monkeypatch.delenv(name, raising=False)


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")
    assert optional_env_var("EXAMPLE_VAR") is None

    monkeypatch.setenv("EXAMPLE_VAR", " value ")
    assert optional_env_var("EXAMPLE_VAR") == "value"


def test_numeric_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLOAT", "0.75")
    monkeypatch.setenv("EXAMPLE_INT", "12")
    monkeypatch.delenv("EXAMPLE_MISSING", raising=False)

    assert env_float("EXAMPLE_FLOAT", 0.1) == 0.75
    assert env_int("EXAMPLE_INT", 3) == 12
    assert env_int("EXAMPLE_MISSING", 3) == 3


@pytest.mark.parametrize("raw", ["abc", "nan", "inf"])
def test_env_float_rejects_non_finite_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("EXAMPLE_FLOAT", raw)

    with pytest.raises(ConfigurationError, match="EXAMPLE_FLOAT"):
        env_float("EXAMPLE_FLOAT", 0.5)


def test_env_int_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_INT", "eight")

    with pytest.raises(ConfigurationError, match="integer"):
        env_int("EXAMPLE_INT", 8)


def test_taxonomy_config_defaults() -> None:
    config = get_taxonomy_config()

    assert config == TaxonomyConfig()
    assert config.path is None
    assert config.search_limit == 8
    assert config.fuzzy_threshold == 0.5
    assert config.candidate_min_confidence == 0.3


def test_taxonomy_config_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WINGDEX_TAXONOMY_PATH", "/srv/taxonomy.json")
    monkeypatch.setenv("WINGDEX_SEARCH_LIMIT", "12")
    monkeypatch.setenv("WINGDEX_FUZZY_THRESHOLD", "0.6")
    monkeypatch.setenv("WINGDEX_CANDIDATE_MIN_CONFIDENCE", "0.45")

    config = TaxonomyConfig.from_environment()

    assert config.path == Path("/srv/taxonomy.json")
    assert config.search_limit == 12
    assert config.fuzzy_threshold == 0.6
    assert config.candidate_min_confidence == 0.45


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("WINGDEX_FUZZY_THRESHOLD", "1.0"),
        ("WINGDEX_FUZZY_THRESHOLD", "-0.2"),
        ("WINGDEX_CANDIDATE_MIN_CONFIDENCE", "1.5"),
    ],
)
def test_taxonomy_config_rejects_out_of_range_values(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigurationError):
        get_taxonomy_config()
