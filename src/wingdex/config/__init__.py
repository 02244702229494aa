"""Application configuration helpers."""

from __future__ import annotations

from .env import env_float, env_int, optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging
from .storage import StorageConfig, get_storage_config
from .taxonomy import TaxonomyConfig, get_taxonomy_config

__all__ = [
    "ConfigurationError",
    "StorageConfig",
    "TaxonomyConfig",
    "configure_logging",
    "env_float",
    "env_int",
    "get_storage_config",
    "get_taxonomy_config",
    "optional_env_var",
]
