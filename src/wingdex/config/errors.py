"""Errors raised while reading settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """An environment setting is present but unusable (wrong type or out of range)."""
