"""Kit-wide configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class ProtokitConfig:
    """Immutable kit configuration."""

    strict_mixins: bool = False
    log_level: str = "INFO"


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with kit-prefixed override."""
    value = os.getenv("PROTOKIT_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_protokit_config() -> ProtokitConfig:
    """Load immutable configuration from env vars."""
    return ProtokitConfig(
        strict_mixins=_flag("PROTOKIT_STRICT_MIXINS", False),
        log_level=resolve_log_level_name(),
    )
