"""Public logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProtokitLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json


def configure_logging(config: ProtokitLoggingConfig | None = None) -> None:
    """Attach handlers for ``config`` to the ``protokit`` logger.

    Without ``config`` the level is read from the environment.
    """
    from protokit.runtime.logging import configure_protokit_logging

    configure_protokit_logging(config)
