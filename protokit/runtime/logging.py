"""Namespaced logging for kit modules."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from protokit.api.logging import ProtokitLoggingConfig
from protokit.diagnostics.json_codec import dumps_text
from protokit.runtime.config import load_protokit_config

ROOT_LOGGER_NAME = "protokit"
_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }
)
# Marks handlers installed here so reconfiguration leaves caller handlers alone.
_OWNED_HANDLER_ATTR = "_protokit_owned"


class JsonFormatter(logging.Formatter):
    """JSON formatter with extra-field preservation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return dumps_text(payload)


def get_protokit_logger(name: str) -> logging.Logger:
    """Return logger namespaced under ``protokit``."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def install_null_handler() -> None:
    """Keep kit records silent until the application configures logging."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())


def configure_protokit_logging(config: ProtokitLoggingConfig | None = None) -> logging.Logger:
    """Attach console and optional file handlers to the ``protokit`` logger.

    Without ``config`` the level comes from ``PROTOKIT_LOG_LEVEL``/``LOG_LEVEL``.
    Handlers installed by an earlier call are replaced; the root logger is
    never touched.
    """
    if config is None:
        config = ProtokitLoggingConfig(level_name=load_protokit_config().log_level)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in tuple(logger.handlers):
        if getattr(handler, _OWNED_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _OWNED_HANDLER_ATTR, True)
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))
    return logger


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
