"""JSON codec helpers for structured log payloads."""

from __future__ import annotations

import json
from typing import Any

import orjson


def _fallback(value: object) -> str:
    return repr(value)


def dumps_bytes(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
    compact: bool = True,
) -> bytes:
    """Serialize payload to UTF-8 JSON bytes; unknown values render via ``repr``."""
    if compact:
        options = 0
        if pretty:
            options |= orjson.OPT_INDENT_2
        if sort_keys:
            options |= orjson.OPT_SORT_KEYS
        return orjson.dumps(payload, default=_fallback, option=options)
    text = json.dumps(
        payload,
        ensure_ascii=True,
        indent=2 if pretty else None,
        sort_keys=bool(sort_keys),
        default=_fallback,
    )
    return text.encode("utf-8")


def dumps_text(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
    compact: bool = True,
) -> str:
    return dumps_bytes(
        payload,
        pretty=pretty,
        sort_keys=sort_keys,
        compact=compact,
    ).decode("utf-8")


__all__ = ["dumps_bytes", "dumps_text"]
