"""Serialization helpers for log and export paths."""

from protokit.diagnostics.json_codec import dumps_bytes, dumps_text

__all__ = ["dumps_bytes", "dumps_text"]
