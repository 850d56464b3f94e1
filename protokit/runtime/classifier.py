"""Runtime type classification with pluggable external-handle predicates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, time
from numbers import Real

from protokit.api.types import UNDEFINED, HandlePredicate, TypeClassifier, TypeTag
from protokit.runtime.delegation import ProtoObject, lookup
from protokit.runtime.errors import log_recoverable
from protokit.runtime.logging import get_protokit_logger

_LOG = get_protokit_logger("classifier")


def _generic_tag(value: object) -> str:
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Real):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, (list, tuple)):
        return TypeTag.ARRAY
    if isinstance(value, (date, time)):
        return TypeTag.DATE
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP
    if isinstance(value, BaseException):
        return TypeTag.ERROR
    if isinstance(value, (ProtoObject, Mapping)):
        return TypeTag.OBJECT
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.OBJECT


def is_ui_node(value: object) -> bool:
    """Duck-typed UI node: string ``node_name`` and numeric ``node_type``.

    A property that fails to read counts as no match.
    """
    try:
        node_name = lookup(value, "node_name")
        node_type = lookup(value, "node_type")
    except Exception:
        return False
    return _generic_or_none(node_name) == TypeTag.STRING and _generic_or_none(node_type) == TypeTag.NUMBER


def _generic_or_none(value: object) -> str | None:
    if value is UNDEFINED or value is None:
        return None
    return _generic_tag(value)


class RuntimeTypeClassifier(TypeClassifier):
    """Classifier consulting handle predicates before generic classification."""

    def __init__(self, *, include_defaults: bool = True) -> None:
        self._handles: dict[str, HandlePredicate] = {}
        if include_defaults:
            self._handles[TypeTag.HTMLELEMENT.value] = is_ui_node

    def register_handle(self, tag: str, predicate: HandlePredicate) -> None:
        """Register or replace predicate for one handle tag."""
        if not isinstance(tag, str):
            raise TypeError(f"handle tag must be a string, {type(tag).__name__} given")
        normalized = tag.strip().lower()
        if not normalized:
            raise ValueError("handle tag must not be empty")
        if normalized == TypeTag.MISSING:
            raise ValueError(f"{normalized!r} is reserved for validation")
        if not callable(predicate):
            raise TypeError("handle predicate must be callable")
        self._handles[normalized] = predicate

    def handle_tags(self) -> tuple[str, ...]:
        return tuple(self._handles)

    def classify(self, value: object) -> str:
        if value is UNDEFINED:
            return TypeTag.UNDEFINED
        if value is None:
            return TypeTag.NULL
        for tag, predicate in tuple(self._handles.items()):
            try:
                accepted = bool(predicate(value))
            except Exception:
                log_recoverable(_LOG, f"handle predicate failed: tag={tag}")
                continue
            if accepted:
                return tag
        return _generic_tag(value)


_DEFAULT_CLASSIFIER = RuntimeTypeClassifier()


def default_classifier() -> RuntimeTypeClassifier:
    """Return the process-wide classifier used when none is supplied."""
    return _DEFAULT_CLASSIFIER


def classify(value: object) -> str:
    """Classify ``value`` with the process-wide classifier."""
    return _DEFAULT_CLASSIFIER.classify(value)


__all__ = ["RuntimeTypeClassifier", "classify", "default_classifier", "is_ui_node"]
