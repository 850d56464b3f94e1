"""Public type-classification contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import StrEnum
from typing import Final, final


@final
class _Undefined:
    """Marker for an absent value, distinct from ``None``."""

    __slots__ = ()
    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class TypeTag(StrEnum):
    """Canonical lowercase type tags."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNCTION = "function"
    OBJECT = "object"
    ARRAY = "array"
    UNDEFINED = "undefined"
    NULL = "null"
    DATE = "date"
    REGEXP = "regexp"
    ERROR = "error"
    HTMLELEMENT = "htmlelement"
    # Validator-only; classifiers never produce it.
    MISSING = "missing"


HandlePredicate = Callable[[object], bool]


class TypeClassifier(ABC):
    """Value classifier with a pluggable table of external-handle predicates."""

    @abstractmethod
    def register_handle(self, tag: str, predicate: HandlePredicate) -> None:
        """Register predicate recognising one kind of external handle."""

    @abstractmethod
    def handle_tags(self) -> tuple[str, ...]:
        """Return registered handle tags in evaluation order."""

    @abstractmethod
    def classify(self, value: object) -> str:
        """Return the canonical tag for ``value``."""


def create_type_classifier() -> TypeClassifier:
    """Create classifier pre-loaded with the default handle predicates."""
    from protokit.runtime.classifier import RuntimeTypeClassifier

    return RuntimeTypeClassifier()
