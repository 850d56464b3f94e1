"""Structural interface declaration and checking."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from protokit.api.errors import InitError, ValidationError
from protokit.api.interfaces import InterfaceContract
from protokit.api.types import TypeClassifier, TypeTag
from protokit.runtime.classifier import default_classifier
from protokit.runtime.delegation import has_undefined_property, lookup
from protokit.runtime.logging import get_protokit_logger

_LOG = get_protokit_logger("interface")


class Interface(InterfaceContract):
    """Named mapping of property names to required type tags.

    ``matches`` never returns ``False``: a mismatch raises ``ValidationError``
    naming the first declared property that failed.

        resizable = Interface("resizable", {"resize": "function", "element": "htmlelement"})
        if resizable.matches(widget):
            layout(widget)
    """

    def __init__(
        self,
        name: str,
        properties: Mapping[str, str],
        *,
        classifier: TypeClassifier | None = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise TypeError(f"interface name must be a non-empty string, {type(name).__name__} given")
        if not isinstance(properties, Mapping):
            raise TypeError(f"interface properties must be a mapping, {type(properties).__name__} given")
        declared: dict[str, str] = {}
        for prop, tag in properties.items():
            if not isinstance(prop, str) or not prop:
                raise TypeError(
                    f'interface "{name}" properties can only contain non-empty strings, '
                    f"{type(prop).__name__} given"
                )
            if not isinstance(tag, str):
                raise TypeError(f'interface "{name}" type for "{prop}" must be a string, {type(tag).__name__} given')
            declared[prop] = tag.lower()
        self._name = name
        self._properties = MappingProxyType(declared)
        self._classifier = classifier if classifier is not None else default_classifier()

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> Mapping[str, str]:
        return self._properties

    def matches(self, obj: object) -> Literal[True]:
        name = getattr(self, "_name", None)
        properties = getattr(self, "_properties", None)
        classifier = getattr(self, "_classifier", None)
        if not name or properties is None or classifier is None:
            raise InitError("matches called on a non-initialised interface")
        for prop, expected in properties.items():
            gotten = classifier.classify(lookup(obj, prop))
            if expected == TypeTag.UNDEFINED and not has_undefined_property(obj, prop):
                gotten = TypeTag.MISSING
            if gotten != expected:
                _LOG.debug(
                    "interface_mismatch interface=%s property=%s observed=%s expected=%s",
                    name,
                    prop,
                    gotten,
                    expected,
                )
                raise ValidationError(name, prop, str(gotten), expected)
        return True

    def __repr__(self) -> str:
        return f"Interface({self._name!r}, {dict(self._properties)!r})"
