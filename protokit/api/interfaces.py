"""Public interface-validation contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Literal


class InterfaceContract(ABC):
    """Structural contract checked against arbitrary objects at runtime."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return interface label."""

    @property
    @abstractmethod
    def properties(self) -> Mapping[str, str]:
        """Return read-only property name to lowercase type tag mapping."""

    @abstractmethod
    def matches(self, obj: object) -> Literal[True]:
        """Return ``True`` or raise ``ValidationError`` on the first mismatch."""


def create_interface(name: str, properties: Mapping[str, str]) -> InterfaceContract:
    """Create default interface implementation."""
    from protokit.runtime.interface import Interface

    return Interface(name, properties)
