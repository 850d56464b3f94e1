"""Public error kinds raised by the composition kernel and validator."""

from __future__ import annotations


class ProtokitError(Exception):
    """Base class for kit-specific failures."""


class ValidationError(ProtokitError):
    """Object does not match a declared interface."""

    def __init__(self, interface_name: str, property_name: str, observed: str, expected: str) -> None:
        self.interface_name = interface_name
        self.property_name = property_name
        self.observed = observed
        self.expected = expected
        super().__init__(
            f'Object does not match the "{interface_name}" interface: '
            f'"{property_name}" property is {observed}, should be {expected}'
        )


class InitError(ProtokitError):
    """Interface used before it was constructed."""


class UnknownMixinError(ProtokitError, LookupError, TypeError):
    """Named mixin is not registered for the namespace."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'"{name}" mixin cannot be found')


class MixinConstructionError(ProtokitError):
    """Mixin adds no own properties to its receiver."""


class DuplicateMixinError(ProtokitError):
    """Mixin name already registered while strict registration is enabled."""


class ReservedNameError(ProtokitError, ValueError):
    """Name is reserved and cannot be used."""


__all__ = [
    "DuplicateMixinError",
    "InitError",
    "MixinConstructionError",
    "ProtokitError",
    "ReservedNameError",
    "UnknownMixinError",
    "ValidationError",
]
