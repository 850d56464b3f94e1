"""Public mixin-registry contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from protokit.runtime.delegation import ProtoObject
    from protokit.runtime.mixin_registry import Mixin

# Called with the receiver first, then any positional arguments.
MixinFunction = Callable[..., object]


class MixinRegistry(ABC):
    """Per-namespace store of named capability fragments."""

    @abstractmethod
    def add(self, name: str, mixin: MixinFunction) -> None:
        """Register mixin under ``name``."""

    @abstractmethod
    def get(self, name: str) -> Mixin:
        """Return registered mixin."""

    @abstractmethod
    def resolve(self, names: Sequence[str]) -> tuple[Mixin, ...]:
        """Resolve registered mixins in sequence order."""

    @abstractmethod
    def exec(self, name: str, args: Sequence[object] | None = None) -> ProtoObject:
        """Instantiate named mixin as a standalone object."""

    @abstractmethod
    def list(self) -> list[str]:
        """Return registered names in registration order."""


def create_mixin_registry(owner: object) -> MixinRegistry:
    """Create default registry keyed on ``owner``'s identity."""
    from protokit.runtime.mixin_registry import RuntimeMixinRegistry

    return RuntimeMixinRegistry(owner)
