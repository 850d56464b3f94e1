"""Public object-composition contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from protokit.api.mixins import MixinRegistry
    from protokit.runtime.delegation import ProtoObject

# Back-reference from an enhanced object to the template it was built from.
TEMPLATE_KEY: Final = "_template"


class ObjectComposer(ABC):
    """Creates delegating objects and enhanced copies of templates."""

    @abstractmethod
    def create(
        self,
        base: object,
        *,
        mixins: Sequence[str] | None = None,
        args: Sequence[object] | None = None,
    ) -> ProtoObject:
        """Create object delegating to ``base``, applying mixins and ``init``."""

    @abstractmethod
    def enhance(
        self,
        base: object,
        overlay: Mapping[str, object] | ProtoObject,
        *,
        mixins: Sequence[str] | None = None,
        args: Sequence[object] | None = None,
    ) -> ProtoObject:
        """Deep-merge ``overlay`` into a delegating copy of ``base``."""


def create_object_composer(registry: MixinRegistry) -> ObjectComposer:
    """Create default composer resolving mixins through ``registry``."""
    from protokit.runtime.composer import RuntimeObjectComposer

    return RuntimeObjectComposer(registry)
