"""Namespace binding of the composer and mixin registry."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from protokit.runtime.composer import RuntimeObjectComposer
from protokit.runtime.config import ProtokitConfig
from protokit.runtime.delegation import ProtoObject
from protokit.runtime.identity_store import IdentityStore
from protokit.runtime.mixin_registry import RuntimeMixinRegistry

TNamespace = TypeVar("TNamespace")


class Toolkit:
    """Fresh namespace exposing ``create``, ``enhance`` and ``mixins``.

    Mixins registered on one toolkit are invisible to every other toolkit.
    """

    mixins: RuntimeMixinRegistry
    create: Callable[..., ProtoObject]
    enhance: Callable[..., ProtoObject]

    def __init__(
        self,
        *,
        store: IdentityStore[dict] | None = None,
        config: ProtokitConfig | None = None,
    ) -> None:
        bind_toolkit(self, store=store, config=config)


def bind_toolkit(
    namespace: TNamespace,
    *,
    store: IdentityStore[dict] | None = None,
    config: ProtokitConfig | None = None,
) -> TNamespace:
    """Attach ``create``, ``enhance`` and ``mixins`` to ``namespace``.

    The mixin record is keyed on ``namespace`` itself, so binding the same
    object twice shares its registrations.
    """
    registry = RuntimeMixinRegistry(namespace, store=store, config=config)
    composer = RuntimeObjectComposer(registry)
    setattr(namespace, "mixins", registry)
    setattr(namespace, "create", composer.create)
    setattr(namespace, "enhance", composer.enhance)
    return namespace


__all__ = ["Toolkit", "bind_toolkit"]
