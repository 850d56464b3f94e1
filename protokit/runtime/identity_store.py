"""Identity-keyed side table for per-object private records."""

from __future__ import annotations

import weakref
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from protokit.runtime.logging import get_protokit_logger

_LOG = get_protokit_logger("identity_store")

TRecord = TypeVar("TRecord")


@dataclass(slots=True)
class _Entry(Generic[TRecord]):
    ref: Callable[[], object | None]
    record: TRecord


class IdentityStore(Generic[TRecord]):
    """Maps object identity to a record without writing onto the object.

    Keys are compared by reference, never by equality. Identities that
    support weak references are held weakly and their record is dropped once
    they are collected; other identities are retained for the store's lifetime.
    """

    def __init__(self, factory: Callable[[], TRecord]) -> None:
        self._factory = factory
        self._entries: dict[int, _Entry[TRecord]] = {}

    def record_for(self, identity: object) -> TRecord:
        """Return the record for ``identity``, creating it on first sight."""
        key = id(identity)
        entry = self._entries.get(key)
        if entry is not None and entry.ref() is identity:
            return entry.record
        record = self._factory()
        self._entries[key] = _Entry(ref=self._reference(key, identity), record=record)
        return record

    def __contains__(self, identity: object) -> bool:
        entry = self._entries.get(id(identity))
        return entry is not None and entry.ref() is identity

    def __len__(self) -> int:
        return len(self._entries)

    def _reference(self, key: int, identity: object) -> Callable[[], object | None]:
        owner = weakref.ref(self)

        def _evict(dead: weakref.ref[object]) -> None:
            store = owner()
            if store is None:
                return
            entry = store._entries.get(key)
            if entry is not None and entry.ref is dead:
                del store._entries[key]

        try:
            return weakref.ref(identity, _evict)
        except TypeError:
            _LOG.debug("identity_store strong_ref type=%s", type(identity).__name__)
            return lambda: identity


_DEFAULT_STORE: IdentityStore[dict] = IdentityStore(dict)


def default_identity_store() -> IdentityStore[dict]:
    """Return the process-wide store backing namespace mixin records."""
    return _DEFAULT_STORE


__all__ = ["IdentityStore", "default_identity_store"]
