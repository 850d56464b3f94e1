from __future__ import annotations

import gc

from protokit.runtime.identity_store import IdentityStore, default_identity_store
from tests.protokit.conftest import FakeNamespace


def test_record_for_returns_same_record_for_same_identity(store) -> None:
    owner = FakeNamespace()

    first = store.record_for(owner)
    first["x"] = 1

    assert store.record_for(owner) is first
    assert owner in store
    assert len(store) == 1


def test_structurally_equal_identities_get_distinct_records(store) -> None:
    left: list[int] = []
    right: list[int] = []
    assert left == right

    store.record_for(left)["tag"] = "left"

    assert store.record_for(right) == {}
    assert store.record_for(left) == {"tag": "left"}


def test_record_is_dropped_when_identity_is_collected(store) -> None:
    owner = FakeNamespace()
    store.record_for(owner)
    assert len(store) == 1

    del owner
    gc.collect()

    assert len(store) == 0


def test_non_weakrefable_identities_are_retained(store) -> None:
    owner = object()
    store.record_for(owner)["kept"] = True

    assert store.record_for(owner) == {"kept": True}


def test_factory_builds_fresh_records() -> None:
    created: list[list[str]] = []

    def factory() -> list[str]:
        record: list[str] = []
        created.append(record)
        return record

    store = IdentityStore(factory)
    store.record_for(FakeNamespace())
    owner = FakeNamespace()
    store.record_for(owner)
    store.record_for(owner)

    assert len(created) == 2


def test_default_store_is_process_wide() -> None:
    assert default_identity_store() is default_identity_store()
