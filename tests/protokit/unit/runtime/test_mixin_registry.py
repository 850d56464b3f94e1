from __future__ import annotations

import pytest

from protokit.api.errors import (
    DuplicateMixinError,
    MixinConstructionError,
    ReservedNameError,
    UnknownMixinError,
)
from protokit.runtime.delegation import ProtoObject
from protokit.runtime.mixin_registry import Mixin, RuntimeMixinRegistry
from tests.protokit.conftest import FakeNamespace


def _positioned(this, x: int = 0, y: int = 0) -> None:
    this.x = x
    this.y = y


def test_add_list_and_get(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)

    registry.add("positioned", _positioned)
    registry.add("named", lambda this: setattr(this, "name", "anon"))

    assert registry.list() == ["positioned", "named"]
    assert "positioned" in registry
    assert len(registry) == 2
    assert isinstance(registry.get("positioned"), Mixin)


def test_add_rejects_invalid_arguments(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)

    with pytest.raises(TypeError):
        registry.add(3, _positioned)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        registry.add("", _positioned)
    with pytest.raises(TypeError):
        registry.add("positioned", "not callable")  # type: ignore[arg-type]


def test_add_rejects_mixin_that_adds_nothing(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)

    with pytest.raises(MixinConstructionError):
        registry.add("noop", lambda this: None)
    assert registry.list() == []


def test_re_registration_replaces_previous_mixin(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)

    registry.add("flag", lambda this: setattr(this, "flag", 1))
    registry.add("flag", lambda this: setattr(this, "flag", 2))

    assert registry.list() == ["flag"]
    assert registry.exec("flag").flag == 2


def test_strict_mode_rejects_duplicates_and_keywords(store, strict_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=strict_config)
    registry.add("flag", lambda this: setattr(this, "flag", 1))

    with pytest.raises(DuplicateMixinError):
        registry.add("flag", lambda this: setattr(this, "flag", 2))
    with pytest.raises(ReservedNameError):
        registry.add("class", lambda this: setattr(this, "flag", 1))


def test_strict_mode_follows_environment(store, monkeypatch) -> None:
    monkeypatch.setenv("PROTOKIT_STRICT_MIXINS", "yes")
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store)
    registry.add("flag", lambda this: setattr(this, "flag", 1))

    with pytest.raises(DuplicateMixinError):
        registry.add("flag", lambda this: setattr(this, "flag", 1))


def test_registrations_are_scoped_to_owner_identity(store, lenient_config) -> None:
    owner = FakeNamespace()
    first = RuntimeMixinRegistry(owner, store=store, config=lenient_config)
    second = RuntimeMixinRegistry(owner, store=store, config=lenient_config)
    other = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)

    first.add("positioned", _positioned)

    assert second.list() == ["positioned"]
    assert other.list() == []


def test_exec_instantiates_with_positional_args(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)
    registry.add("positioned", _positioned)

    instance = registry.exec("positioned", [1, 2])

    assert (instance.x, instance.y) == (1, 2)
    assert instance.delegate is registry.get("positioned").prototype


def test_exec_instances_share_mixin_prototype(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)
    registry.add("positioned", _positioned)

    def norm(this) -> int:
        return abs(this.x) + abs(this.y)

    registry.get("positioned").prototype.norm = norm

    assert registry.exec("positioned", (3, -4)).norm() == 7
    assert registry.exec("positioned").norm() == 0


def test_mixins_with_required_parameters_can_register(store, lenient_config) -> None:
    def point(this, x, y) -> None:
        this.x = x
        this.y = y

    def labelled(this, *, label) -> None:
        this.label = label

    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)
    registry.add("point", point)
    registry.add("labelled", labelled)

    instance = registry.exec("point", [1, 2])

    assert (instance.x, instance.y) == (1, 2)
    assert registry.list() == ["point", "labelled"]


def test_registering_a_mixin_under_new_name_shares_its_prototype(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)
    registry.add("positioned", _positioned)
    original = registry.get("positioned")

    registry.add("located", original)
    alias = registry.get("located")

    assert alias.name == "located"
    assert alias is not original
    assert alias.prototype is original.prototype
    assert registry.exec("located", [4, 5]).delegate is original.prototype


def test_plain_function_registered_twice_gets_separate_prototypes(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)
    registry.add("first", _positioned)
    registry.add("second", _positioned)

    assert registry.get("first").prototype is not registry.get("second").prototype


def test_exec_rejects_unknown_name_and_bad_args(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)
    registry.add("positioned", _positioned)

    with pytest.raises(TypeError):
        registry.exec("missing")
    with pytest.raises(UnknownMixinError):
        registry.exec("missing")
    with pytest.raises(TypeError):
        registry.exec(5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        registry.exec("positioned", "12")  # type: ignore[arg-type]


def test_mixin_apply_to_uses_existing_receiver() -> None:
    mixin = Mixin("positioned", _positioned)
    receiver = ProtoObject()

    mixin.apply_to(receiver, (5, 6))

    assert receiver.own_items() == (("x", 5), ("y", 6))
    assert receiver.delegate is None


def test_list_is_a_snapshot(store, lenient_config) -> None:
    registry = RuntimeMixinRegistry(FakeNamespace(), store=store, config=lenient_config)
    registry.add("positioned", _positioned)

    names = registry.list()
    registry.add("named", lambda this: setattr(this, "name", "anon"))

    assert names == ["positioned"]
