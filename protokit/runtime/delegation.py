"""Delegating objects and pure property lookup over delegation chains."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import FunctionType, MethodType

from protokit.api.types import UNDEFINED

_SLOTS = frozenset({"_own", "_delegate"})


class ProtoObject:
    """Object with own properties and a single delegate consulted on lookup misses.

    The delegate is fixed at construction. It may be another ``ProtoObject``,
    a mapping (read by key), any other object (read by attribute), or ``None``
    for a root. Writes and deletes only ever touch own properties. Plain
    functions read as attributes are bound to the reading object; names that
    collide with this class's own methods are reachable through item access.
    """

    __slots__ = ("_own", "_delegate", "__weakref__")

    def __init__(self, properties: Mapping[str, object] | None = None, *, delegate: object = None) -> None:
        object.__setattr__(self, "_own", {})
        object.__setattr__(self, "_delegate", delegate)
        if properties is not None:
            for name, value in properties.items():
                self[name] = value

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ProtoObject:
        """Build a root object from plain data, converting nested mappings."""
        converted: dict[str, object] = {}
        for name, value in data.items():
            converted[name] = cls.from_mapping(value) if isinstance(value, Mapping) else value
        return cls(converted)

    @property
    def delegate(self) -> object:
        return self._delegate

    def own_keys(self) -> tuple[str, ...]:
        return tuple(self._own)

    def own_items(self) -> tuple[tuple[str, object], ...]:
        return tuple(self._own.items())

    def has_own(self, name: str) -> bool:
        return name in self._own

    def get(self, name: str, default: object = UNDEFINED) -> object:
        """Return raw value visible through the chain, or ``default``."""
        if not has_property(self, name):
            return default
        return lookup(self, name)

    def __getattr__(self, name: str) -> object:
        if name in _SLOTS or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        if not has_property(self, name):
            raise AttributeError(f"{type(self).__name__!s} has no property {name!r}")
        return bind_to(self, lookup(self, name))

    def __setattr__(self, name: str, value: object) -> None:
        if name in _SLOTS:
            raise AttributeError(f"{name} is read-only")
        self._own[name] = value

    def __delattr__(self, name: str) -> None:
        try:
            del self._own[name]
        except KeyError:
            raise AttributeError(name) from None

    def __getitem__(self, name: str) -> object:
        if not has_property(self, name):
            raise KeyError(name)
        return lookup(self, name)

    def __setitem__(self, name: str, value: object) -> None:
        if not isinstance(name, str):
            raise TypeError(f"property names must be strings, {type(name).__name__} given")
        self._own[name] = value

    def __delitem__(self, name: str) -> None:
        del self._own[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and has_property(self, name)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._own))

    def __len__(self) -> int:
        return len(self._own)

    def __repr__(self) -> str:
        return f"ProtoObject({self._own!r})"


def delegate_of(node: object) -> object:
    """Return the next node in the chain, ``None`` at a root or foreign node."""
    if isinstance(node, ProtoObject):
        return node._delegate
    return None


def iter_chain(target: object) -> Iterator[object]:
    """Yield ``target`` and each delegate, stopping on self-delegation."""
    node = target
    while node is not None:
        yield node
        parent = delegate_of(node)
        if parent is node:
            return
        node = parent


def bind_to(receiver: object, value: object) -> object:
    """Bind a callable read through the chain of ``receiver`` to ``receiver``.

    Plain functions are bound directly. Methods already bound to a foreign
    node of the chain are re-bound so ``self`` is the reading object.
    """
    if isinstance(value, FunctionType):
        return MethodType(value, receiver)
    if isinstance(value, MethodType):
        owner = value.__self__
        if isinstance(owner, (ProtoObject, type)) or owner is receiver:
            return value
        if any(node is owner for node in iter_chain(receiver)):
            return MethodType(value.__func__, receiver)
    return value


def _read_own(node: object, name: str) -> tuple[bool, object]:
    if isinstance(node, ProtoObject):
        if name in node._own:
            return True, node._own[name]
        return False, UNDEFINED
    if isinstance(node, Mapping):
        if name in node:
            return True, node[name]
        return False, UNDEFINED
    try:
        return True, getattr(node, name)
    except AttributeError:
        return False, UNDEFINED


def lookup(target: object, name: str) -> object:
    """Return the raw value of ``name`` visible through ``target``'s chain, else ``UNDEFINED``."""
    for node in iter_chain(target):
        found, value = _read_own(node, name)
        if found:
            return value
    return UNDEFINED


def has_property(target: object, name: str) -> bool:
    """Return whether ``name`` exists anywhere in ``target``'s chain."""
    return any(_read_own(node, name)[0] for node in iter_chain(target))


def has_undefined_property(target: object, name: str) -> bool:
    """Return whether ``name`` exists in the chain, own included, holding ``UNDEFINED``."""
    for node in iter_chain(target):
        found, value = _read_own(node, name)
        if found:
            return value is UNDEFINED
    return False


__all__ = [
    "ProtoObject",
    "bind_to",
    "delegate_of",
    "has_property",
    "has_undefined_property",
    "iter_chain",
    "lookup",
]
