"""Per-namespace mixin registration, application and instantiation."""

from __future__ import annotations

import inspect
import keyword
from collections.abc import Sequence

from protokit.api.errors import (
    DuplicateMixinError,
    MixinConstructionError,
    ReservedNameError,
    UnknownMixinError,
)
from protokit.api.mixins import MixinFunction, MixinRegistry
from protokit.api.types import UNDEFINED
from protokit.runtime.config import ProtokitConfig, load_protokit_config
from protokit.runtime.delegation import ProtoObject
from protokit.runtime.identity_store import IdentityStore, default_identity_store
from protokit.runtime.logging import get_protokit_logger

_LOG = get_protokit_logger("mixins")


def is_sequence(value: object) -> bool:
    """Return whether ``value`` is an ordered, non-text sequence."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _trial_arguments(function: MixinFunction) -> tuple[tuple[object, ...], dict[str, object]]:
    """Fill every required parameter after the receiver with ``UNDEFINED``."""
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return (), {}
    positional: list[object] = []
    keywords: dict[str, object] = {}
    receiver_seen = False
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            if not receiver_seen:
                receiver_seen = True
                continue
            if parameter.default is parameter.empty:
                positional.append(UNDEFINED)
        elif parameter.kind is parameter.KEYWORD_ONLY and parameter.default is parameter.empty:
            keywords[parameter.name] = UNDEFINED
    return tuple(positional), keywords


class Mixin:
    """Named capability fragment with its own prototype.

    ``apply_to`` calls the function with an existing receiver; ``instantiate``
    calls it with a fresh receiver delegating to ``prototype``. Mixins built
    from the same registered ``Mixin`` share its function and prototype.
    """

    __slots__ = ("name", "function", "prototype")

    def __init__(self, name: str, function: MixinFunction, *, prototype: ProtoObject | None = None) -> None:
        self.name = name
        self.function = function
        self.prototype = prototype if prototype is not None else ProtoObject()

    def trial_apply(self, receiver: object) -> None:
        """Apply with ``UNDEFINED`` standing in for every required argument."""
        args, kwargs = _trial_arguments(self.function)
        self.function(receiver, *args, **kwargs)

    def apply_to(self, receiver: object, args: Sequence[object] = ()) -> None:
        self.function(receiver, *args)

    def instantiate(self, args: Sequence[object] = ()) -> ProtoObject:
        instance = ProtoObject(delegate=self.prototype)
        self.function(instance, *args)
        return instance

    def __call__(self, receiver: object, *args: object) -> None:
        self.function(receiver, *args)

    def __repr__(self) -> str:
        return f"Mixin({self.name!r})"


class RuntimeMixinRegistry(MixinRegistry):
    """Mixin registry whose record lives in an identity store keyed on its owner."""

    def __init__(
        self,
        owner: object,
        *,
        store: IdentityStore[dict] | None = None,
        config: ProtokitConfig | None = None,
    ) -> None:
        self._owner = owner
        self._store = store if store is not None else default_identity_store()
        self._config = config

    @property
    def owner(self) -> object:
        return self._owner

    def _record(self) -> dict[str, Mixin]:
        return self._store.record_for(self._owner)

    def _strict(self) -> bool:
        config = self._config if self._config is not None else load_protokit_config()
        return config.strict_mixins

    def add(self, name: str, mixin: MixinFunction) -> None:
        """Register ``mixin`` under ``name``, replacing any earlier registration.

        The mixin is trial-applied to an empty object first, with ``UNDEFINED``
        for each required argument, and rejected if it adds no own properties.
        Strict mode additionally rejects duplicate names and Python keywords.
        A registered ``Mixin`` is re-wrapped under ``name`` and keeps sharing
        its prototype; a plain function gets a fresh prototype per call.
        """
        if not isinstance(name, str) or not name:
            raise TypeError(f"mixin name must be a non-empty string, {type(name).__name__} given")
        if not callable(mixin):
            raise TypeError(f'mixin "{name}" must be callable, {type(mixin).__name__} given')
        record = self._record()
        if self._strict():
            if name in record:
                raise DuplicateMixinError(f'"{name}" mixin has already been defined')
            if keyword.iskeyword(name):
                raise ReservedNameError(f'"{name}" is a reserved word in Python')
        if isinstance(mixin, Mixin):
            entry = Mixin(name, mixin.function, prototype=mixin.prototype)
        else:
            entry = Mixin(name, mixin)
        trial = ProtoObject()
        entry.trial_apply(trial)
        if not trial.own_keys():
            raise MixinConstructionError(f'"{name}" mixin does not add any new properties to an object')
        if name in record:
            _LOG.debug("mixin_replaced name=%s", name)
        else:
            _LOG.debug("mixin_registered name=%s", name)
        record[name] = entry

    def get(self, name: str) -> Mixin:
        if not isinstance(name, str):
            raise TypeError(f"mixin name must be a string, {type(name).__name__} given")
        entry = self._record().get(name)
        if entry is None:
            raise UnknownMixinError(name)
        return entry

    def resolve(self, names: Sequence[str]) -> tuple[Mixin, ...]:
        """Resolve every name before any is used."""
        if not is_sequence(names):
            raise TypeError(f"mixins must be a sequence of strings, {type(names).__name__} given")
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"mixins must be a sequence of strings, {type(name).__name__} found")
        return tuple(self.get(name) for name in names)

    def exec(self, name: str, args: Sequence[object] | None = None) -> ProtoObject:
        """Instantiate named mixin with ``args`` as if it were an object factory."""
        entry = self.get(name)
        if args is None:
            return entry.instantiate()
        if not is_sequence(args):
            raise TypeError(f"mixin args must be a sequence, {type(args).__name__} given")
        return entry.instantiate(args)

    def list(self) -> list[str]:
        return list(self._record())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._record()

    def __len__(self) -> int:
        return len(self._record())
