"""Delegating object creation and template enhancement."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from protokit.api.composer import TEMPLATE_KEY, ObjectComposer
from protokit.api.errors import ReservedNameError
from protokit.api.mixins import MixinRegistry
from protokit.api.types import TypeClassifier, TypeTag
from protokit.runtime.classifier import default_classifier
from protokit.runtime.delegation import ProtoObject, bind_to, lookup
from protokit.runtime.logging import get_protokit_logger
from protokit.runtime.mixin_registry import is_sequence

_LOG = get_protokit_logger("composer")
_PRIMITIVE_TAGS = frozenset({TypeTag.STRING, TypeTag.NUMBER, TypeTag.BOOLEAN, TypeTag.UNDEFINED})


class RuntimeObjectComposer(ObjectComposer):
    """Composer bound to one namespace's mixin registry."""

    def __init__(self, registry: MixinRegistry, *, classifier: TypeClassifier | None = None) -> None:
        self._registry = registry
        self._classifier = classifier if classifier is not None else default_classifier()

    @property
    def registry(self) -> MixinRegistry:
        return self._registry

    def create(
        self,
        base: object,
        *,
        mixins: Sequence[str] | None = None,
        args: Sequence[object] | None = None,
    ) -> ProtoObject:
        """Create an object delegating to ``base``.

        Named mixins are applied in order with the new object as receiver.
        When ``args`` is given and the result exposes a callable ``init``, it
        is called with ``args`` after binding to ``created`` the way attribute
        reads bind; otherwise ``args`` is ignored.
        """
        if self._classifier.classify(base) in _PRIMITIVE_TAGS:
            raise TypeError(f"cannot delegate to a primitive {type(base).__name__}")
        resolved = self._registry.resolve(mixins) if mixins is not None else ()
        if args is not None and not is_sequence(args):
            raise TypeError(f"args must be a sequence, {type(args).__name__} given")

        created = ProtoObject(delegate=base)
        for mixin in resolved:
            mixin.apply_to(created)

        if args is not None:
            init = bind_to(created, lookup(created, "init"))
            if callable(init):
                init(*args)
        _LOG.debug("object_created mixins=%s init_args=%s", [m.name for m in resolved], args is not None)
        return created

    def enhance(
        self,
        base: object,
        overlay: Mapping[str, object] | ProtoObject,
        *,
        mixins: Sequence[str] | None = None,
        args: Sequence[object] | None = None,
    ) -> ProtoObject:
        """Return a delegating copy of ``base`` with ``overlay`` deep-merged in.

        Plain objects on both sides merge recursively into nested delegating
        copies; any other value, arrays and handles included, replaces
        wholesale. ``base`` is never mutated and is linked from the result
        under ``TEMPLATE_KEY``.
        """
        if self._classifier.classify(base) in _PRIMITIVE_TAGS:
            raise TypeError(f"cannot enhance a primitive {type(base).__name__}")
        if not self._is_plain(overlay):
            raise TypeError(f"overlay must be a plain object, {type(overlay).__name__} given")
        if TEMPLATE_KEY in _overlay_keys(overlay):
            raise ReservedNameError(f'"{TEMPLATE_KEY}" is reserved for the template back-reference')

        merged = ProtoObject(delegate=base)
        self._merge_into(merged, overlay)
        merged[TEMPLATE_KEY] = base
        _LOG.debug("object_enhanced keys=%s", list(_overlay_keys(overlay)))

        if mixins is None and args is None:
            return merged
        return self.create(merged, mixins=mixins, args=args)

    def _is_plain(self, value: object) -> bool:
        return isinstance(value, (ProtoObject, Mapping)) and self._classifier.classify(value) == TypeTag.OBJECT

    def _merge_into(self, target: ProtoObject, overlay: Mapping[str, object] | ProtoObject) -> None:
        for key, value in _overlay_items(overlay):
            current = lookup(target, key)
            if self._is_plain(value) and self._is_plain(current):
                nested = ProtoObject(delegate=current)
                self._merge_into(nested, value)
                target[key] = nested
            elif isinstance(value, Mapping) and self._is_plain(value):
                target[key] = ProtoObject.from_mapping(value)
            else:
                target[key] = value


def _overlay_keys(overlay: Mapping[str, object] | ProtoObject) -> tuple[str, ...]:
    return tuple(key for key, _ in _overlay_items(overlay))


def _overlay_items(overlay: Mapping[str, object] | ProtoObject) -> tuple[tuple[str, object], ...]:
    items = overlay.own_items() if isinstance(overlay, ProtoObject) else tuple(overlay.items())
    for key, _ in items:
        if not isinstance(key, str):
            raise TypeError(f"overlay keys must be strings, {type(key).__name__} given")
    return items
