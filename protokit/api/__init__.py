"""Public protokit API contracts."""

from protokit.api.composer import TEMPLATE_KEY, ObjectComposer, create_object_composer
from protokit.api.errors import (
    DuplicateMixinError,
    InitError,
    MixinConstructionError,
    ProtokitError,
    ReservedNameError,
    UnknownMixinError,
    ValidationError,
)
from protokit.api.interfaces import InterfaceContract, create_interface
from protokit.api.logging import ProtokitLoggingConfig, configure_logging
from protokit.api.mixins import MixinFunction, MixinRegistry, create_mixin_registry
from protokit.api.types import UNDEFINED, HandlePredicate, TypeClassifier, TypeTag, create_type_classifier

__all__ = [
    "DuplicateMixinError",
    "HandlePredicate",
    "InitError",
    "InterfaceContract",
    "MixinConstructionError",
    "MixinFunction",
    "MixinRegistry",
    "ObjectComposer",
    "ProtokitError",
    "ProtokitLoggingConfig",
    "ReservedNameError",
    "TEMPLATE_KEY",
    "TypeClassifier",
    "TypeTag",
    "UNDEFINED",
    "UnknownMixinError",
    "ValidationError",
    "configure_logging",
    "create_interface",
    "create_mixin_registry",
    "create_object_composer",
    "create_type_classifier",
]
