"""Prototype-based object composition with mixins and runtime interface checks."""

from protokit.api.composer import TEMPLATE_KEY
from protokit.api.errors import (
    InitError,
    MixinConstructionError,
    ProtokitError,
    UnknownMixinError,
    ValidationError,
)
from protokit.api.types import UNDEFINED, TypeTag
from protokit.runtime.classifier import classify
from protokit.runtime.delegation import ProtoObject
from protokit.runtime.interface import Interface
from protokit.runtime.logging import install_null_handler
from protokit.runtime.toolkit import Toolkit, bind_toolkit

__version__ = "0.5.0"

install_null_handler()

_DEFAULT_TOOLKIT = Toolkit()
create = _DEFAULT_TOOLKIT.create
enhance = _DEFAULT_TOOLKIT.enhance
mixins = _DEFAULT_TOOLKIT.mixins

__all__ = [
    "InitError",
    "Interface",
    "MixinConstructionError",
    "ProtoObject",
    "ProtokitError",
    "TEMPLATE_KEY",
    "Toolkit",
    "TypeTag",
    "UNDEFINED",
    "UnknownMixinError",
    "ValidationError",
    "bind_toolkit",
    "classify",
    "create",
    "enhance",
    "mixins",
]
