"""Runtime implementations of the composition kernel and validator."""

from protokit.runtime.classifier import RuntimeTypeClassifier, classify, default_classifier
from protokit.runtime.composer import RuntimeObjectComposer
from protokit.runtime.config import ProtokitConfig, load_protokit_config
from protokit.runtime.delegation import ProtoObject, has_property, lookup
from protokit.runtime.identity_store import IdentityStore, default_identity_store
from protokit.runtime.interface import Interface
from protokit.runtime.logging import configure_protokit_logging, get_protokit_logger
from protokit.runtime.mixin_registry import Mixin, RuntimeMixinRegistry
from protokit.runtime.toolkit import Toolkit, bind_toolkit

__all__ = [
    "IdentityStore",
    "Interface",
    "Mixin",
    "ProtoObject",
    "ProtokitConfig",
    "RuntimeMixinRegistry",
    "RuntimeObjectComposer",
    "RuntimeTypeClassifier",
    "Toolkit",
    "bind_toolkit",
    "classify",
    "configure_protokit_logging",
    "default_classifier",
    "default_identity_store",
    "get_protokit_logger",
    "has_property",
    "load_protokit_config",
    "lookup",
]
