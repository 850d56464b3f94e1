from __future__ import annotations

from dataclasses import dataclass

import pytest

from protokit.runtime.config import ProtokitConfig
from protokit.runtime.identity_store import IdentityStore


@dataclass(slots=True)
class FakeNode:
    node_name: str = "DIV"
    node_type: int = 1


class FakeNamespace:
    """Plain owner object for registries under test."""


@pytest.fixture
def store() -> IdentityStore[dict]:
    return IdentityStore(dict)


@pytest.fixture
def lenient_config() -> ProtokitConfig:
    return ProtokitConfig(strict_mixins=False)


@pytest.fixture
def strict_config() -> ProtokitConfig:
    return ProtokitConfig(strict_mixins=True)
