"""pytest fixtures for code declaring methods with signatures.

User overrides params_config in their conftest.py.
"""

from __future__ import annotations

import pytest

from sigparams.domain.model.configuration import ParamsConfig
from sigparams.infrastructure.type_registry import TypeRegistry


@pytest.fixture
def type_registry() -> TypeRegistry:
    """Fresh registry with the built-in constraints.

    Definitions made in one test do not leak into the process default.

    Returns:
        TypeRegistry
    """
    return TypeRegistry()


@pytest.fixture
def params_config() -> ParamsConfig:
    """Naming conventions for declarations.

    Returns:
        Default ParamsConfig
    """
    return ParamsConfig()
