"""pytest plugin for sigparams.

Provides fixtures:
    type_registry: Fresh TypeRegistry with built-ins
    params_config: Naming conventions (override in conftest.py)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sigparams.presentation.pytest_plugin.fixtures import params_config, type_registry

if TYPE_CHECKING:
    import pytest

__all__ = ["params_config", "type_registry"]


def pytest_configure(config: pytest.Config) -> None:
    """Register markers."""
    config.addinivalue_line(
        "markers",
        "sigparams: mark test as exercising declared signatures",
    )
