"""Tests for application/pipeline/context.py."""

import pytest

from sigparams.application.pipeline.context import call_scope, current_parameters, params
from tests.factories import make_bound


class TestCallScope:
    """Tests for the call-scoped map."""

    def test_outside_any_call(self) -> None:
        with pytest.raises(LookupError, match="not inside a call"):
            current_parameters()
        with pytest.raises(LookupError):
            params()

    def test_set_and_reset(self) -> None:
        bound = make_bound("a", (1,))
        with call_scope(bound) as scoped:
            assert scoped is bound
            assert current_parameters() is bound
        with pytest.raises(LookupError):
            current_parameters()

    def test_nested_scopes(self) -> None:
        outer = make_bound("a", (1,))
        inner = make_bound("a", (2,))
        with call_scope(outer):
            with call_scope(inner):
                assert params("a") == 2
            assert params("a") == 1

    def test_reset_on_error(self) -> None:
        bound = make_bound("a", (1,))
        with pytest.raises(RuntimeError):
            with call_scope(bound):
                raise RuntimeError
        with pytest.raises(LookupError):
            current_parameters()

    def test_params_without_names_returns_map(self) -> None:
        bound = make_bound("a, b", (1, 2))
        with call_scope(bound):
            assert params() is bound
            assert params("a", "b") == (1, 2)
