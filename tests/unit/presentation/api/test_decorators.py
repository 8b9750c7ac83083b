"""Tests for presentation/api/decorators.py."""

import pytest

from sigparams.application.pipeline.wrapper import ParamsMethod
from sigparams.domain.exceptions import (
    CheckFailedError,
    ConstraintViolationError,
    ParseError,
    UnrecognizedArgumentError,
)
from sigparams.domain.model.configuration import ParamsConfig
from sigparams.infrastructure.type_registry import TypeRegistry
from sigparams.presentation.api import method, params


def build_param_size(bound: object) -> int:
    return bound["height"] // 10  # type: ignore[index]


def default_x(bound: object) -> str:
    return "from default_x"


@method(":size =, :height = 170")
def describe(*args: object, **kwargs: object) -> object:
    return params("size", "height")


@method(":x =", config=ParamsConfig(builder_prefix="default_"))
def with_prefix(*args: object, **kwargs: object) -> object:
    return params("x")


@method
def no_params(*args: object) -> object:
    return dict(params())  # type: ignore[call-overload]


_evens = TypeRegistry()
_evens.define("Even", lambda v: isinstance(v, int) and v % 2 == 0)


@method("Even n", types=_evens)
def half(*args: object) -> object:
    return params("n") // 2  # type: ignore[operator]


class Rect:
    """Methods declared with the decorator."""

    def __init__(self, scale: int = 1) -> None:
        self.scale = scale

    def build_param_h(self, bound: object) -> int:
        return bound["w"] * self.scale  # type: ignore[index]

    def _checkargs_area(self, bound: object) -> bool:
        return bound["w"] > 0  # type: ignore[index]

    @method("self: Int w, :h =", check_args=True)
    def area(self, *args: object, **kwargs: object) -> object:
        w, h = params("w", "h")  # type: ignore[misc]
        return w * h

    def _buildargs_grow(self, shape: str) -> list[object]:
        return [int(part) for part in shape.split("x")]

    @method(["w", {"type": "Int"}, "h", {"type": "Int"}], build_args=True)
    def grow(self, *args: object) -> object:
        return params("w", "h")


class TestModuleLevel:
    """Decorated module-level functions."""

    def test_builder_from_module_globals(self) -> None:
        assert describe() == (17, 170)
        assert describe(height=200) == (20, 200)
        assert describe(size=1) == (1, 170)

    def test_trailing_pairs(self) -> None:
        assert describe("height", 100) == (10, 100)

    def test_unknown_keyword(self) -> None:
        with pytest.raises(UnrecognizedArgumentError):
            describe(width=1)

    def test_config_prefix(self) -> None:
        assert with_prefix() == "from default_x"

    def test_bare_decorator(self) -> None:
        assert isinstance(no_params, ParamsMethod)
        assert no_params() == {}
        assert no_params(1, 2) == {}

    def test_custom_type_registry(self) -> None:
        assert half(4) == 2
        with pytest.raises(ConstraintViolationError, match="Even"):
            half(3)

    def test_parse_error_at_definition(self) -> None:
        with pytest.raises(ParseError):

            @method("x! = 1")
            def broken(*args: object) -> None:
                pass


class TestClassBody:
    """Decorated methods in a class body."""

    def test_builder_on_instance(self) -> None:
        assert Rect().area(3) == 9
        assert Rect(scale=2).area(3) == 18

    def test_named_actual_overrides_builder(self) -> None:
        assert Rect().area(3, h=2) == 6

    def test_check_args_derived_name(self) -> None:
        with pytest.raises(CheckFailedError):
            Rect().area(-1)

    def test_type_checked(self) -> None:
        with pytest.raises(ConstraintViolationError):
            Rect().area("3")

    def test_build_args_derived_name(self) -> None:
        assert Rect().grow("3x4") == (3, 4)

    def test_explicit_invocant(self) -> None:
        assert Rect.area(Rect(), 2) == 4

    def test_info(self) -> None:
        info = Rect.area.info
        assert info.qualified_name.endswith("Rect.area")
        assert info.hooks.check_args == "_checkargs_area"
        assert info.signature.names == ("self", "w", "h")
