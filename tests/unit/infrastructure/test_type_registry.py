"""Tests for infrastructure/type_registry.py."""

import pytest

from sigparams.domain.exceptions import (
    CoercionFailedError,
    ConstraintViolationError,
    TypeNotFoundError,
)
from sigparams.infrastructure.type_registry import TypeConstraint, TypeRegistry, default_type_registry


class TestBuiltins:
    """Built-in constraints."""

    @pytest.mark.parametrize(
        ("name", "good", "bad"),
        [
            ("Any", None, None),
            ("Defined", 0, None),
            ("Undef", None, 0),
            ("Bool", True, 1),
            ("Str", "", 1),
            ("Num", 1.5, "1"),
            ("Int", 3, True),
            ("ArrayRef", [1], "ab"),
            ("HashRef", {"a": 1}, [("a", 1)]),
            ("CodeRef", len, "len"),
        ],
    )
    def test_check(self, name: str, good: object, bad: object) -> None:
        constraint = TypeRegistry().lookup(name)
        assert constraint is not None
        assert constraint.check(good)
        if name != "Any":
            assert not constraint.check(bad)

    def test_int_is_num(self) -> None:
        registry = TypeRegistry()
        int_ = registry.lookup("Int")
        assert int_ is not None and int_.parent is registry.lookup("Num")

    def test_aggregates(self) -> None:
        registry = TypeRegistry()
        assert registry.lookup("ArrayRef").aggregate == "sequence"  # type: ignore[union-attr]
        assert registry.lookup("HashRef").aggregate == "mapping"  # type: ignore[union-attr]
        assert registry.lookup("Str").aggregate is None  # type: ignore[union-attr]

    def test_without_builtins(self) -> None:
        assert not TypeRegistry(builtins=False).has("Int")


class TestParameterized:
    """ArrayRef[T], HashRef[T], Maybe[T]."""

    def test_array_of(self) -> None:
        constraint = TypeRegistry().lookup("ArrayRef[Int]")
        assert constraint is not None
        assert constraint.check([1, 2])
        assert not constraint.check([1, "2"])
        assert constraint.aggregate == "sequence"

    def test_hash_of(self) -> None:
        constraint = TypeRegistry().lookup("HashRef[Str]")
        assert constraint is not None
        assert constraint.check({"a": "b"})
        assert not constraint.check({"a": 1})

    def test_maybe(self) -> None:
        constraint = TypeRegistry().lookup("Maybe[Int]")
        assert constraint is not None
        assert constraint.check(None)
        assert constraint.check(1)
        assert not constraint.check("1")

    def test_nested(self) -> None:
        constraint = TypeRegistry().lookup("ArrayRef[Maybe[Int]]")
        assert constraint is not None
        assert constraint.check([1, None])

    def test_cached(self) -> None:
        registry = TypeRegistry()
        assert registry.lookup("ArrayRef[Int]") is registry.lookup("ArrayRef[Int]")

    def test_unknown_inner_or_base(self) -> None:
        registry = TypeRegistry()
        assert registry.lookup("ArrayRef[Nope]") is None
        assert registry.lookup("Str[Int]") is None
        assert "Nope" not in registry


class TestDefine:
    """User-defined constraints and coercions."""

    def test_define_with_parent(self) -> None:
        registry = TypeRegistry()
        registry.define("PositiveInt", lambda v: v > 0, parent="Int")  # type: ignore[operator]
        constraint = registry.lookup("PositiveInt")
        assert constraint is not None
        assert constraint.check(3)
        assert not constraint.check(-3)
        assert not constraint.check("3")

    def test_duplicate(self) -> None:
        with pytest.raises(ValueError, match="already defined"):
            TypeRegistry().define("Int", lambda v: True)

    def test_invalid_name(self) -> None:
        with pytest.raises(ValueError, match="invalid type name"):
            TypeRegistry().define("no good", lambda v: True)

    def test_unknown_parent(self) -> None:
        with pytest.raises(TypeNotFoundError):
            TypeRegistry().define("X", lambda v: True, parent="Nope")

    def test_coercion(self) -> None:
        registry = TypeRegistry()
        registry.coerce_from("Int", "Str", int)
        constraint = registry.lookup("Int")
        assert constraint is not None
        assert constraint.has_coercion()
        assert constraint.coerce("5") == 5
        assert constraint.coerce(7) == 7

    def test_coercion_failed(self) -> None:
        registry = TypeRegistry()
        registry.coerce_from("Int", "Str", int)
        with pytest.raises(CoercionFailedError):
            registry.lookup("Int").coerce([1])  # type: ignore[union-attr]

    def test_coerce_from_unknown(self) -> None:
        with pytest.raises(TypeNotFoundError):
            TypeRegistry().coerce_from("Int", "Nope", int)

    def test_assert_valid(self) -> None:
        constraint = TypeConstraint("Even", lambda v: v % 2 == 0)  # type: ignore[operator]
        constraint.assert_valid(2)
        with pytest.raises(ConstraintViolationError, match="Even"):
            constraint.assert_valid(3)


class TestDefaultRegistry:
    """Process-wide registry."""

    def test_singleton(self) -> None:
        assert default_type_registry() is default_type_registry()
        assert default_type_registry().has("Int")
