"""Tests for domain/exceptions.py."""

import pytest

from sigparams.domain.exceptions import (
    BindError,
    CheckFailedError,
    CircularBuilderDependencyError,
    CoercionFailedError,
    ConstraintViolationError,
    DeclarationError,
    DuplicateArgumentError,
    MissingRequiredError,
    NameNotFoundError,
    ParseError,
    ReadOnlyViolationError,
    SigParamsError,
    TypeNotFoundError,
    UnknownParameterError,
    UnrecognizedArgumentError,
)


class TestHierarchy:
    """Every error is a SigParamsError and the matching builtin."""

    @pytest.mark.parametrize(
        ("error", "builtin"),
        [
            (ParseError(text="x", token="x", position=0, reason="r"), ValueError),
            (DeclarationError("m", "r"), TypeError),
            (NameNotFoundError(name="b", namespace="mod", role="builder"), LookupError),
            (TypeNotFoundError("Nope"), LookupError),
            (MissingRequiredError("x"), BindError),
            (UnrecognizedArgumentError("x"), BindError),
            (DuplicateArgumentError("x"), BindError),
            (ConstraintViolationError(constraint="Int", value="a"), TypeError),
            (CoercionFailedError(constraint="Int", value="a"), ConstraintViolationError),
            (CircularBuilderDependencyError(("a", "b", "a")), RuntimeError),
            (UnknownParameterError("x"), KeyError),
            (ReadOnlyViolationError("x"), TypeError),
        ],
    )
    def test_inherits(self, error: SigParamsError, builtin: type[Exception]) -> None:
        assert isinstance(error, SigParamsError)
        assert isinstance(error, builtin)

    def test_bind_error_is_type_error(self) -> None:
        assert issubclass(BindError, TypeError)

    def test_check_failed_is_only_base(self) -> None:
        assert CheckFailedError.__mro__[1] is SigParamsError


class TestAttributes:
    """Errors carry their context."""

    def test_parse_error(self) -> None:
        error = ParseError(text="a, b!!", token="b!!", position=1, reason="unknown quantifier")
        assert error.token == "b!!"
        assert error.position == 1
        assert "unknown quantifier" in str(error)
        assert "parameter 1" in str(error)

    def test_name_not_found(self) -> None:
        error = NameNotFoundError(name="_execute_m", namespace="pkg.C", role="execute")
        assert "points to a non-existent callable" in str(error)
        assert error.role == "execute"

    def test_constraint_violation_with_parameter(self) -> None:
        error = ConstraintViolationError(constraint="Int", value="a", parameter="x")
        assert error.parameter == "x"
        assert "'Int'" in str(error)
        assert "'a'" in str(error)

    def test_coercion_failed_message(self) -> None:
        error = CoercionFailedError(constraint="Int", value="a", parameter="x")
        assert str(error).startswith("cannot coerce")

    def test_cycle(self) -> None:
        error = CircularBuilderDependencyError(("a", "b", "a"))
        assert error.cycle == ("a", "b", "a")
        assert "a -> b -> a" in str(error)

    def test_unknown_parameter_str_not_quoted_twice(self) -> None:
        assert str(UnknownParameterError("x")) == "unknown parameter 'x'"
