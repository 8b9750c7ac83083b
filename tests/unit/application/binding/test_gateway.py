"""Tests for application/binding/gateway.py."""

import pytest

from sigparams.application.binding.gateway import TypeConstraintGateway
from sigparams.domain.exceptions import ConstraintViolationError, TypeNotFoundError
from sigparams.infrastructure.type_registry import TypeRegistry
from tests.factories import make_named, make_positional


class TestTypeConstraintGateway:
    """Tests for lookup, check and aggregate kind."""

    def test_requires_registry(self) -> None:
        with pytest.raises(TypeError, match="registry"):
            TypeConstraintGateway(None)  # type: ignore[arg-type]

    def test_lookup_unknown(self) -> None:
        gateway = TypeConstraintGateway(TypeRegistry())
        with pytest.raises(TypeNotFoundError):
            gateway.lookup("Nope")

    def test_untyped_passes_through(self) -> None:
        gateway = TypeConstraintGateway(TypeRegistry())
        marker = object()
        assert gateway.check(make_positional("a"), marker) is marker

    def test_check_chains_registry_error(self) -> None:
        gateway = TypeConstraintGateway(TypeRegistry())
        with pytest.raises(ConstraintViolationError) as info:
            gateway.check(make_named("a", type_name="Int"), "x")
        assert info.value.parameter == "a"
        assert isinstance(info.value.__cause__, ConstraintViolationError)
        assert info.value.__cause__.parameter is None

    def test_coerce_flag_respected(self) -> None:
        registry = TypeRegistry()
        registry.coerce_from("Int", "Str", int)
        gateway = TypeConstraintGateway(registry)
        param = make_positional("a", type_name="Int", coerce=True)
        assert gateway.check(param, "3") == 3

    def test_aggregate_kind(self) -> None:
        gateway = TypeConstraintGateway(TypeRegistry())
        assert gateway.aggregate_kind(make_positional("a")) is None
        assert gateway.aggregate_kind(make_positional("a", type_name="Int")) is None
        assert gateway.aggregate_kind(make_positional("a", type_name="ArrayRef[Int]")) == "sequence"
        assert gateway.aggregate_kind(make_positional("a", type_name="HashRef")) == "mapping"
