"""Type constraint gateway: thin adapter over the external type registry.

Per parameter: lookup constraint → coerce (if requested and available) → assert.
Registry errors are re-raised with the parameter name attached.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sigparams.domain.exceptions import (
    CoercionFailedError,
    ConstraintViolationError,
    TypeNotFoundError,
)

if TYPE_CHECKING:
    from sigparams.domain.model.parameter import Parameter
    from sigparams.domain.ports.type_registry import (
        AggregateKind,
        TypeConstraintProtocol,
        TypeRegistryProtocol,
    )


class TypeConstraintGateway:
    """Validates and coerces parameter values through a type registry."""

    def __init__(self, registry: TypeRegistryProtocol) -> None:
        """Initialize gateway.

        Args:
            registry: Registry providing lookup(name)

        Raises:
            TypeError: If registry is None
        """
        if registry is None:
            raise TypeError("registry must not be None")
        self._registry = registry

    @property
    def registry(self) -> TypeRegistryProtocol:
        """Underlying registry."""
        return self._registry

    def lookup(self, type_name: str) -> TypeConstraintProtocol:
        """Resolve constraint by name.

        Raises:
            TypeNotFoundError: Name not defined in the registry
        """
        constraint = self._registry.lookup(type_name)
        if constraint is None:
            raise TypeNotFoundError(type_name)
        return constraint

    def check(self, param: Parameter, value: object) -> object:
        """Coerce (if requested) and validate value for param.

        Args:
            param: Parameter the value is bound to
            value: Raw value

        Returns:
            Value after coercion (unchanged if no coercion applied)

        Raises:
            TypeNotFoundError: Unknown constraint
            CoercionFailedError: Coercion requested but no path applies
            ConstraintViolationError: Value fails the constraint
        """
        if param.type_name is None:
            return value

        constraint = self.lookup(param.type_name)

        if param.coerce and constraint.has_coercion():
            try:
                value = constraint.coerce(value)
            except CoercionFailedError as e:
                raise CoercionFailedError(
                    constraint=param.type_name, value=e.value, parameter=param.name
                ) from e

        try:
            constraint.assert_valid(value)
        except ConstraintViolationError as e:
            raise ConstraintViolationError(
                constraint=param.type_name, value=value, parameter=param.name
            ) from e
        return value

    def aggregate_kind(self, param: Parameter) -> AggregateKind | None:
        """Aggregate kind of the parameter's constraint, None for untyped/scalars."""
        if param.type_name is None:
            return None
        return self.lookup(param.type_name).aggregate
