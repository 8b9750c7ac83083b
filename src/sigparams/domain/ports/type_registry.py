"""Type registry protocol: the external type-constraint subsystem.

The core only calls it: lookup by name, coerce, assert validity.
sigparams ships TypeRegistry as a default; users can plug in their own.
"""

from __future__ import annotations

from typing import Literal, Protocol

AggregateKind = Literal["sequence", "mapping"]


class TypeConstraintProtocol(Protocol):
    """Contract for one named constraint.

    Example:
        class PositiveInt:
            name = "PositiveInt"
            aggregate = None

            def has_coercion(self) -> bool:
                return False

            def coerce(self, value: object) -> object:
                raise CoercionFailedError(constraint=self.name, value=value)

            def assert_valid(self, value: object) -> None:
                if not (isinstance(value, int) and value > 0):
                    raise ConstraintViolationError(constraint=self.name, value=value)
    """

    name: str
    """Constraint name as written in signatures."""

    aggregate: AggregateKind | None
    """Aggregate kind spread by params() retrieval, None for scalars."""

    def has_coercion(self) -> bool:
        """Check if any coercion path is registered."""
        ...

    def coerce(self, value: object) -> object:
        """Convert value through the first applicable coercion.

        Raises:
            CoercionFailedError: No applicable coercion path
        """
        ...

    def assert_valid(self, value: object) -> None:
        """Check value against the constraint.

        Raises:
            ConstraintViolationError: Value does not satisfy the constraint
        """
        ...


class TypeRegistryProtocol(Protocol):
    """Contract for the registry mapping type names to constraints."""

    def lookup(self, name: str) -> TypeConstraintProtocol | None:
        """Find constraint by name, None if unknown."""
        ...
