"""Default type registry: named constraints with optional coercions.

Built-in constraints:
    Any, Item        anything
    Defined, Undef   not None / None
    Bool             bool
    Str              str
    Num              int or float (not bool)
    Int              int (not bool)
    ArrayRef         list or tuple (aggregate: sequence)
    HashRef          mapping (aggregate: mapping)
    CodeRef          callable

Parameterized (resolved on lookup, cached):
    ArrayRef[T]      every element satisfies T
    HashRef[T]       every value satisfies T
    Maybe[T]         None or T
"""

from __future__ import annotations

import re
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from sigparams.domain.exceptions import (
    CoercionFailedError,
    ConstraintViolationError,
    TypeNotFoundError,
)
from sigparams.domain.ports.type_registry import AggregateKind

_TYPE_NAME_RE = re.compile(r"[A-Za-z_][\w:.]*")
_PARAMETERIZED_RE = re.compile(r"(?P<base>[A-Za-z_][\w:.]*)\[(?P<inner>.+)\]")

Predicate = Callable[[object], bool]


@dataclass(frozen=True, slots=True)
class Coercion:
    """One coercion path into a constraint.

    Attributes:
        source: Constraint the raw value must satisfy
        via: Conversion function
    """

    source: TypeConstraint
    via: Callable[[object], object]


class TypeConstraint:
    """Named predicate with optional parent and coercions."""

    __slots__ = ("_coercions", "_predicate", "aggregate", "name", "parent")

    def __init__(
        self,
        name: str,
        predicate: Predicate,
        *,
        parent: TypeConstraint | None = None,
        aggregate: AggregateKind | None = None,
    ) -> None:
        """Initialize constraint.

        Args:
            name: Constraint name
            predicate: Returns True for valid values (parent checked first)
            parent: Constraint every valid value also satisfies
            aggregate: Aggregate kind, inherited from parent if None
        """
        if not name:
            raise ValueError("constraint name must not be empty")
        self.name = name
        self.parent = parent
        self.aggregate = aggregate if aggregate is not None else (parent.aggregate if parent else None)
        self._predicate = predicate
        self._coercions: tuple[Coercion, ...] = ()

    def __repr__(self) -> str:
        return f"TypeConstraint({self.name!r})"

    def check(self, value: object) -> bool:
        """Check value against parent chain and predicate."""
        if self.parent is not None and not self.parent.check(value):
            return False
        return bool(self._predicate(value))

    def assert_valid(self, value: object) -> None:
        """Raise if value does not satisfy the constraint.

        Raises:
            ConstraintViolationError: Invalid value
        """
        if not self.check(value):
            raise ConstraintViolationError(constraint=self.name, value=value)

    def has_coercion(self) -> bool:
        """Check if any coercion path is registered."""
        return bool(self._coercions)

    def add_coercion(self, source: TypeConstraint, via: Callable[[object], object]) -> None:
        """Register coercion from values satisfying source."""
        self._coercions = (*self._coercions, Coercion(source=source, via=via))

    def coerce(self, value: object) -> object:
        """Convert value through the first coercion whose source accepts it.

        Already-valid values are returned unchanged.

        Raises:
            CoercionFailedError: Invalid value and no coercion source accepts it
        """
        if self.check(value):
            return value
        for coercion in self._coercions:
            if coercion.source.check(value):
                return coercion.via(value)
        raise CoercionFailedError(constraint=self.name, value=value)


class TypeRegistry:
    """Name → TypeConstraint registry.

    Thread-safe for definitions; lookups of parameterized names are cached.
    """

    def __init__(self, *, builtins: bool = True) -> None:
        """Initialize registry.

        Args:
            builtins: Define the built-in constraints
        """
        self._types: dict[str, TypeConstraint] = {}
        self._lock = threading.Lock()
        if builtins:
            _define_builtins(self)

    def __contains__(self, name: object) -> bool:
        """Check if name resolves (parameterized names included)."""
        return isinstance(name, str) and self.lookup(name) is not None

    def define(
        self,
        name: str,
        predicate: Predicate,
        *,
        parent: str | None = None,
        aggregate: AggregateKind | None = None,
    ) -> TypeConstraint:
        """Define a new named constraint.

        Args:
            name: Constraint name
            predicate: Validity predicate
            parent: Name of the parent constraint
            aggregate: Aggregate kind for params() spreading

        Returns:
            The new constraint

        Raises:
            ValueError: Invalid or already defined name
            TypeNotFoundError: Unknown parent
        """
        if not _TYPE_NAME_RE.fullmatch(name or ""):
            raise ValueError(f"invalid type name {name!r}")
        parent_constraint = self._require(parent) if parent is not None else None
        constraint = TypeConstraint(name, predicate, parent=parent_constraint, aggregate=aggregate)
        with self._lock:
            if name in self._types:
                raise ValueError(f"type {name!r} is already defined")
            self._types[name] = constraint
        return constraint

    def coerce_from(self, name: str, source: str, via: Callable[[object], object]) -> None:
        """Register a coercion into name from values of type source.

        Raises:
            TypeNotFoundError: Unknown name or source
        """
        target = self._require(name)
        target.add_coercion(self._require(source), via)

    def lookup(self, name: str) -> TypeConstraint | None:
        """Find constraint by name, resolving parameterized names."""
        found = self._types.get(name)
        if found is not None:
            return found

        match = _PARAMETERIZED_RE.fullmatch(name.replace(" ", ""))
        if match is None:
            return None
        inner = self.lookup(match.group("inner"))
        if inner is None:
            return None
        made = _parameterize(match.group("base"), inner, name)
        if made is None:
            return None
        with self._lock:
            return self._types.setdefault(name, made)

    def has(self, name: str) -> bool:
        """Check if name resolves."""
        return self.lookup(name) is not None

    def _require(self, name: str) -> TypeConstraint:
        constraint = self.lookup(name)
        if constraint is None:
            raise TypeNotFoundError(name)
        return constraint


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_num(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _define_builtins(registry: TypeRegistry) -> None:
    registry.define("Any", lambda _: True)
    registry.define("Item", lambda _: True, parent="Any")
    registry.define("Undef", lambda v: v is None, parent="Item")
    registry.define("Defined", lambda v: v is not None, parent="Item")
    registry.define("Bool", lambda v: isinstance(v, bool), parent="Item")
    registry.define("Str", lambda v: isinstance(v, str), parent="Defined")
    registry.define("Num", _is_num, parent="Defined")
    registry.define("Int", _is_int, parent="Num")
    registry.define("ArrayRef", _is_array, parent="Defined", aggregate="sequence")
    registry.define("HashRef", lambda v: isinstance(v, Mapping), parent="Defined", aggregate="mapping")
    registry.define("CodeRef", callable, parent="Defined")


def _parameterize(base: str, inner: TypeConstraint, name: str) -> TypeConstraint | None:
    if base == "ArrayRef":
        return TypeConstraint(
            name,
            lambda v: _is_array(v) and all(inner.check(x) for x in v),  # type: ignore[attr-defined]
            aggregate="sequence",
        )
    if base == "HashRef":
        return TypeConstraint(
            name,
            lambda v: isinstance(v, Mapping) and all(inner.check(x) for x in v.values()),
            aggregate="mapping",
        )
    if base == "Maybe":
        return TypeConstraint(name, lambda v: v is None or inner.check(v), aggregate=inner.aggregate)
    return None


_default_registry = TypeRegistry()


def default_type_registry() -> TypeRegistry:
    """Process-wide registry used when no registry is passed."""
    return _default_registry
