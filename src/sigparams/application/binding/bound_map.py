"""Bound parameter map: per-invocation, read-only, lazily populated."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

from sigparams.domain.exceptions import ReadOnlyViolationError, UnknownParameterError

if TYPE_CHECKING:
    from sigparams.application.binding.resolver import BuilderResolver
    from sigparams.domain.model.signature import Signature

_UNRESOLVED = "<unresolved>"


class BoundParameterMap(Mapping[str, object]):
    """Name → value mapping of one call.

    Keys are exactly the declared parameter names. Values supplied by the
    caller (or literal defaults) are stored at bind time. Builder-backed
    values are computed on first read and memoized for the map's lifetime.

    Any write raises ReadOnlyViolationError. Reading an undeclared name raises
    UnknownParameterError (a KeyError, so `get()` and `in` work as usual).

    Not shared across invocations or threads.
    """

    __slots__ = ("_resolver", "_signature", "_supplied", "_values")

    def __init__(
        self,
        signature: Signature,
        values: Mapping[str, object],
        resolver: BuilderResolver,
        supplied: frozenset[str] = frozenset(),
    ) -> None:
        """Initialize map.

        Args:
            signature: Signature the values were bound against
            values: Eagerly bound values (actuals and literal defaults)
            resolver: Resolver for every declared name missing from values
            supplied: Names whose value came from the caller
        """
        unknown = set(values) - set(signature.names)
        if unknown:
            raise ValueError(f"values for undeclared parameters: {sorted(unknown)}")
        object.__setattr__(self, "_signature", signature)
        object.__setattr__(self, "_values", dict(values))
        object.__setattr__(self, "_resolver", resolver)
        object.__setattr__(self, "_supplied", supplied)

    def __getitem__(self, name: str) -> object:
        """Read parameter value, running its builder on first read."""
        try:
            return self._values[name]
        except (KeyError, TypeError):
            pass

        param = self._signature.get(name) if isinstance(name, str) else None
        if param is None:
            raise UnknownParameterError(name)

        value = self._resolver.resolve(self, param)
        # first read wins: a builder that read this key transitively already stored it
        return self._values.setdefault(name, value)

    def __iter__(self) -> Iterator[str]:
        """Iterate declared names in declaration order."""
        return iter(self._signature.names)

    def __len__(self) -> int:
        """Number of declared parameters."""
        return len(self._signature)

    def __contains__(self, name: object) -> bool:
        """Check declared name without resolving it."""
        return name in self._signature

    def get(self, name: str, default: object = None) -> object:
        """Read a declared parameter; default replaces an unbound None.

        Raises:
            UnknownParameterError: name is not declared
        """
        if name not in self._signature:
            raise UnknownParameterError(name)
        value = self[name]
        return default if value is None and name not in self._supplied else value

    def __setitem__(self, name: str, value: object) -> None:
        raise ReadOnlyViolationError(name)

    def __delitem__(self, name: str) -> None:
        raise ReadOnlyViolationError(name)

    def __setattr__(self, name: str, value: object) -> None:
        raise ReadOnlyViolationError(name)

    def __delattr__(self, name: str) -> None:
        raise ReadOnlyViolationError(name)

    def __repr__(self) -> str:
        """Show resolved values, lazy entries as <unresolved>."""
        items = ", ".join(
            f"{n!r}: {self._values[n]!r}" if n in self._values else f"{n!r}: {_UNRESOLVED}"
            for n in self._signature.names
        )
        return f"BoundParameterMap({{{items}}})"

    @property
    def signature(self) -> Signature:
        """Signature this map was bound against."""
        return self._signature

    def is_resolved(self, name: str) -> bool:
        """Check if a value is materialized (read without triggering builders).

        Raises:
            UnknownParameterError: name is not declared
        """
        if name not in self._signature:
            raise UnknownParameterError(name)
        return name in self._values

    def was_supplied(self, name: str) -> bool:
        """Check if the caller passed an actual for name.

        Raises:
            UnknownParameterError: name is not declared
        """
        if name not in self._signature:
            raise UnknownParameterError(name)
        return name in self._supplied

    def retrieve(self, *names: str) -> object:
        """Aggregate retrieval of one or more parameters.

        If the last parameter's type is an aggregate (ArrayRef/HashRef kind),
        its contents are spread into the result: sequence elements, or mapping
        keys and values interleaved.

        Args:
            names: Parameter names in order, at least one

        Returns:
            The value itself for one name without spreading, else a tuple

        Raises:
            TypeError: No names given
            UnknownParameterError: A name is not declared
        """
        if not names:
            raise TypeError("retrieve() needs at least one parameter name")

        *head, last = names
        values: list[object] = [self[n] for n in head]
        last_value = self[last]

        spread = self._spread(last, last_value)
        if not head and spread is None:
            return last_value
        values.extend(spread if spread is not None else (last_value,))
        return tuple(values)

    def _spread(self, name: str, value: object) -> list[object] | None:
        param = self._signature.get(name)
        if param is None:
            return None
        kind = self._resolver.aggregate_kind(param)
        if kind == "sequence" and isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            return list(value)
        if kind == "mapping" and isinstance(value, Mapping):
            return [item for pair in value.items() for item in pair]
        return None
