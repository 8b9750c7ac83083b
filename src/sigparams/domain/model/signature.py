"""Signature entity: ordered parameter specifications of one callable."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sigparams.domain.model.parameter import Parameter


@dataclass(frozen=True, slots=True)
class Signature:
    """Immutable parameter list shared by every invocation of a callable.

    Attributes:
        parameters: Parameters in declaration order (invocant first, if any)
        index_offset: 1 if an invocant is declared, else 0
        name: Owning callable name, empty until the signature is attached
    """

    parameters: tuple[Parameter, ...] = ()
    index_offset: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        seen: set[str] = set()
        external: set[str] = set()
        for param in self.parameters:
            if param.name in seen:
                raise ValueError(f"duplicate parameter name {param.name!r}")
            seen.add(param.name)
            if param.external_name is not None:
                if param.external_name in external:
                    raise ValueError(f"duplicate external name {param.external_name!r}")
                external.add(param.external_name)

        invocants = [i for i, p in enumerate(self.parameters) if p.is_invocant]
        if len(invocants) > 1 or (invocants and invocants[0] != 0):
            raise ValueError("invocant must be the single first parameter")

        if self.index_offset != (1 if invocants else 0):
            raise ValueError(f"index_offset must be {1 if invocants else 0}, got {self.index_offset}")

        positional = [p for p in self.parameters if p.is_positional and not p.is_invocant]
        indexes = [p.index for p in positional]
        if indexes != list(range(len(positional))):
            raise ValueError(f"positional indexes must be 0..{len(positional) - 1}, got {indexes}")

        slurpy = [i for i, p in enumerate(self.parameters) if p.slurpy]
        if len(slurpy) > 1:
            raise ValueError("at most one slurpy parameter allowed")
        if slurpy and slurpy[0] != len(self.parameters) - 1:
            raise ValueError("slurpy parameter must be the last parameter")

        named_seen = False
        for param in self.parameters:
            if param.bind_only:
                continue
            if param.is_named:
                named_seen = True
            elif named_seen:
                raise ValueError(f"positional parameter {param.name!r} follows a named parameter")

    def __iter__(self) -> Iterator[Parameter]:
        """Iterate parameters in declaration order."""
        return iter(self.parameters)

    def __len__(self) -> int:
        """Number of declared parameters."""
        return len(self.parameters)

    def __contains__(self, name: object) -> bool:
        """Check if name is a declared parameter name."""
        return any(p.name == name for p in self.parameters)

    def get(self, name: str) -> Parameter | None:
        """Find parameter by map name."""
        for param in self.parameters:
            if param.name == name:
                return param
        return None

    def by_external_name(self, external_name: str) -> Parameter | None:
        """Find named parameter by the name callers pass."""
        for param in self.parameters:
            if param.external_name == external_name:
                return param
        return None

    @property
    def names(self) -> tuple[str, ...]:
        """Parameter names in declaration order."""
        return tuple(p.name for p in self.parameters)

    @property
    def invocant(self) -> Parameter | None:
        """Invocant parameter, if declared."""
        if self.parameters and self.parameters[0].is_invocant:
            return self.parameters[0]
        return None

    @property
    def positional(self) -> tuple[Parameter, ...]:
        """Positional parameters excluding the invocant, in index order."""
        return tuple(p for p in self.parameters if p.is_positional and not p.is_invocant)

    @property
    def named(self) -> tuple[Parameter, ...]:
        """Named parameters, bind-only included."""
        return tuple(p for p in self.parameters if p.is_named)

    @property
    def slurpy(self) -> Parameter | None:
        """Slurpy parameter, if declared."""
        if self.parameters and self.parameters[-1].slurpy:
            return self.parameters[-1]
        return None
