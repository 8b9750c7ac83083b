"""Parameter specification value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ParameterKind(Enum):
    """How a caller supplies the parameter."""

    POSITIONAL = auto()  # matched by position
    NAMED = auto()  # matched by external name


@dataclass(frozen=True, slots=True)
class Parameter:
    """One declared parameter of a signature.

    Attributes:
        name: Key in the bound parameter map, unique within a signature
        kind: POSITIONAL or NAMED
        index: Ordinal among positional parameters; -1 for the invocant, None for named
        external_name: Name callers pass a named argument under; None for positional
            and bind-only parameters
        is_invocant: Leading positional parameter marked with `name:`
        required: Caller must supply an actual
        slurpy: Collects all remaining positional actuals into a list
        bind_only: Never matched from actuals, value always comes from default/builder
        type_name: Type constraint name in the registry, carried verbatim
        coerce: Apply the constraint's coercion before validation
        default: Literal default (unsigned int or str), None if absent
        builder: Name of the lazy builder callable, None if absent
    """

    name: str
    kind: ParameterKind = ParameterKind.POSITIONAL
    index: int | None = None
    external_name: str | None = None
    is_invocant: bool = False
    required: bool = False
    slurpy: bool = False
    bind_only: bool = False
    type_name: str | None = None
    coerce: bool = False
    default: int | str | None = None
    builder: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name or not self.name.isidentifier():
            raise ValueError(f"parameter name must be an identifier, got {self.name!r}")

        if self.default is not None:
            if isinstance(self.default, bool) or not isinstance(self.default, (int, str)):
                raise ValueError(f"default of {self.name!r} must be an unsigned int or str")
            if isinstance(self.default, int) and self.default < 0:
                raise ValueError(f"default of {self.name!r} must be unsigned, got {self.default}")

        if self.default is not None and self.builder is not None:
            raise ValueError(f"parameter {self.name!r} cannot have both a default and a builder")

        if self.required and self.has_default:
            raise ValueError(f"required parameter {self.name!r} cannot have a default")

        if self.coerce and self.type_name is None:
            raise ValueError(f"parameter {self.name!r} cannot coerce without a type constraint")

        if self.kind is ParameterKind.POSITIONAL:
            self._validate_positional()
        else:
            self._validate_named()

    def _validate_positional(self) -> None:
        if self.external_name is not None:
            raise ValueError(f"positional parameter {self.name!r} cannot have an external name")

        if self.bind_only:
            raise ValueError(f"bind-only parameter {self.name!r} must be named")

        if self.is_invocant:
            if self.index != -1:
                raise ValueError(f"invocant {self.name!r} must have index -1, got {self.index}")
            if self.slurpy or self.has_default or not self.required:
                raise ValueError(f"invocant {self.name!r} must be required, without default")
            return

        if self.index is None or self.index < 0:
            raise ValueError(f"positional parameter {self.name!r} needs index >= 0")

        if self.slurpy and self.has_default:
            raise ValueError(f"slurpy parameter {self.name!r} cannot have a default")

    def _validate_named(self) -> None:
        if self.index is not None:
            raise ValueError(f"named parameter {self.name!r} cannot have an index")

        if self.is_invocant or self.slurpy:
            raise ValueError(f"named parameter {self.name!r} cannot be invocant or slurpy")

        if self.bind_only:
            if self.external_name is not None:
                raise ValueError(f"bind-only parameter {self.name!r} cannot have an external name")
            if not self.has_default:
                raise ValueError(f"bind-only parameter {self.name!r} must have a default")
        elif not self.external_name:
            raise ValueError(f"named parameter {self.name!r} needs an external name")

    @property
    def has_default(self) -> bool:
        """Literal default or builder present."""
        return self.default is not None or self.builder is not None

    @property
    def is_named(self) -> bool:
        """Matched by external name (or bind-only)."""
        return self.kind is ParameterKind.NAMED

    @property
    def is_positional(self) -> bool:
        """Matched by position (invocant included)."""
        return self.kind is ParameterKind.POSITIONAL

    @property
    def is_lazy(self) -> bool:
        """Value is computed by a builder on first read."""
        return self.builder is not None
