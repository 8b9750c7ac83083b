"""Method declaration request: how a declared method gets its body."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sigparams.domain.model.hooks import HookSet

if TYPE_CHECKING:
    from sigparams.domain.model.signature import Signature


@dataclass(frozen=True, slots=True)
class ExecuteCallable:
    """Body given directly at declaration time."""

    body: Callable[..., object]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.body):
            raise ValueError(f"body must be callable, got {type(self.body).__name__}")


@dataclass(frozen=True, slots=True)
class ExecuteByName:
    """Body resolved by name in the namespace when it is finalized."""

    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name.isidentifier():
            raise ValueError(f"execute name must be an identifier, got {self.name!r}")


Execute = ExecuteCallable | ExecuteByName


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    """Validated declaration of one method.

    Attributes:
        name: Method name in the namespace
        execute: Where the body comes from
        signature: Parsed parameters (empty if none declared)
        hooks: Build-args/check-args hooks
    """

    name: str
    execute: Execute
    signature: Signature
    hooks: HookSet = field(default_factory=HookSet)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name.isidentifier():
            raise ValueError(f"method name must be an identifier, got {self.name!r}")

    @property
    def is_deferred(self) -> bool:
        """Body is looked up by name at finalize time."""
        return isinstance(self.execute, ExecuteByName)
