"""Published method metadata for introspection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sigparams.domain.model.hooks import HookSet

if TYPE_CHECKING:
    from sigparams.domain.model.signature import Signature


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """What a wrapped callable publishes about itself.

    Attributes:
        name: Callable name
        namespace: Qualified name of the owning class or module
        signature: Parameter specifications
        hooks: Hook references (derived names when requested unnamed)
    """

    name: str
    namespace: str
    signature: Signature
    hooks: HookSet = field(default_factory=HookSet)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("method name must not be empty")
        if self.signature.name and self.signature.name != self.name:
            raise ValueError(
                f"signature belongs to {self.signature.name!r}, not {self.name!r}"
            )

    @property
    def qualified_name(self) -> str:
        """namespace.name"""
        return f"{self.namespace}.{self.name}" if self.namespace else self.name
