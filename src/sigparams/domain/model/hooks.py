"""Hook set value object."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# Hook given by name (resolved in the declaring namespace) or directly as a callable
HookRef = str | Callable[..., object]


def _check_ref(role: str, ref: HookRef | None) -> None:
    if ref is None:
        return
    if isinstance(ref, str):
        if not ref.isidentifier():
            raise ValueError(f"{role} hook name must be an identifier, got {ref!r}")
    elif not callable(ref):
        raise ValueError(f"{role} hook must be a name or a callable, got {type(ref).__name__}")


@dataclass(frozen=True, slots=True)
class HookSet:
    """Per-callable pre/post binding hooks.

    Attributes:
        build_args: Runs before binding, rewrites the raw call arguments
        check_args: Runs after binding, validates cross-parameter invariants
    """

    build_args: HookRef | None = None
    check_args: HookRef | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _check_ref("build_args", self.build_args)
        _check_ref("check_args", self.check_args)

    @property
    def is_empty(self) -> bool:
        """No hooks attached."""
        return self.build_args is None and self.check_args is None


def hook_label(ref: HookRef | None) -> str | None:
    """Human-readable hook name for introspection."""
    if ref is None or isinstance(ref, str):
        return ref
    return getattr(ref, "__qualname__", None) or repr(ref)
