"""Naming configuration for auto-derived builder, hook and body names."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParamsConfig:
    """Naming conventions used when a name is requested but not given.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        builder_prefix: Bare `=` default on parameter `x` uses builder `<prefix>x`
        build_args_prefix: `build_args=True` on method `m` uses hook `<prefix>m`
        check_args_prefix: `check_args=True` on method `m` uses hook `<prefix>m`
        execute_prefix: Deferred method `m` without body uses `<prefix>m`
    """

    builder_prefix: str = "build_param_"
    build_args_prefix: str = "_buildargs_"
    check_args_prefix: str = "_checkargs_"
    execute_prefix: str = "_execute_"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for field_name in ("builder_prefix", "build_args_prefix", "check_args_prefix", "execute_prefix"):
            value = getattr(self, field_name)
            # prefix + "x" must be a valid identifier
            if not value or not (value + "x").isidentifier():
                raise ValueError(f"{field_name} must be an identifier prefix, got {value!r}")

    def builder_name(self, parameter: str) -> str:
        """Auto-named builder for a parameter."""
        return f"{self.builder_prefix}{parameter}"

    def build_args_name(self, method: str) -> str:
        """Auto-named build-args hook for a method."""
        return f"{self.build_args_prefix}{method}"

    def check_args_name(self, method: str) -> str:
        """Auto-named check-args hook for a method."""
        return f"{self.check_args_prefix}{method}"

    def execute_name(self, method: str) -> str:
        """Auto-named body for a deferred method."""
        return f"{self.execute_prefix}{method}"


DEFAULT_CONFIG = ParamsConfig()
