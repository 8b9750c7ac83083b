"""Decorator form: declare a method at its definition site."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from sigparams.application.binding.gateway import TypeConstraintGateway
from sigparams.application.pipeline.wrapper import ParamsMethod
from sigparams.application.registration.declaration import declaration_from
from sigparams.domain.model.configuration import DEFAULT_CONFIG
from sigparams.infrastructure.namespace import ClassNamespace, ModuleNamespace
from sigparams.infrastructure.type_registry import default_type_registry

if TYPE_CHECKING:
    from sigparams.domain.model.configuration import ParamsConfig
    from sigparams.domain.model.hooks import HookRef
    from sigparams.domain.ports.type_registry import TypeRegistryProtocol


def method(
    signature: str | Sequence[object] | Callable[..., object] | None = None,
    *,
    build_args: HookRef | bool | None = None,
    check_args: HookRef | bool | None = None,
    config: ParamsConfig | None = None,
    types: TypeRegistryProtocol | None = None,
) -> ParamsMethod | Callable[[Callable[..., object]], ParamsMethod]:
    """Wrap a function as a method with a declared signature.

    Inside a class body, builders and hooks given by name are looked up on
    the instance; at module level, in the module's globals.

    Example:
        class Point:
            @method("self: Int x, Int y = 0")
            def move(self, *args, **kwargs):
                return params("x", "y")

        Point().move(1)  # (1, 0)

    Args:
        signature: Signature text or list form; used bare (@method) for none
        build_args: Hook rewriting raw arguments, True for the derived name
        check_args: Hook validating the bound map, True for the derived name
        config: Naming conventions
        types: Type registry, process default if None

    Returns:
        ParamsMethod, or a decorator producing one
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    registry = types if types is not None else default_type_registry()

    def decorate(func: Callable[..., object]) -> ParamsMethod:
        declaration = declaration_from(
            func.__name__,
            func,
            params=None if callable(signature) else signature,
            build_args=build_args,
            check_args=check_args,
            config=cfg,
        )
        return ParamsMethod(
            func,
            declaration.signature,
            gateway=TypeConstraintGateway(registry),
            hooks=declaration.hooks,
            namespace=ModuleNamespace.of_function(func),
            namespace_factory=ClassNamespace,
        )

    if callable(signature):
        return decorate(signature)
    return decorate
