"""Two-phase declaration: collect methods, then finalize into a namespace.

Example:
    class Shape:
        def _execute_area(self, *args):
            w, h = params("w", "h")
            return w * h

    registry = ParamsRegistry(Shape)
    registry.method("area", params="self: Int w, Int h = 1")
    registry.finalize()

    Shape().area(3)  # 3
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from sigparams.application.binding.gateway import TypeConstraintGateway
from sigparams.application.pipeline.wrapper import ParamsMethod
from sigparams.application.registration.declaration import declaration_from
from sigparams.domain.exceptions import DeclarationError, NameNotFoundError
from sigparams.domain.model.configuration import DEFAULT_CONFIG, ParamsConfig
from sigparams.domain.model.declaration import ExecuteByName, ExecuteCallable, MethodDeclaration
from sigparams.infrastructure.namespace import namespace_for
from sigparams.infrastructure.type_registry import default_type_registry

if TYPE_CHECKING:
    from collections.abc import Callable

    from sigparams.domain.model.method_info import MethodInfo
    from sigparams.domain.ports.namespace import NamespaceProtocol
    from sigparams.domain.ports.type_registry import TypeRegistryProtocol

logger = logging.getLogger(__name__)


class ParamsRegistry:
    """Collects method declarations for one namespace.

    Bodies, hooks and builders given by name are resolved at finalize(), so
    they may be defined after the declaration. finalize() is all-or-nothing:
    nothing is published if any name is missing. After finalize() the
    registry is sealed.
    """

    def __init__(
        self,
        target: object,
        *,
        config: ParamsConfig = DEFAULT_CONFIG,
        types: TypeRegistryProtocol | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            target: Class, module, globals dict or NamespaceProtocol
            config: Naming conventions for derived names
            types: Type registry, process default if None

        Raises:
            TypeError: target cannot be used as a namespace
        """
        self._namespace = namespace_for(target)
        self._config = config
        self._gateway = TypeConstraintGateway(types if types is not None else default_type_registry())
        self._pending: dict[str, MethodDeclaration] = {}
        self._published: tuple[MethodInfo, ...] = ()
        self._finalized = False

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else f"{len(self._pending)} pending"
        return f"<ParamsRegistry {self._namespace.qualified_name} ({state})>"

    @property
    def namespace(self) -> NamespaceProtocol:
        """Target namespace."""
        return self._namespace

    @property
    def config(self) -> ParamsConfig:
        """Naming conventions."""
        return self._config

    @property
    def finalized(self) -> bool:
        """True once finalize() succeeded."""
        return self._finalized

    def method(self, name: str, *args: object, **options: object) -> MethodDeclaration:
        """Declare a method (see declaration_from for accepted shapes).

        Redeclaring a pending name replaces the earlier declaration.

        Raises:
            DeclarationError: Invalid declaration or registry already finalized
            ParseError: Malformed signature text
        """
        self._ensure_open(name)
        declaration = declaration_from(name, *args, config=self._config, **options)
        if name in self._pending:
            logger.debug("%s: redeclaring %r", self._namespace.qualified_name, name)
        else:
            logger.debug("%s: declared %r", self._namespace.qualified_name, name)
        self._pending[name] = declaration
        return declaration

    def execute(self, name: str, body: Callable[..., object]) -> MethodDeclaration:
        """Attach the body of an already declared method.

        Raises:
            DeclarationError: Unknown method, non-callable body or finalized registry
        """
        self._ensure_open(name)
        declaration = self._pending.get(name)
        if declaration is None:
            raise DeclarationError(name, "method is not declared")
        if not callable(body):
            raise DeclarationError(name, f"body must be callable, not {type(body).__name__}")
        declaration = dataclasses.replace(declaration, execute=ExecuteCallable(body))
        self._pending[name] = declaration
        return declaration

    def finalize(self) -> tuple[MethodInfo, ...]:
        """Resolve deferred names and publish every declared method.

        Returns:
            Metadata of published methods, in declaration order

        Raises:
            DeclarationError: Registry already finalized
            NameNotFoundError: Body, hook or builder name does not resolve
        """
        if self._finalized:
            raise DeclarationError(self._namespace.qualified_name, "namespace already finalized")

        methods = [self._build(declaration) for declaration in self._pending.values()]

        for wrapped in methods:
            self._namespace.publish(wrapped.name, wrapped)
            logger.debug("published %s", wrapped.info.qualified_name)

        self._published = tuple(m.info for m in methods)
        self._pending.clear()
        self._finalized = True
        logger.debug("finalized %s: %d method(s)", self._namespace.qualified_name, len(methods))
        return self._published

    def methods(self) -> tuple[MethodInfo, ...]:
        """Published metadata (empty before finalize)."""
        return self._published

    def _ensure_open(self, name: str) -> None:
        if self._finalized:
            raise DeclarationError(name, "namespace already finalized")

    def _build(self, declaration: MethodDeclaration) -> ParamsMethod:
        execute = declaration.execute
        if isinstance(execute, ExecuteByName):
            body = self._require(execute.name, "execute")
        else:
            body = execute.body

        for ref, role in (
            (declaration.hooks.build_args, "build_args"),
            (declaration.hooks.check_args, "check_args"),
        ):
            if isinstance(ref, str):
                self._require(ref, role)

        for param in declaration.signature:
            if param.builder is not None:
                self._require(param.builder, "builder")

        return ParamsMethod(
            body,
            declaration.signature,
            gateway=self._gateway,
            hooks=declaration.hooks,
            namespace=self._namespace,
        )

    def _require(self, name: str, role: str) -> Callable[..., object]:
        found = self._namespace.lookup(name)
        if found is None or not callable(found):
            raise NameNotFoundError(name=name, namespace=self._namespace.qualified_name, role=role)
        return found
