"""Lazy builder resolver: computes builder-backed values on first read.

One resolver per bound map (per invocation). Builders may read other
parameters of the same map, which resolves them transitively. Re-entering a
parameter that is already being built is a cycle and fails immediately.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from sigparams.domain.exceptions import CircularBuilderDependencyError, NameNotFoundError

if TYPE_CHECKING:
    from sigparams.application.binding.bound_map import BoundParameterMap
    from sigparams.application.binding.gateway import TypeConstraintGateway
    from sigparams.domain.model.parameter import Parameter
    from sigparams.domain.ports.type_registry import AggregateKind

logger = logging.getLogger(__name__)

# (builder name, bound map) → built value
BuilderInvoker = Callable[[str, "BoundParameterMap"], object]


class BuilderResolver:
    """Resolves unbound parameters of one bound map.

    Not thread-safe: a bound map and its resolver belong to one invocation.
    """

    __slots__ = ("_gateway", "_invoke", "_resolving")

    def __init__(self, gateway: TypeConstraintGateway, invoke_builder: BuilderInvoker | None) -> None:
        """Initialize resolver.

        Args:
            gateway: Type gateway applied to built values
            invoke_builder: Calls a builder by name with the bound map.
                None means no namespace is available to resolve builders.
        """
        self._gateway = gateway
        self._invoke = invoke_builder
        self._resolving: list[str] = []

    def resolve(self, bound: BoundParameterMap, param: Parameter) -> object:
        """Compute the value of an unbound parameter.

        Args:
            bound: Map the builder gets to read other parameters
            param: Unbound parameter

        Returns:
            Built and validated value, None for optional parameters without builder

        Raises:
            CircularBuilderDependencyError: param is already being resolved
            NameNotFoundError: Builder cannot be invoked
            ConstraintViolationError: Built value fails the type constraint
        """
        if param.builder is None:
            return None

        if param.name in self._resolving:
            start = self._resolving.index(param.name)
            raise CircularBuilderDependencyError((*self._resolving[start:], param.name))

        if self._invoke is None:
            raise NameNotFoundError(name=param.builder, namespace="<no namespace>", role="builder")

        self._resolving.append(param.name)
        try:
            logger.debug("building parameter %r with %r", param.name, param.builder)
            value = self._invoke(param.builder, bound)
        finally:
            self._resolving.pop()

        return self._gateway.check(param, value)

    def aggregate_kind(self, param: Parameter) -> AggregateKind | None:
        """Aggregate kind of param's type constraint."""
        return self._gateway.aggregate_kind(param)
