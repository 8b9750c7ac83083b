"""Method wrapper: build-args hook → bind → check-args hook → body.

A wrapped callable closes over its own Signature, HookSet and namespace at
construction time. Nothing is looked up on the call stack.
"""

from __future__ import annotations

import dataclasses
import functools
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING

from sigparams.application.binding.binder import NO_INVOCANT, bind
from sigparams.application.pipeline.context import call_scope
from sigparams.domain.exceptions import CheckFailedError, NameNotFoundError, SigParamsError
from sigparams.domain.model.call_arguments import CallArguments
from sigparams.domain.model.hooks import HookRef, HookSet
from sigparams.domain.model.method_info import MethodInfo

if TYPE_CHECKING:
    from sigparams.application.binding.bound_map import BoundParameterMap
    from sigparams.application.binding.gateway import TypeConstraintGateway
    from sigparams.domain.model.signature import Signature
    from sigparams.domain.ports.namespace import NamespaceProtocol

logger = logging.getLogger(__name__)

# owner class → namespace, used when the wrapper is assigned in a class body
NamespaceFactory = Callable[[type], "NamespaceProtocol"]


class ParamsMethod:
    """Callable with a declared signature.

    Invocation order for raw arguments A:
        1. build_args hook (if any) rewrites A
        2. A is bound to the signature → BoundParameterMap
        3. check_args hook (if any) validates the map
        4. body runs with the original A, the map is current (see params())

    In a class body the wrapper is a descriptor: the instance it is accessed
    through is the implicit invocant, and builders/hooks given by name are
    looked up on that instance.
    """

    def __init__(
        self,
        body: Callable[..., object],
        signature: Signature,
        *,
        gateway: TypeConstraintGateway,
        hooks: HookSet | None = None,
        namespace: NamespaceProtocol | None = None,
        namespace_factory: NamespaceFactory | None = None,
    ) -> None:
        """Initialize wrapper.

        Args:
            body: Original callable
            signature: Parsed signature
            gateway: Type constraint gateway
            hooks: Build-args/check-args hooks
            namespace: Namespace for name lookups of builders and hooks
            namespace_factory: Builds the namespace from the owner class
                when assigned in a class body

        Raises:
            TypeError: If body is not callable
        """
        if not callable(body):
            raise TypeError(f"body must be callable, got {type(body).__name__}")
        functools.update_wrapper(self, body)
        self._body = body
        self._name = signature.name or getattr(body, "__name__", "<anonymous>")
        self._signature = signature if signature.name else dataclasses.replace(signature, name=self._name)
        self._gateway = gateway
        self._hooks = hooks or HookSet()
        self._namespace = namespace
        self._namespace_factory = namespace_factory

    def __set_name__(self, owner: type, name: str) -> None:
        """Adopt the owner class as namespace."""
        if self._namespace_factory is not None:
            self._namespace = self._namespace_factory(owner)
        if name != self._name:
            self._name = name
            self._signature = dataclasses.replace(self._signature, name=name)

    def __get__(self, instance: object, owner: type | None = None) -> object:
        """Bind instance as implicit invocant."""
        if instance is None:
            return self
        return BoundParamsMethod(self, instance)

    def __call__(self, *args: object, **kwargs: object) -> object:
        """Call without implicit invocant."""
        return self.invoke(args, kwargs)

    def __repr__(self) -> str:
        return f"<ParamsMethod {self.info.qualified_name}>"

    @property
    def name(self) -> str:
        """Method name."""
        return self._name

    @property
    def signature(self) -> Signature:
        """Declared signature."""
        return self._signature

    @property
    def hooks(self) -> HookSet:
        """Attached hooks."""
        return self._hooks

    @property
    def body(self) -> Callable[..., object]:
        """Original callable."""
        return self._body

    @property
    def info(self) -> MethodInfo:
        """Published metadata."""
        if self._namespace is not None:
            namespace = self._namespace.qualified_name
        else:
            namespace = getattr(self._body, "__module__", None) or ""
        return MethodInfo(
            name=self._name,
            namespace=namespace,
            signature=self._signature,
            hooks=self._hooks,
        )

    def invoke(
        self,
        args: Sequence[object],
        kwargs: Mapping[str, object],
        invocant: object = NO_INVOCANT,
    ) -> object:
        """Run the pipeline for one call.

        Args:
            args: Raw positional actuals (invocant excluded)
            kwargs: Raw keyword actuals
            invocant: Implicit invocant, NO_INVOCANT for plain calls

        Returns:
            Body's return value

        Raises:
            SigParamsError: Binding or validation failure
            CheckFailedError: check_args hook rejected the arguments
        """
        args = tuple(args)
        if invocant is NO_INVOCANT and self._signature.invocant is not None and args:
            # explicit invocant: Class.method(obj, ...) behaves like obj.method(...)
            invocant, args = args[0], args[1:]

        bind_args: Sequence[object] = args
        bind_kwargs: Mapping[str, object] = kwargs
        if self._hooks.build_args is not None:
            hook = self._resolve(self._hooks.build_args, "build_args", invocant)
            bind_args, bind_kwargs = _normalize_build_args(self._name, hook(*args, **kwargs))

        bound = bind(
            self._signature,
            bind_args,
            bind_kwargs,
            gateway=self._gateway,
            invocant=invocant,
            invoke_builder=functools.partial(self._invoke_builder, invocant),
        )

        if self._hooks.check_args is not None:
            self._run_check(bound, invocant)

        with call_scope(bound):
            if invocant is NO_INVOCANT:
                return self._body(*args, **kwargs)
            return self._body(invocant, *args, **kwargs)

    def _run_check(self, bound: BoundParameterMap, invocant: object) -> None:
        hook = self._resolve(self._hooks.check_args, "check_args", invocant)  # type: ignore[arg-type]
        with call_scope(bound):
            try:
                result = hook(bound)
            except SigParamsError:
                raise
            except Exception as e:
                raise CheckFailedError(self._name, str(e) or type(e).__name__) from e
        if result is False:
            raise CheckFailedError(self._name, "check returned False")

    def _invoke_builder(self, invocant: object, builder: str, bound: BoundParameterMap) -> object:
        return self._resolve(builder, "builder", invocant)(bound)

    def _resolve(self, ref: HookRef, role: str, invocant: object) -> Callable[..., object]:
        """Turn a hook/builder reference into a callable taking the remaining arguments."""
        if not isinstance(ref, str):
            if invocant is NO_INVOCANT:
                return ref
            return functools.partial(ref, invocant)

        if invocant is not NO_INVOCANT:
            found = getattr(invocant, ref, None)
        elif self._namespace is not None:
            found = self._namespace.lookup(ref)
        else:
            found = None

        if found is None or not callable(found):
            raise NameNotFoundError(name=ref, namespace=self.info.namespace or "<unknown>", role=role)
        return found


class BoundParamsMethod:
    """ParamsMethod accessed through an instance (the implicit invocant)."""

    __slots__ = ("__func__", "__self__")

    def __init__(self, method: ParamsMethod, instance: object) -> None:
        self.__func__ = method
        self.__self__ = instance

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.__func__.invoke(args, kwargs, invocant=self.__self__)

    def __repr__(self) -> str:
        return f"<bound ParamsMethod {self.__func__.info.qualified_name} of {self.__self__!r}>"

    @property
    def info(self) -> MethodInfo:
        """Published metadata of the underlying method."""
        return self.__func__.info


def wrap(
    signature: Signature,
    body: Callable[..., object],
    *,
    gateway: TypeConstraintGateway,
    build_args: HookRef | None = None,
    check_args: HookRef | None = None,
    namespace: NamespaceProtocol | None = None,
) -> ParamsMethod:
    """Compose hooks, binding and body into one callable.

    Args:
        signature: Parsed signature
        body: Original callable
        gateway: Type constraint gateway
        build_args: Hook rewriting raw arguments before binding
        check_args: Hook validating the bound map
        namespace: Namespace for name lookups

    Returns:
        ParamsMethod
    """
    method = ParamsMethod(
        body,
        signature,
        gateway=gateway,
        hooks=HookSet(build_args=build_args, check_args=check_args),
        namespace=namespace,
    )
    logger.debug("wrapped %s", method.info.qualified_name)
    return method


def _normalize_build_args(
    method: str, result: object
) -> tuple[Sequence[object], Mapping[str, object]]:
    if isinstance(result, CallArguments):
        return result.args, result.kwargs
    if isinstance(result, (list, tuple)):
        return tuple(result), {}
    raise TypeError(
        f"build_args hook of {method!r} must return a sequence or CallArguments, "
        f"got {type(result).__name__}"
    )
