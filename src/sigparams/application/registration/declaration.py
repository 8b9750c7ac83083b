"""Declaration requests: normalize accepted call shapes into MethodDeclaration.

Accepted shapes:
    method("m")                               body deferred: _execute_m
    method("m", body)                         body given
    method("m", params=..., ..., body)        options + trailing body
    method("m", params=..., execute="name")   body deferred by name
    method("m", params=..., execute=body)     body given as option
    method("m", params=...)                   body deferred: _execute_m
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from sigparams.application.parsing.inflate import inflate_parameters
from sigparams.application.parsing.parser import parse_signature
from sigparams.domain.exceptions import DeclarationError
from sigparams.domain.model.configuration import DEFAULT_CONFIG, ParamsConfig
from sigparams.domain.model.declaration import (
    Execute,
    ExecuteByName,
    ExecuteCallable,
    MethodDeclaration,
)
from sigparams.domain.model.hooks import HookRef, HookSet
from sigparams.domain.model.signature import Signature

if TYPE_CHECKING:
    from collections.abc import Mapping

DECLARATION_OPTIONS = frozenset({"params", "build_args", "check_args", "execute"})


def declaration_from(
    name: str,
    *args: object,
    config: ParamsConfig = DEFAULT_CONFIG,
    **options: object,
) -> MethodDeclaration:
    """Validate a declaration request once and build MethodDeclaration.

    Args:
        name: Method name
        args: Nothing, or a single trailing callable body
        config: Naming conventions for derived names
        options: params, build_args, check_args, execute

    Returns:
        MethodDeclaration

    Raises:
        DeclarationError: Invalid shape or option
        ParseError: Malformed signature text
    """
    if not isinstance(name, str) or not name.isidentifier():
        raise DeclarationError(str(name), "method name must be an identifier")

    unknown = set(options) - DECLARATION_OPTIONS
    if unknown:
        raise DeclarationError(name, f"unknown option(s) {sorted(unknown)}")

    execute = _execute_from(name, args, options, config)
    signature = _signature_from(name, options.get("params"), config)
    hooks = HookSet(
        build_args=_hook_from(name, "build_args", options.get("build_args"), config.build_args_name),
        check_args=_hook_from(name, "check_args", options.get("check_args"), config.check_args_name),
    )
    return MethodDeclaration(name=name, execute=execute, signature=signature, hooks=hooks)


def _execute_from(
    name: str,
    args: tuple[object, ...],
    options: Mapping[str, object],
    config: ParamsConfig,
) -> Execute:
    if len(args) > 1:
        raise DeclarationError(name, f"expected at most one trailing callable, got {len(args)} arguments")

    if args:
        body = args[0]
        if not callable(body):
            raise DeclarationError(name, f"trailing argument must be callable, not {type(body).__name__}")
        if "execute" in options:
            raise DeclarationError(name, "found both an 'execute' option and a trailing callable")
        return ExecuteCallable(body)

    if "execute" not in options:
        return ExecuteByName(config.execute_name(name))

    execute = options["execute"]
    if isinstance(execute, str):
        if not execute.isidentifier():
            raise DeclarationError(name, f"option 'execute' must name an identifier, got {execute!r}")
        return ExecuteByName(execute)
    if callable(execute):
        return ExecuteCallable(execute)
    raise DeclarationError(
        name, f"option 'execute' must be a callable or a name, not {type(execute).__name__}"
    )


def _signature_from(name: str, params: object, config: ParamsConfig) -> Signature:
    if params is None:
        return Signature(name=name)
    if isinstance(params, str):
        return parse_signature(params, name=name, config=config)
    if isinstance(params, Sequence):
        return inflate_parameters(params, name=name, config=config)
    raise DeclarationError(
        name, f"option 'params' must be signature text or a list, not {type(params).__name__}"
    )


def _hook_from(
    name: str,
    role: str,
    value: object,
    derive: Callable[[str], str],
) -> HookRef | None:
    if value is None or value is False:
        return None
    if value is True:
        return derive(name)
    if isinstance(value, str):
        if not value.isidentifier():
            raise DeclarationError(name, f"option {role!r} must name an identifier, got {value!r}")
        return value
    if callable(value):
        return value
    raise DeclarationError(name, f"option {role!r} must be a name, a callable or True")
