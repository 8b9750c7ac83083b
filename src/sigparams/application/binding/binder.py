"""Argument binder: Signature + actual arguments → BoundParameterMap.

Algorithm:
1. Invocant: taken from the implicit invocant if the call supplies one,
   else from the first positional actual.
2. Trailing key/value pairs whose key is a named parameter's external name
   are named actuals (scanned from the end); the rest is positional.
3. Positional actuals fill positional parameters by index + index_offset;
   a slurpy parameter takes everything from its index on, as a list.
4. Named actuals (trailing pairs and keyword arguments) match external
   names exactly.
5. Missing required → MissingRequiredError. Unbound optional parameters stay
   unbound: literal defaults are stored now, builders run on first read.
6. Every stored value goes through the type gateway (coerce, then validate).

Surplus positional actuals, and trailing pairs whose key is not a named
parameter, are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Final

from sigparams.application.binding.bound_map import BoundParameterMap
from sigparams.application.binding.resolver import BuilderInvoker, BuilderResolver
from sigparams.domain.exceptions import (
    DuplicateArgumentError,
    MissingRequiredError,
    UnrecognizedArgumentError,
)

if TYPE_CHECKING:
    from sigparams.application.binding.gateway import TypeConstraintGateway
    from sigparams.domain.model.signature import Signature

logger = logging.getLogger(__name__)


class _NoInvocant:
    """Sentinel: the call convention supplied no implicit invocant."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_INVOCANT"


NO_INVOCANT: Final = _NoInvocant()


def bind(
    signature: Signature,
    args: Sequence[object] = (),
    kwargs: Mapping[str, object] | None = None,
    *,
    gateway: TypeConstraintGateway,
    invocant: object = NO_INVOCANT,
    invoke_builder: BuilderInvoker | None = None,
) -> BoundParameterMap:
    """Bind actual arguments to a signature.

    Args:
        signature: Parameters to bind
        args: Positional actuals (invocant excluded when passed implicitly)
        kwargs: Keyword actuals, matched against external names
        gateway: Type constraint gateway
        invocant: Implicit invocant supplied by the call convention
        invoke_builder: Calls a builder by name, used on first read of lazy values

    Returns:
        BoundParameterMap for this call

    Raises:
        MissingRequiredError: Required parameter without actual
        UnrecognizedArgumentError: Keyword argument matches no external name
        DuplicateArgumentError: Named actual given as pair and keyword
        ConstraintViolationError: Value fails its type constraint
        TypeNotFoundError: Unknown type constraint name
    """
    stream = list(args)
    values: dict[str, object] = {}
    supplied: set[str] = set()

    offset = 0
    inv = signature.invocant
    if invocant is not NO_INVOCANT:
        if inv is not None:
            values[inv.name] = invocant
            supplied.add(inv.name)
    elif inv is not None:
        if not stream:
            raise MissingRequiredError(inv.name)
        offset = signature.index_offset
        values[inv.name] = stream[inv.index + offset]  # type: ignore[operator]
        supplied.add(inv.name)

    stream, named = _split_named_pairs(signature, stream, offset)
    _merge_keywords(signature, named, kwargs or {})

    for param in signature.positional:
        position = param.index + offset  # type: ignore[operator]
        if param.slurpy:
            rest = stream[position:]
            if rest:
                values[param.name] = rest
                supplied.add(param.name)
            elif param.required:
                raise MissingRequiredError(param.name)
            else:
                values[param.name] = []
            continue
        if position < len(stream):
            values[param.name] = stream[position]
            supplied.add(param.name)

    for external_name, value in named.items():
        param = signature.by_external_name(external_name)
        values[param.name] = value  # type: ignore[union-attr]
        supplied.add(param.name)  # type: ignore[union-attr]

    surplus = len(stream) - offset - len(signature.positional)
    if surplus > 0 and signature.slurpy is None:
        logger.debug("%s: ignoring %d surplus positional argument(s)", signature.name or "<anonymous>", surplus)

    for param in signature:
        if param.name in values:
            continue
        if param.required:
            raise MissingRequiredError(param.name)
        if param.default is not None:
            values[param.name] = param.default

    for param in signature:
        if param.name in values and param.type_name is not None:
            values[param.name] = gateway.check(param, values[param.name])

    resolver = BuilderResolver(gateway, invoke_builder)
    return BoundParameterMap(signature, values, resolver, frozenset(supplied))


def _split_named_pairs(
    signature: Signature,
    stream: list[object],
    offset: int,
) -> tuple[list[object], dict[str, object]]:
    """Peel trailing key/value pairs matching named parameters off the stream."""
    named: dict[str, object] = {}
    if not signature.named:
        return stream, named

    end = len(stream)
    # never eat into the invocant slot
    while end - 2 >= offset:
        key = stream[end - 2]
        if not isinstance(key, str):
            break
        param = signature.by_external_name(key)
        if param is None:
            break
        if key in named:
            raise DuplicateArgumentError(key)
        named[key] = stream[end - 1]
        end -= 2

    # pairs were collected back to front: restore caller order
    ordered = dict(reversed(list(named.items())))
    return stream[:end], ordered


def _merge_keywords(
    signature: Signature,
    named: dict[str, object],
    kwargs: Mapping[str, object],
) -> None:
    for key, value in kwargs.items():
        param = signature.by_external_name(key)
        if param is None:
            positional = signature.get(key)
            if positional is not None and positional.is_positional:
                raise UnrecognizedArgumentError(key, "positional parameter cannot be passed by name")
            raise UnrecognizedArgumentError(key)
        if key in named:
            raise DuplicateArgumentError(key)
        named[key] = value
