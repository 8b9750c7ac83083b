"""Call-scoped access to the bound parameter map of the running call.

The wrapper sets the map on entry and resets it on exit, so nested wrapped
calls see their own map and each thread/task has its own context.
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sigparams.application.binding.bound_map import BoundParameterMap

_current: contextvars.ContextVar[BoundParameterMap] = contextvars.ContextVar(
    "sigparams_bound_parameters",
)


@contextmanager
def call_scope(bound: BoundParameterMap) -> Iterator[BoundParameterMap]:
    """Make bound the current map for the duration of the block."""
    token = _current.set(bound)
    try:
        yield bound
    finally:
        _current.reset(token)


def current_parameters() -> BoundParameterMap:
    """Bound map of the innermost running wrapped call.

    Raises:
        LookupError: Not inside a wrapped call
    """
    try:
        return _current.get()
    except LookupError:
        raise LookupError("no bound parameters: not inside a call to a declared method") from None


def params(*names: str) -> object:
    """Read parameters of the running call.

    Without names returns the whole map. With names performs aggregate
    retrieval (see BoundParameterMap.retrieve).

    Raises:
        LookupError: Not inside a wrapped call
        UnknownParameterError: A name is not declared
    """
    bound = current_parameters()
    if not names:
        return bound
    return bound.retrieve(*names)
