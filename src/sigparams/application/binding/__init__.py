"""Argument binding: actuals → lazily resolved, read-only bound map."""

from sigparams.application.binding.binder import NO_INVOCANT, bind
from sigparams.application.binding.bound_map import BoundParameterMap
from sigparams.application.binding.gateway import TypeConstraintGateway
from sigparams.application.binding.resolver import BuilderInvoker, BuilderResolver

__all__ = [
    "NO_INVOCANT",
    "BoundParameterMap",
    "BuilderInvoker",
    "BuilderResolver",
    "TypeConstraintGateway",
    "bind",
]
