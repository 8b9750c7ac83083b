"""Hook pipeline: build-args → bind → check-args → body."""

from sigparams.application.pipeline.context import call_scope, current_parameters, params
from sigparams.application.pipeline.wrapper import BoundParamsMethod, ParamsMethod, wrap

__all__ = [
    "BoundParamsMethod",
    "ParamsMethod",
    "call_scope",
    "current_parameters",
    "params",
    "wrap",
]
