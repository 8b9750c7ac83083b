"""Declaration API.

Public exports:
    method: Decorator declaring a method with a signature
    ParamsRegistry: Two-phase declaration for a class or module
    params: Bound parameters of the running call
    current_parameters: Bound map of the running call
    CallArguments: Return value of build_args hooks
"""

from sigparams.application.pipeline.context import current_parameters, params
from sigparams.domain.model.call_arguments import CallArguments
from sigparams.presentation.api.decorators import method
from sigparams.presentation.api.registry import ParamsRegistry

__all__ = [
    "CallArguments",
    "ParamsRegistry",
    "current_parameters",
    "method",
    "params",
]
