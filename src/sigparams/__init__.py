"""sigparams - declared call signatures with lazy builders and hook pipelines."""

__version__ = "0.1.0"

from sigparams.application.binding import BoundParameterMap, TypeConstraintGateway, bind
from sigparams.application.parsing import format_signature, inflate_parameters, parse_signature
from sigparams.application.pipeline import ParamsMethod, wrap
from sigparams.application.registration import declaration_from
from sigparams.domain.exceptions import (
    BindError,
    CheckFailedError,
    CircularBuilderDependencyError,
    CoercionFailedError,
    ConstraintViolationError,
    DeclarationError,
    DuplicateArgumentError,
    MissingRequiredError,
    NameNotFoundError,
    ParseError,
    ReadOnlyViolationError,
    SigParamsError,
    TypeNotFoundError,
    UnknownParameterError,
    UnrecognizedArgumentError,
)
from sigparams.domain.model import DEFAULT_CONFIG, MethodInfo, Parameter, ParamsConfig, Signature
from sigparams.infrastructure import TypeRegistry, default_type_registry
from sigparams.presentation.api import (
    CallArguments,
    ParamsRegistry,
    current_parameters,
    method,
    params,
)

__all__ = [
    "DEFAULT_CONFIG",
    "BindError",
    "BoundParameterMap",
    "CallArguments",
    "CheckFailedError",
    "CircularBuilderDependencyError",
    "CoercionFailedError",
    "ConstraintViolationError",
    "DeclarationError",
    "DuplicateArgumentError",
    "MethodInfo",
    "MissingRequiredError",
    "NameNotFoundError",
    "Parameter",
    "ParamsConfig",
    "ParamsMethod",
    "ParamsRegistry",
    "ParseError",
    "ReadOnlyViolationError",
    "SigParamsError",
    "Signature",
    "TypeConstraintGateway",
    "TypeNotFoundError",
    "TypeRegistry",
    "UnknownParameterError",
    "UnrecognizedArgumentError",
    "__version__",
    "bind",
    "current_parameters",
    "declaration_from",
    "default_type_registry",
    "format_signature",
    "inflate_parameters",
    "method",
    "params",
    "parse_signature",
    "wrap",
]
