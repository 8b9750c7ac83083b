"""sigparams domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, types, collections.abc
"""

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
from sigparams.domain.model import (
    DEFAULT_CONFIG,
    CallArguments,
    HookSet,
    MethodDeclaration,
    MethodInfo,
    ParamsConfig,
    Parameter,
    ParameterKind,
    Signature,
)

__all__ = [
    # Exceptions
    "SigParamsError",
    "ParseError",
    "DeclarationError",
    "NameNotFoundError",
    "TypeNotFoundError",
    "BindError",
    "MissingRequiredError",
    "UnrecognizedArgumentError",
    "DuplicateArgumentError",
    "ConstraintViolationError",
    "CoercionFailedError",
    "CircularBuilderDependencyError",
    "CheckFailedError",
    "UnknownParameterError",
    "ReadOnlyViolationError",
    # Value objects
    "Parameter",
    "ParameterKind",
    "Signature",
    "HookSet",
    "CallArguments",
    "MethodDeclaration",
    "MethodInfo",
    # Configuration
    "ParamsConfig",
    "DEFAULT_CONFIG",
]
