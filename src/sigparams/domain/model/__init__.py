"""Domain model: immutable value objects."""

from sigparams.domain.model.call_arguments import CallArguments
from sigparams.domain.model.configuration import DEFAULT_CONFIG, ParamsConfig
from sigparams.domain.model.declaration import (
    Execute,
    ExecuteByName,
    ExecuteCallable,
    MethodDeclaration,
)
from sigparams.domain.model.hooks import HookRef, HookSet
from sigparams.domain.model.method_info import MethodInfo
from sigparams.domain.model.parameter import Parameter, ParameterKind
from sigparams.domain.model.signature import Signature

__all__ = [
    "DEFAULT_CONFIG",
    "CallArguments",
    "Execute",
    "ExecuteByName",
    "ExecuteCallable",
    "HookRef",
    "HookSet",
    "MethodDeclaration",
    "MethodInfo",
    "ParamsConfig",
    "Parameter",
    "ParameterKind",
    "Signature",
]
