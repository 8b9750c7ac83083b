"""Infrastructure: default type registry and namespace adapters."""

from sigparams.infrastructure.namespace import ClassNamespace, ModuleNamespace, namespace_for
from sigparams.infrastructure.type_registry import (
    Coercion,
    TypeConstraint,
    TypeRegistry,
    default_type_registry,
)

__all__ = [
    "ClassNamespace",
    "Coercion",
    "ModuleNamespace",
    "TypeConstraint",
    "TypeRegistry",
    "default_type_registry",
    "namespace_for",
]
