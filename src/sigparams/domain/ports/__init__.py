"""Domain ports (protocols)."""

from sigparams.domain.ports.namespace import NamespaceProtocol
from sigparams.domain.ports.type_registry import (
    AggregateKind,
    TypeConstraintProtocol,
    TypeRegistryProtocol,
)

__all__ = [
    "AggregateKind",
    "NamespaceProtocol",
    "TypeConstraintProtocol",
    "TypeRegistryProtocol",
]
