"""Namespace protocol: where declared methods, builders and hooks live."""

from __future__ import annotations

from typing import Protocol


class NamespaceProtocol(Protocol):
    """Contract for a declaring namespace (class or module).

    Builders, hooks and deferred bodies are looked up here by name.
    Finalized methods are published here.
    """

    @property
    def qualified_name(self) -> str:
        """Dotted name used in error messages and introspection."""
        ...

    def lookup(self, name: str) -> object | None:
        """Find attribute by name, None if absent."""
        ...

    def publish(self, name: str, value: object) -> None:
        """Bind value under name."""
        ...
