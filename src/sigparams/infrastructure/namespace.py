"""Namespace adapters: classes and modules as declaring namespaces."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from types import ModuleType

from sigparams.domain.ports.namespace import NamespaceProtocol


class ClassNamespace:
    """Class as namespace: lookup through the MRO, publish with setattr."""

    __slots__ = ("_cls",)

    def __init__(self, cls: type) -> None:
        """Initialize adapter.

        Raises:
            TypeError: If cls is not a class
        """
        if not isinstance(cls, type):
            raise TypeError(f"expected a class, got {type(cls).__name__}")
        self._cls = cls

    def __repr__(self) -> str:
        return f"ClassNamespace({self.qualified_name})"

    @property
    def target(self) -> type:
        """Wrapped class."""
        return self._cls

    @property
    def qualified_name(self) -> str:
        """module.Class"""
        return f"{self._cls.__module__}.{self._cls.__qualname__}"

    def lookup(self, name: str) -> object | None:
        """Find class attribute (inherited included)."""
        return getattr(self._cls, name, None)

    def publish(self, name: str, value: object) -> None:
        """Set class attribute, running __set_name__ like class creation does."""
        setattr(self._cls, name, value)
        set_name = getattr(value, "__set_name__", None)
        if set_name is not None:
            set_name(self._cls, name)


class ModuleNamespace:
    """Module globals as namespace."""

    __slots__ = ("_globals", "_name")

    def __init__(self, namespace: MutableMapping[str, object], name: str | None = None) -> None:
        """Initialize adapter.

        Args:
            namespace: Globals dict of the module
            name: Module name, defaults to namespace["__name__"]
        """
        self._globals = namespace
        self._name = name if name is not None else str(namespace.get("__name__", "<module>"))

    def __repr__(self) -> str:
        return f"ModuleNamespace({self._name})"

    @classmethod
    def of_function(cls, func: Callable[..., object]) -> ModuleNamespace:
        """Namespace of the module a function was defined in."""
        namespace = getattr(func, "__globals__", None)
        if namespace is None:
            raise TypeError(f"{func!r} has no module globals")
        return cls(namespace, getattr(func, "__module__", None))

    @property
    def qualified_name(self) -> str:
        """Module name."""
        return self._name

    def lookup(self, name: str) -> object | None:
        """Find module-level name."""
        return self._globals.get(name)

    def publish(self, name: str, value: object) -> None:
        """Bind module-level name."""
        self._globals[name] = value


def namespace_for(target: object) -> NamespaceProtocol:
    """Adapt a class, module, globals dict or namespace object.

    Raises:
        TypeError: target cannot be used as a namespace
    """
    if isinstance(target, type):
        return ClassNamespace(target)
    if isinstance(target, ModuleType):
        return ModuleNamespace(vars(target), target.__name__)
    if isinstance(target, MutableMapping):
        return ModuleNamespace(target)
    if all(hasattr(target, attr) for attr in ("qualified_name", "lookup", "publish")):
        return target  # type: ignore[return-value]
    raise TypeError(f"cannot use {type(target).__name__} as a namespace")
