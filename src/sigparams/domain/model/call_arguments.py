"""Raw call arguments value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class CallArguments:
    """Positional and keyword actuals of one call.

    Returned by build-args hooks that need to rewrite keyword arguments too.
    A hook returning a plain sequence replaces only the positional actuals.

    Attributes:
        args: Positional actuals
        kwargs: Keyword actuals (read-only view)
    """

    args: tuple[object, ...] = ()
    kwargs: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze containers. FAIL-FIRST on wrong shapes."""
        if isinstance(self.args, (str, bytes)) or not isinstance(self.args, (tuple, list)):
            raise TypeError(f"args must be a tuple or list, got {type(self.args).__name__}")
        if not isinstance(self.kwargs, Mapping):
            raise TypeError(f"kwargs must be a mapping, got {type(self.kwargs).__name__}")
        for key in self.kwargs:
            if not isinstance(key, str):
                raise TypeError(f"keyword names must be str, got {key!r}")
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "kwargs", MappingProxyType(dict(self.kwargs)))
