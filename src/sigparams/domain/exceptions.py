"""Domain exceptions: all public errors of sigparams.

All exceptions visible to users are defined here.
Application/Infrastructure raise these, they do not define their own public exceptions.
"""

from __future__ import annotations


class SigParamsError(Exception):
    """Base for all sigparams errors.

    Allows: except SigParamsError to catch all library errors.
    """


class ParseError(SigParamsError, ValueError):
    """Malformed signature text.

    Raised once, at declaration time. Parsing is all-or-nothing.

    Attributes:
        text: Full signature text.
        token: Offending parameter token (stripped).
        position: 0-based index of the token in the comma-separated list.
        reason: Error description.
    """

    def __init__(self, *, text: str, token: str, position: int, reason: str) -> None:
        """Initialize with signature text, offending token and reason."""
        self.text = text
        self.token = token
        self.position = position
        self.reason = reason
        super().__init__(f"invalid signature {text!r}: {reason} (parameter {position}: {token!r})")


class DeclarationError(SigParamsError, TypeError):
    """Invalid method declaration request.

    Attributes:
        method: Name of the method being declared.
        reason: Why the declaration is invalid.
    """

    def __init__(self, method: str, reason: str) -> None:
        """Initialize with method name and reason."""
        self.method = method
        self.reason = reason
        super().__init__(f"cannot declare method {method!r}: {reason}")


class NameNotFoundError(SigParamsError, LookupError):
    """Builder, hook or body name does not resolve in the declaring namespace.

    Attributes:
        name: Name that was looked up.
        namespace: Qualified name of the namespace searched.
        role: What the name was for (builder, build_args, check_args, execute).
    """

    def __init__(self, *, name: str, namespace: str, role: str) -> None:
        """Initialize with looked-up name, namespace and role."""
        self.name = name
        self.namespace = namespace
        self.role = role
        super().__init__(f"{role} {name!r} points to a non-existent callable in {namespace}")


class TypeNotFoundError(SigParamsError, LookupError):
    """Type constraint name has no definition in the registry.

    Attributes:
        type_name: Unknown constraint name.
    """

    def __init__(self, type_name: str) -> None:
        """Initialize with unknown type name."""
        self.type_name = type_name
        super().__init__(f"could not find definition of type {type_name!r}")


class BindError(SigParamsError, TypeError):
    """Base for structural errors while binding actual arguments.

    Inherits TypeError: same family as a Python call with wrong arguments.
    """


class MissingRequiredError(BindError):
    """Required parameter had no actual.

    Attributes:
        parameter: Parameter name.
    """

    def __init__(self, parameter: str) -> None:
        """Initialize with parameter name."""
        self.parameter = parameter
        super().__init__(f"parameter {parameter!r} is required")


class UnrecognizedArgumentError(BindError):
    """Named actual did not match any declared external name.

    Attributes:
        key: Name passed by the caller.
        reason: Why the key was not accepted.
    """

    def __init__(self, key: str, reason: str = "no such named parameter") -> None:
        """Initialize with key and reason."""
        self.key = key
        self.reason = reason
        super().__init__(f"unrecognized argument {key!r}: {reason}")


class DuplicateArgumentError(BindError):
    """Same named parameter passed twice (trailing pair and keyword).

    Attributes:
        key: Duplicated external name.
    """

    def __init__(self, key: str) -> None:
        """Initialize with duplicated key."""
        self.key = key
        super().__init__(f"argument {key!r} given more than once")


class ConstraintViolationError(SigParamsError, TypeError):
    """Value does not satisfy a type constraint.

    Attributes:
        constraint: Constraint name.
        value: Offending value.
        parameter: Parameter name, None when raised by the registry itself.
    """

    def __init__(self, *, constraint: str, value: object, parameter: str | None = None) -> None:
        """Initialize with constraint, value and optional parameter name."""
        self.constraint = constraint
        self.value = value
        self.parameter = parameter
        super().__init__(self._format())

    def _format(self) -> str:
        subject = f"parameter {self.parameter!r}" if self.parameter else "value"
        return f"{subject} does not pass the type constraint {self.constraint!r} with {self.value!r}"


class CoercionFailedError(ConstraintViolationError):
    """Constraint has no coercion applicable to the value."""

    def _format(self) -> str:
        subject = f"parameter {self.parameter!r}" if self.parameter else "value"
        return f"cannot coerce {subject} to {self.constraint!r} from {self.value!r}"


class CircularBuilderDependencyError(SigParamsError, RuntimeError):
    """Lazy builder re-entered resolution of a parameter already being built.

    Attributes:
        cycle: Parameter names in resolution order, first name repeated at the end.
    """

    def __init__(self, cycle: tuple[str, ...]) -> None:
        """Initialize with cycle of parameter names."""
        self.cycle = cycle
        super().__init__(f"circular builder dependency: {' -> '.join(cycle)}")


class CheckFailedError(SigParamsError):
    """Check-args hook reported a cross-parameter violation.

    Attributes:
        method: Method whose check failed.
        reason: Hook-defined message.
    """

    def __init__(self, method: str, reason: str) -> None:
        """Initialize with method name and reason."""
        self.method = method
        self.reason = reason
        super().__init__(f"argument check failed for {method!r}: {reason}")


class UnknownParameterError(SigParamsError, KeyError):
    """Read of a name that is not a declared parameter.

    Inherits KeyError so callers catching lookup failures see it as one.

    Attributes:
        name: Requested name.
    """

    def __init__(self, name: object) -> None:
        """Initialize with requested name."""
        self.name = name
        super().__init__(f"unknown parameter {name!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class ReadOnlyViolationError(SigParamsError, TypeError):
    """Write attempt on a bound parameter map.

    Attributes:
        name: Key the caller tried to write or delete.
    """

    def __init__(self, name: object) -> None:
        """Initialize with key."""
        self.name = name
        super().__init__(f"bound parameters are read-only, cannot modify {name!r}")
