"""List-form parameters: ["a", {"type": "Int"}, "b"] → Signature.

Each name may be followed by an options mapping. All entries are positional
and indexed in order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from sigparams.domain.exceptions import DeclarationError
from sigparams.domain.model.configuration import DEFAULT_CONFIG, ParamsConfig
from sigparams.domain.model.parameter import Parameter
from sigparams.domain.model.signature import Signature

# option key → accepted value types
PARAMETER_OPTIONS: Mapping[str, tuple[type, ...]] = MappingProxyType(
    {
        "type": (str,),
        "coerce": (bool,),
        "required": (bool,),
        "default": (int, str),
        "builder": (str, bool),
        "slurpy": (bool,),
    }
)


def inflate_parameters(
    entries: Sequence[object],
    *,
    name: str = "",
    config: ParamsConfig = DEFAULT_CONFIG,
) -> Signature:
    """Build a positional Signature from a name/options list.

    Args:
        entries: Parameter names, each optionally followed by an options mapping
        name: Owning callable name (for the Signature and error messages)
        config: Naming convention for `builder=True`

    Returns:
        Signature

    Raises:
        DeclarationError: Unknown option, wrong option type, or invalid parameter
    """
    if isinstance(entries, (str, bytes)):
        raise DeclarationError(name or "<anonymous>", "params list must not be a string")

    owner = name or "<anonymous>"
    parameters: list[Parameter] = []
    position = 0
    i = 0
    while i < len(entries):
        current = entries[i]
        if not isinstance(current, str):
            raise DeclarationError(owner, f"expected parameter name at {i}, got {current!r}")

        options: Mapping[str, object] = {}
        if i + 1 < len(entries) and isinstance(entries[i + 1], Mapping):
            options = entries[i + 1]  # type: ignore[assignment]
            i += 1

        parameters.append(_inflate_one(owner, current, position, options, config))
        position += 1
        i += 1

    try:
        return Signature(parameters=tuple(parameters), name=name)
    except ValueError as e:
        raise DeclarationError(owner, str(e)) from e


def _inflate_one(
    owner: str,
    param_name: str,
    position: int,
    options: Mapping[str, object],
    config: ParamsConfig,
) -> Parameter:
    for key, value in options.items():
        accepted = PARAMETER_OPTIONS.get(key)
        if accepted is None:
            raise DeclarationError(owner, f"unknown option {key!r} for parameter {param_name!r}")
        if not isinstance(value, accepted) or (isinstance(value, bool) and bool not in accepted):
            raise DeclarationError(owner, f"invalid value {value!r} for option {key!r}")

    builder = options.get("builder")
    if builder is True:
        builder = config.builder_name(param_name)
    elif builder is False:
        builder = None

    default = options.get("default")
    slurpy = bool(options.get("slurpy", False))
    has_default = default is not None or builder is not None
    required = options.get("required", not has_default and not slurpy)

    try:
        return Parameter(
            name=param_name,
            index=position,
            required=bool(required),
            slurpy=slurpy,
            type_name=options.get("type"),  # type: ignore[arg-type]
            coerce=bool(options.get("coerce", False)),
            default=default,  # type: ignore[arg-type]
            builder=builder,  # type: ignore[arg-type]
        )
    except ValueError as e:
        raise DeclarationError(owner, str(e)) from e
