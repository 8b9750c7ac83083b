"""Signature formatter: Signature → canonical signature text.

Canonical text reparses to an equal Signature:
    parse_signature(format_signature(sig), name=sig.name) == sig
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sigparams.domain.model.parameter import Parameter
    from sigparams.domain.model.signature import Signature


def format_signature(signature: Signature) -> str:
    """Format signature as canonical text.

    Args:
        signature: Signature to format

    Returns:
        Text such as "self: Int x, :y? = 'a'"

    Raises:
        ValueError: A string default contains both quote characters
    """
    parts = [format_parameter(p) for p in signature if not p.is_invocant]
    body = ", ".join(parts)

    invocant = signature.invocant
    if invocant is None:
        return body
    return f"{invocant.name}: {body}" if body else f"{invocant.name}:"


def format_parameter(param: Parameter) -> str:
    """Format one non-invocant parameter as canonical text."""
    text = ""
    if param.coerce:
        text += "&"
    if param.type_name is not None:
        text += f"{param.type_name} "
    if param.slurpy:
        text += "*"

    if param.bind_only:
        text += f"({param.name})"
    elif param.is_named:
        if param.external_name != param.name:
            text += f":{param.external_name}({param.name})"
        else:
            text += f":{param.name}"
    else:
        text += param.name

    if param.required != _implied_required(param):
        text += "!" if param.required else "?"

    if param.default is not None:
        text += f" = {_format_literal(param.default)}"
    elif param.builder is not None:
        text += f" = {param.builder}"

    return text


def _implied_required(param: Parameter) -> bool:
    """Requiredness the parser assigns without a quantifier."""
    if param.is_named:
        return False
    return not param.has_default and not param.slurpy


def _format_literal(value: int | str) -> str:
    if isinstance(value, int):
        return str(value)
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    raise ValueError(f"string default {value!r} contains both quote characters")
