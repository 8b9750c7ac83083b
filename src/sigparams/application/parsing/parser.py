"""Signature parser: tokens → Signature.

Parameter token grammar (whitespace between parts is insignificant):

    [=] [*] [&]Type [=] [*] [:] name [(real)] [!|?] [= default]
                             |  (real)          bind-only, needs a default

    *        slurpy: collects remaining positional actuals (last, positional only)
    &Type    coerce through the type's coercion before validating
    :name    named parameter (default optional), plain name is positional
             (default required)
    ext(name)   named alias: callers pass `ext`, map key is `name`
    ! ?      required / optional quantifier
    = 5      literal unsigned int
    = 'x'    literal string, verbatim (no escapes, quote style irrelevant)
    = fn     builder by name, `fn()` is the same
    =        builder auto-named from config (build_param_<name>)

A `=` placed right before the name sigils (`=:size`, `Int =*rest`) or at
the start of the token (`=size`) is the same as a trailing bare `=`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from sigparams.application.parsing.lexer import INVOCANT_RE, RawToken, tokenize
from sigparams.domain.exceptions import ParseError
from sigparams.domain.model.configuration import DEFAULT_CONFIG, ParamsConfig
from sigparams.domain.model.parameter import Parameter, ParameterKind
from sigparams.domain.model.signature import Signature

logger = logging.getLogger(__name__)

_IDENT_RE = re.compile(r"[A-Za-z_]\w*")
_TYPE_NAME_RE = re.compile(r"[A-Za-z_][\w:.]*")
_INT_RE = re.compile(r"\d+")
_BUILDER_RE = re.compile(r"(?P<name>[A-Za-z_]\w*)\s*(?:\(\s*\))?")


@dataclass(frozen=True, slots=True)
class _Draft:
    """Parsed token before index assignment."""

    token: RawToken
    name: str
    named: bool
    external_name: str | None
    bind_only: bool
    slurpy: bool
    type_name: str | None
    coerce: bool
    quantifier: str | None
    default: int | str | None
    builder: str | None

    @property
    def has_default(self) -> bool:
        return self.default is not None or self.builder is not None


class _Cursor:
    """Character cursor over one token."""

    __slots__ = ("pos", "text")

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else ""

    def accept(self, ch: str) -> bool:
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def skip_ws(self) -> bool:
        start = self.pos
        while self.peek().isspace():
            self.pos += 1
        return self.pos > start

    def match(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.text, self.pos)
        if m is None:
            return None
        self.pos = m.end()
        return m.group(0)

    def read_type(self) -> str | None:
        """Identifier with optional balanced [...] qualifier, verbatim."""
        start = self.pos
        if self.match(_TYPE_NAME_RE) is None:
            return None
        if self.peek() == "[":
            depth = 0
            while self.pos < len(self.text):
                ch = self.text[self.pos]
                self.pos += 1
                if ch == "[":
                    depth += 1
                elif ch == "]":
                    depth -= 1
                    if depth == 0:
                        break
        return self.text[start : self.pos]

    def rest(self) -> str:
        return self.text[self.pos :]

    def at_end(self) -> bool:
        return not self.rest().strip()


def parse_signature(
    text: str,
    *,
    name: str = "",
    allow_invocant: bool = True,
    config: ParamsConfig = DEFAULT_CONFIG,
) -> Signature:
    """Parse signature text.

    Pure and deterministic: identical text gives equal Signatures.

    Args:
        text: Signature text, e.g. "self: Int x, :y = 'a'"
        name: Owning callable name stored on the Signature
        allow_invocant: Whether a leading `name:` invocant marker is accepted
        config: Naming convention for auto-named builders

    Returns:
        Signature

    Raises:
        ParseError: Malformed text (all-or-nothing, no partial signature)
    """
    lexed = tokenize(text, allow_invocant=allow_invocant)
    drafts = [_parse_token(text, token, config) for token in lexed.tokens]
    _check_structure(text, drafts)

    parameters: list[Parameter] = []
    if lexed.invocant is not None:
        if any(d.name == lexed.invocant for d in drafts):
            raise ParseError(
                text=text, token=f"{lexed.invocant}:", position=0, reason="duplicate parameter name"
            )
        parameters.append(
            Parameter(name=lexed.invocant, index=-1, is_invocant=True, required=True)
        )

    index = 0
    for draft in drafts:
        parameters.append(_build_parameter(draft, index))
        if not draft.named:
            index += 1

    signature = Signature(
        parameters=tuple(parameters),
        index_offset=1 if lexed.invocant is not None else 0,
        name=name,
    )
    logger.debug("parsed signature %r for %r: %d parameter(s)", text, name, len(signature))
    return signature


def _build_parameter(draft: _Draft, index: int) -> Parameter:
    if draft.named:
        required = draft.quantifier == "!"
    else:
        required = draft.quantifier == "!" or (
            draft.quantifier is None and not draft.has_default and not draft.slurpy
        )
    return Parameter(
        name=draft.name,
        kind=ParameterKind.NAMED if draft.named else ParameterKind.POSITIONAL,
        index=None if draft.named else index,
        external_name=draft.external_name,
        required=required,
        slurpy=draft.slurpy,
        bind_only=draft.bind_only,
        type_name=draft.type_name,
        coerce=draft.coerce,
        default=draft.default,
        builder=draft.builder,
    )


def _check_structure(text: str, drafts: list[_Draft]) -> None:
    """Cross-token rules: uniqueness, slurpy placement, positional before named."""
    names: set[str] = set()
    externals: set[str] = set()
    slurpy_seen: _Draft | None = None
    named_seen = False

    for draft in drafts:
        token = draft.token

        def fail(reason: str, token: RawToken = token) -> ParseError:
            return ParseError(text=text, token=token.text, position=token.position, reason=reason)

        if slurpy_seen is not None:
            if draft.slurpy:
                raise fail("multiple slurpy parameters")
            raise fail(f"slurpy parameter {slurpy_seen.name!r} must be last")

        if draft.name in names:
            raise fail(f"duplicate parameter name {draft.name!r}")
        names.add(draft.name)

        if draft.external_name is not None:
            if draft.external_name in externals:
                raise fail(f"duplicate named argument {draft.external_name!r}")
            externals.add(draft.external_name)

        if not draft.bind_only:
            if draft.named:
                named_seen = True
            elif named_seen:
                raise fail("positional parameter after named parameters")

        if draft.slurpy:
            slurpy_seen = draft


def _parse_token(text: str, token: RawToken, config: ParamsConfig) -> _Draft:
    """Parse one parameter token."""

    def fail(reason: str) -> ParseError:
        return ParseError(text=text, token=token.text, position=token.position, reason=reason)

    if INVOCANT_RE.match(token.text):
        raise fail("invocant marker must be in first position")

    cur = _Cursor(token.text)
    pre_default = cur.accept("=")
    cur.skip_ws()
    slurpy = cur.accept("*")
    cur.skip_ws()
    coerce = cur.accept("&")
    cur.skip_ws()

    type_name: str | None = None
    if coerce:
        type_name = cur.read_type()
        if type_name is None:
            raise fail("coercion marker '&' must precede a type name")
        cur.skip_ws()
    elif _starts_with_type(cur):
        type_name = cur.read_type()
        cur.skip_ws()

    if type_name is not None and cur.accept("="):
        if pre_default:
            raise fail("duplicate '=' before parameter name")
        pre_default = True
        cur.skip_ws()

    if cur.accept("*"):
        if slurpy:
            raise fail("duplicate slurpy marker '*'")
        slurpy = True
        cur.skip_ws()

    named = cur.accept(":")
    cur.skip_ws()
    if slurpy and named:
        raise fail("slurpy parameter must be positional")

    external_name: str | None = None
    bind_only = False
    if cur.peek() == "(":
        name = _read_parenthesized(cur, fail)
        bind_only = True
        named = True
        if slurpy:
            raise fail("slurpy parameter cannot be bind-only")
    else:
        ident = cur.match(_IDENT_RE)
        if ident is None:
            found = cur.peek()
            raise fail(f"unexpected {found!r}, expected parameter name" if found else "missing parameter name")
        if cur.peek() == "(":
            if not named:
                raise fail("aliasing requires a named parameter")
            name = _read_parenthesized(cur, fail)
            external_name = ident
        else:
            name = ident
            external_name = ident if named else None

    cur.skip_ws()
    quantifier: str | None = None
    if cur.peek() in ("!", "?"):
        quantifier = cur.peek()
        cur.pos += 1
        if cur.peek() in ("!", "?"):
            raise fail(f"unknown quantifier {quantifier + cur.peek()!r}")
        cur.skip_ws()

    default: int | str | None = None
    builder: str | None = None
    if cur.accept("="):
        if pre_default:
            raise fail("default given twice")
        default, builder = _parse_default(cur.rest().strip(), fail)
        if default is None and builder is None:
            builder = config.builder_name(name)
    elif pre_default:
        if not cur.at_end():
            raise fail(f"unexpected {cur.rest().strip()!r}")
        builder = config.builder_name(name)
    elif not cur.at_end():
        raise fail(f"unexpected {cur.rest().strip()!r}")

    has_default = default is not None or builder is not None
    if quantifier == "!" and has_default:
        raise fail("required parameter cannot have a default")
    if bind_only and not has_default:
        raise fail("bind-only parameter must have a default")
    if slurpy and has_default:
        raise fail("slurpy parameter cannot have a default")

    return _Draft(
        token=token,
        name=name,
        named=named,
        external_name=external_name,
        bind_only=bind_only,
        slurpy=slurpy,
        type_name=type_name,
        coerce=coerce,
        quantifier=quantifier,
        default=default,
        builder=builder,
    )


def _starts_with_type(cur: _Cursor) -> bool:
    """Lookahead: is the next word a type name followed by the parameter name?"""
    start = cur.pos
    try:
        word = cur.read_type()
        if word is None:
            return False
        if "[" in word:
            return True
        if not cur.skip_ws():
            return False
        nxt = cur.peek()
        if nxt.isalpha() or nxt in ("_", ":", "*", "("):
            return True
        if nxt != "=":
            return False
        cur.pos += 1
        cur.skip_ws()
        return cur.peek() in (":", "*")
    finally:
        cur.pos = start


def _read_parenthesized(cur: _Cursor, fail: Callable[[str], ParseError]) -> str:
    """Read `(identifier)`."""
    cur.accept("(")
    cur.skip_ws()
    ident = cur.match(_IDENT_RE)
    cur.skip_ws()
    if ident is None or not cur.accept(")"):
        raise fail("expected '(name)'")
    return ident


def _parse_default(
    clause: str, fail: Callable[[str], ParseError]
) -> tuple[int | str | None, str | None]:
    """Parse text after `=`: (literal, builder); both None for a bare `=`."""
    if not clause:
        return None, None

    if _INT_RE.fullmatch(clause):
        return int(clause), None

    if clause[0] in ("'", '"'):
        end = clause.find(clause[0], 1)
        if end == -1:
            raise fail("unterminated string default")
        if clause[end + 1 :].strip():
            raise fail(f"unexpected {clause[end + 1 :].strip()!r} after default")
        return clause[1:end], None

    match = _BUILDER_RE.fullmatch(clause)
    if match is None:
        raise fail(f"invalid default {clause!r}")
    return None, match.group("name")
