"""Signature lexer: raw text → invocant marker + parameter tokens.

Splits on top-level commas only. Commas inside brackets (type qualifiers)
or quotes (string defaults) belong to the token.

Syntax:
    (self: Int x, :y = 'a, b')    optional wrapping parentheses
    self:                         leading invocant marker, first only
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sigparams.domain.exceptions import ParseError

# name: at token start, colon attached to the name and followed by whitespace or end
# (":name" is a named parameter, "Type : name" a typed named parameter)
INVOCANT_RE = re.compile(r"\s*(?P<name>[A-Za-z_]\w*)(?P<quantifier>[!?]*):(?=\s|$)")

_OPEN = {"[": "]", "(": ")"}
_CLOSE = {"]": "[", ")": "("}


@dataclass(frozen=True, slots=True)
class RawToken:
    """One comma-separated parameter token.

    Attributes:
        text: Token text, surrounding whitespace stripped
        position: 0-based index among parameter tokens (invocant excluded)
    """

    text: str
    position: int


@dataclass(frozen=True, slots=True)
class LexedSignature:
    """Lexer output.

    Attributes:
        source: Original signature text
        invocant: Invocant name, None if not declared
        tokens: Parameter tokens in order
    """

    source: str
    invocant: str | None
    tokens: tuple[RawToken, ...]


def tokenize(text: str, *, allow_invocant: bool = True) -> LexedSignature:
    """Split signature text into invocant and parameter tokens.

    Args:
        text: Signature text
        allow_invocant: Whether a leading `name:` marker is accepted

    Returns:
        LexedSignature

    Raises:
        ParseError: Unbalanced brackets/quotes, empty parameter, bad invocant
        TypeError: If text is not a str
    """
    if not isinstance(text, str):
        raise TypeError(f"signature must be str, got {type(text).__name__}")

    body = _strip_wrapping_parens(text.strip())

    invocant: str | None = None
    match = INVOCANT_RE.match(body)
    if match is not None:
        marker = body[: match.end()].strip()
        if match.group("quantifier"):
            raise ParseError(
                text=text, token=marker, position=0, reason="quantifier not allowed on the invocant"
            )
        if not allow_invocant:
            raise ParseError(text=text, token=marker, position=0, reason="invocant not allowed here")
        invocant = match.group("name")
        body = body[match.end() :]

    if not body.strip():
        return LexedSignature(source=text, invocant=invocant, tokens=())

    pieces = _split_top_level(text, body)
    tokens: list[RawToken] = []
    for position, piece in enumerate(pieces):
        stripped = piece.strip()
        if not stripped:
            raise ParseError(text=text, token=piece, position=position, reason="empty parameter")
        tokens.append(RawToken(text=stripped, position=position))

    return LexedSignature(source=text, invocant=invocant, tokens=tuple(tokens))


def _strip_wrapping_parens(body: str) -> str:
    """Remove one pair of parentheses wrapping the whole text."""
    if not (body.startswith("(") and body.endswith(")")):
        return body
    depth = 0
    quote: str | None = None
    for i, ch in enumerate(body):
        if quote is not None:
            if ch == quote:
                quote = None
            continue
        if ch in "'\"":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0 and i != len(body) - 1:
                # first paren closes early: "(a)=, (b)" is not wrapped
                return body
    return body[1:-1].strip()


def _split_top_level(source: str, body: str) -> list[str]:
    """Split on commas outside brackets and quotes."""
    pieces: list[str] = []
    stack: list[str] = []
    quote: str | None = None
    start = 0

    for i, ch in enumerate(body):
        if quote is not None:
            if ch == quote:
                quote = None
            continue
        if ch in "'\"":
            quote = ch
        elif ch in _OPEN:
            stack.append(ch)
        elif ch in _CLOSE:
            if not stack or stack[-1] != _CLOSE[ch]:
                raise ParseError(
                    text=source,
                    token=body[start : i + 1].strip(),
                    position=len(pieces),
                    reason=f"unbalanced {ch!r}",
                )
            stack.pop()
        elif ch == "," and not stack:
            pieces.append(body[start:i])
            start = i + 1

    last = body[start:]
    if quote is not None:
        raise ParseError(
            text=source, token=last.strip(), position=len(pieces), reason="unterminated string"
        )
    if stack:
        raise ParseError(
            text=source, token=last.strip(), position=len(pieces), reason=f"unclosed {stack[-1]!r}"
        )
    pieces.append(last)
    return pieces
