"""Signature parsing: text or list form → Signature, and back to text."""

from sigparams.application.parsing.formatter import format_parameter, format_signature
from sigparams.application.parsing.inflate import inflate_parameters
from sigparams.application.parsing.lexer import LexedSignature, RawToken, tokenize
from sigparams.application.parsing.parser import parse_signature

__all__ = [
    "LexedSignature",
    "RawToken",
    "format_parameter",
    "format_signature",
    "inflate_parameters",
    "parse_signature",
    "tokenize",
]
