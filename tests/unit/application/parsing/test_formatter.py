"""Tests for application/parsing/formatter.py."""

import pytest

from sigparams.application.parsing.formatter import format_parameter, format_signature
from sigparams.application.parsing.parser import parse_signature
from sigparams.domain.model.parameter import Parameter


class TestFormatSignature:
    """Tests for canonical text."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("first,second", "first, second"),
            ("Int   x=5", "Int x = 5"),
            (":first='medium'", ":first = 'medium'"),
            ("self:  Int x ,  :y", "self: Int x, :y"),
            ("self:", "self:"),
            ("=x", "x = build_param_x"),
            ("ArrayRef *values", "ArrayRef *values"),
            ("*rest!", "*rest!"),
            ("x?", "x?"),
            (":x!", ":x!"),
            ("&Int :ext( real )", "&Int :ext(real)"),
            ("(calc) = make_calc()", "(calc) = make_calc"),
        ],
    )
    def test_canonical(self, text: str, expected: str) -> None:
        assert format_signature(parse_signature(text)) == expected

    def test_string_with_single_quote(self) -> None:
        assert format_signature(parse_signature(""":s = "it's" """)) == """:s = "it's\""""

    @pytest.mark.parametrize(
        "text",
        [
            "self: &Int x, Str y?, :z(zed) = 'a, b', (calc) =",
            "a, b = 0, ArrayRef[Int] *rest",
            "Maybe[Str] :opt!, :other = builder_fn",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        sig = parse_signature(text, name="m")
        assert parse_signature(format_signature(sig), name="m") == sig

    def test_both_quotes_rejected(self) -> None:
        param = Parameter(name="x", index=0, default="it's \"x\"")
        with pytest.raises(ValueError, match="both quote characters"):
            format_parameter(param)
