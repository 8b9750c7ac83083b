"""Tests for application/parsing/lexer.py."""

import pytest

from sigparams.application.parsing.lexer import tokenize
from sigparams.domain.exceptions import ParseError


class TestTokenize:
    """Tests for splitting signature text."""

    def test_empty(self) -> None:
        lexed = tokenize("")
        assert lexed.invocant is None
        assert lexed.tokens == ()

    def test_splits_top_level_commas(self) -> None:
        lexed = tokenize("a, Int b ,  :c")
        assert [t.text for t in lexed.tokens] == ["a", "Int b", ":c"]
        assert [t.position for t in lexed.tokens] == [0, 1, 2]

    def test_commas_inside_brackets_and_quotes(self) -> None:
        lexed = tokenize("HashRef[Int, Str] h, :s = 'a, b'")
        assert [t.text for t in lexed.tokens] == ["HashRef[Int, Str] h", ":s = 'a, b'"]

    def test_wrapping_parentheses(self) -> None:
        lexed = tokenize("(first, second)")
        assert [t.text for t in lexed.tokens] == ["first", "second"]

    def test_parentheses_not_wrapping(self) -> None:
        lexed = tokenize("(a) = 1, (b) = 2")
        assert [t.text for t in lexed.tokens] == ["(a) = 1", "(b) = 2"]

    def test_invocant(self) -> None:
        lexed = tokenize("self: a, b")
        assert lexed.invocant == "self"
        assert [t.text for t in lexed.tokens] == ["a", "b"]

    def test_invocant_alone(self) -> None:
        lexed = tokenize("self:")
        assert lexed.invocant == "self"
        assert lexed.tokens == ()

    def test_named_is_not_invocant(self) -> None:
        assert tokenize(":a").invocant is None

    def test_detached_colon_is_not_invocant(self) -> None:
        lexed = tokenize("Int : a")
        assert lexed.invocant is None
        assert [t.text for t in lexed.tokens] == ["Int : a"]


class TestTokenizeErrors:
    """Tests for lexer failures."""

    def test_quantifier_on_invocant(self) -> None:
        with pytest.raises(ParseError, match="quantifier not allowed on the invocant"):
            tokenize("self!: a")

    def test_invocant_not_allowed(self) -> None:
        with pytest.raises(ParseError, match="invocant not allowed"):
            tokenize("self: a", allow_invocant=False)

    def test_empty_parameter(self) -> None:
        with pytest.raises(ParseError, match="empty parameter") as info:
            tokenize("a,,b")
        assert info.value.position == 1

    def test_unbalanced_bracket(self) -> None:
        with pytest.raises(ParseError, match="unbalanced"):
            tokenize("Int] a")

    def test_unclosed_bracket(self) -> None:
        with pytest.raises(ParseError, match="unclosed"):
            tokenize("ArrayRef[Int a")

    def test_unterminated_string(self) -> None:
        with pytest.raises(ParseError, match="unterminated string"):
            tokenize(":a = 'oops")

    def test_not_a_string(self) -> None:
        with pytest.raises(TypeError):
            tokenize(None)  # type: ignore[arg-type]
