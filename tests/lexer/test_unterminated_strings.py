"""Test unterminated string literals and unrecognized characters.

A string that reaches a newline before its closing quote is an error.
A string that reaches the end of the source with no newline is not: the
lexer reports end of input instead (unless strict_strings is set).
"""

import logging

import pytest

from mathlang.config import LexConfig, lex_config_context
from mathlang.errors import LexError, UnrecognizedCharacterError, UnterminatedStringError
from mathlang.lexer import Lexer
from mathlang.tokens import Token


class TestUnterminatedAtNewline:
    """Newline before the closing quote raises."""

    def test_raises_at_newline(self) -> None:
        lexer = Lexer('"abc\ndef"')
        with pytest.raises(UnterminatedStringError) as exc_info:
            lexer.next()

        err = exc_info.value
        assert err.offset == 4
        assert err.lineno == 1
        assert err.col_offset == 5

    def test_raises_after_earlier_tokens(self) -> None:
        lexer = Lexer('print "oops\n";')
        assert lexer.next() == Token.name("print")
        with pytest.raises(UnterminatedStringError):
            lexer.next()

    def test_newline_position_on_later_line(self) -> None:
        source = 'x;\n  "ab\ncd"'
        lexer = Lexer(source, source_file="prog.ml")
        lexer.next()
        lexer.next()
        with pytest.raises(UnterminatedStringError) as exc_info:
            lexer.next()

        err = exc_info.value
        assert err.offset == source.index("\n", 4)
        assert err.lineno == 2
        assert err.col_offset == 6
        assert str(err) == "prog.ml:2:6 unterminated string literal"

    def test_newline_error_even_without_closing_quote(self) -> None:
        """A newline wins over end of input when both are missing a quote."""
        with pytest.raises(UnterminatedStringError):
            Lexer('"abc\ndef').next()

    def test_is_lex_error(self) -> None:
        with pytest.raises(LexError):
            Lexer('"\n"').next()


class TestUnterminatedAtEndOfInput:
    """No newline and no closing quote yields end of input."""

    def test_returns_none(self) -> None:
        lexer = Lexer('"abc')
        assert lexer.next() is None

    def test_stays_at_end(self) -> None:
        lexer = Lexer('x "abc')
        assert lexer.next() == Token.name("x")
        assert lexer.next() is None
        assert lexer.next() is None
        assert lexer.position == len('x "abc')

    def test_lone_quote(self) -> None:
        assert list(Lexer('"').tokenize()) == []

    def test_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="mathlang"):
            Lexer('"abc').next()

        assert any("Unterminated string" in r.getMessage() for r in caplog.records)
        assert all(r.name.startswith("mathlang.") for r in caplog.records)

    def test_strict_strings_raises(self) -> None:
        with lex_config_context(LexConfig(strict_strings=True)):
            lexer = Lexer('x "abc')

        assert lexer.next() == Token.name("x")
        with pytest.raises(UnterminatedStringError) as exc_info:
            lexer.next()
        assert exc_info.value.offset == 6
        assert exc_info.value.col_offset == 7

    def test_strict_strings_still_accepts_closed_strings(self) -> None:
        with lex_config_context(LexConfig(strict_strings=True)):
            tokens = list(Lexer('"a" "b"').tokenize())
        assert tokens == [Token.string("a"), Token.string("b")]


class TestUnrecognizedCharacter:
    """Characters outside every class raise at their exact position."""

    @pytest.mark.parametrize("char", ["#", "*", "/", "(", ".", "'", "\x00", "@"])
    def test_raises(self, char: str) -> None:
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            Lexer(char).next()
        assert exc_info.value.char == char
        assert exc_info.value.offset == 0

    def test_exact_position(self) -> None:
        source = "x = 5;\n  y # 2"
        lexer = Lexer(source)
        for _ in range(5):
            lexer.next()

        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            lexer.next()

        err = exc_info.value
        assert err.offset == source.index("#")
        assert err.lineno == 2
        assert err.col_offset == 5
        assert str(err) == "2:5 unrecognized character '#'"

    def test_tokens_before_error_are_delivered(self) -> None:
        lexer = Lexer("a + *")
        assert lexer.next() == Token.name("a")
        assert lexer.next() == Token.symbol("+")
        with pytest.raises(UnrecognizedCharacterError):
            lexer.next()

    def test_inside_name_is_not_an_error(self) -> None:
        """Only a character that would start a token is checked."""
        assert list(Lexer("a#").tokenize()) == [Token.name("a#")]

    def test_tokenize_propagates(self) -> None:
        with pytest.raises(UnrecognizedCharacterError):
            list(Lexer("x = (1)").tokenize())
