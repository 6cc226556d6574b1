"""Tests for character classification used by lexer dispatch."""

import pytest

from mathlang.lexer.charsets import CharClass, classify, is_name_char
from mathlang.tokens import SYMBOLS


class TestClassify:
    @pytest.mark.parametrize(
        "char,expected",
        [
            (" ", CharClass.WHITESPACE),
            ("\t", CharClass.WHITESPACE),
            ("\n", CharClass.WHITESPACE),
            ("\r", CharClass.WHITESPACE),
            ("a", CharClass.LETTER),
            ("Z", CharClass.LETTER),
            ("é", CharClass.LETTER),
            ("0", CharClass.DIGIT),
            ("9", CharClass.DIGIT),
            ('"', CharClass.QUOTE),
            ("=", CharClass.SYMBOL),
            ("+", CharClass.SYMBOL),
            ("-", CharClass.SYMBOL),
            (";", CharClass.SYMBOL),
            ("#", CharClass.OTHER),
            ("_", CharClass.OTHER),
            (".", CharClass.OTHER),
            ("'", CharClass.OTHER),
        ],
    )
    def test_classify(self, char: str, expected: CharClass) -> None:
        assert classify(char) is expected

    def test_superscript_is_not_a_digit(self) -> None:
        """Only decimal digits start numbers; float() cannot parse '²'."""
        assert classify("²") is CharClass.OTHER

    def test_symbol_set(self) -> None:
        assert SYMBOLS == frozenset("=+-;")


class TestIsNameChar:
    @pytest.mark.parametrize("char", ["a", "_", "#", ".", "!", "'", "é", "²"])
    def test_name_chars(self, char: str) -> None:
        assert is_name_char(char)

    @pytest.mark.parametrize("char", [" ", "\n", "1", '"', "=", "+", "-", ";"])
    def test_not_name_chars(self, char: str) -> None:
        assert not is_name_char(char)
