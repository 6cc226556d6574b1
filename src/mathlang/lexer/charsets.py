"""Character classes for lexer dispatch.

Every character falls in exactly one class, checked in this order:
whitespace, letter, digit, quote, symbol, other. The lexer branches on
the class of the lookahead character; OTHER is always an error.

Usage:
    from mathlang.lexer.charsets import CharClass, classify

    if classify(char) is CharClass.SYMBOL:
        ...
"""

from __future__ import annotations

from enum import Enum, auto

from mathlang.tokens import SYMBOLS


QUOTE = '"'


class CharClass(Enum):
    """Lexical class of a lookahead character."""

    WHITESPACE = auto()
    LETTER = auto()  # Starts a name
    DIGIT = auto()  # Starts a number
    QUOTE = auto()  # Starts a string literal
    SYMBOL = auto()  # = + - ;
    OTHER = auto()


def classify(char: str) -> CharClass:
    """Classify a single character.

    Digits are Unicode decimal digits (``str.isdecimal``) so that every
    digit run is accepted by ``float()``.
    """
    if char.isspace():
        return CharClass.WHITESPACE
    if char.isalpha():
        return CharClass.LETTER
    if char.isdecimal():
        return CharClass.DIGIT
    if char == QUOTE:
        return CharClass.QUOTE
    if char in SYMBOLS:
        return CharClass.SYMBOL
    return CharClass.OTHER


def is_name_char(char: str) -> bool:
    """Check if char may continue a name.

    Anything but whitespace, a digit, a double quote or a symbol, so
    punctuation such as ``#`` or ``.`` is allowed after the first letter.
    """
    return not (
        char.isspace() or char.isdecimal() or char == QUOTE or char in SYMBOLS
    )
