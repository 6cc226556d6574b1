"""Pull-based lexer for mathlang.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, CharClass
├── core.py              # Lexer class (cursor, dispatch, token scanners)
└── charsets.py          # CharClass enum and classification helpers

Usage:
    >>> from mathlang.lexer import Lexer
    >>> for token in Lexer("x=5+67.5;").tokenize():
    ...     print(token)
Token(NAME, 'x', 1:1)
Token(SYMBOL, '=', 1:2)
Token(NUMBER, 5.0, 1:3)
Token(SYMBOL, '+', 1:4)
Token(NUMBER, 67.5, 1:5)
Token(SYMBOL, ';', 1:9)

"""

from mathlang.lexer.charsets import CharClass
from mathlang.lexer.core import Lexer

__all__ = ["CharClass", "Lexer"]
