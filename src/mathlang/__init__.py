"""
mathlang — Lexer for a small expression language

Turns program text into a stream of typed tokens (names, numbers,
quoted strings and the symbols ``= + - ;``) pulled one at a time by a
parser. Zero runtime dependencies.

Quick Start:
    >>> from mathlang import Lexer, Token
    >>> lexer = Lexer('note "comment 1""comment 2";')
    >>> lexer.next() == Token.name("note")
    True

    >>> # Or drain everything at once
    >>> from mathlang import tokenize
    >>> tokenize("x=5+67.5;")
    [Token(NAME, 'x', 1:1), Token(SYMBOL, '=', 1:2), ...]

Errors:
    Malformed input raises a LexError subclass carrying line/column:

    >>> tokenize("x = #")
    Traceback (most recent call last):
    ...
    mathlang.errors.UnrecognizedCharacterError: 1:5 unrecognized character '#'
"""

from mathlang.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from mathlang.errors import (
    LexError,
    MathlangError,
    UnrecognizedCharacterError,
    UnterminatedStringError,
)
from mathlang.lexer import CharClass, Lexer
from mathlang.location import SourceLocation
from mathlang.protocols import TokenReader
from mathlang.serialization import from_dict, from_json, to_dict, to_json
from mathlang.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize source text completely.

    Args:
        source: Program text
        source_file: Optional source file path for error messages

    Returns:
        All tokens in source order (end of input is not represented)

    Raises:
        LexError: On the first malformed token

    Example:
        >>> tokenize('print "hi"') == [Token.name("print"), Token.string("hi")]
        True

    """
    return list(Lexer(source, source_file=source_file).tokenize())


__all__ = [
    # Main API
    "tokenize",
    "Lexer",
    "TokenReader",
    # Tokens
    "Token",
    "TokenType",
    "CharClass",
    "SourceLocation",
    # Errors
    "MathlangError",
    "LexError",
    "UnterminatedStringError",
    "UnrecognizedCharacterError",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    "__version__",
]
