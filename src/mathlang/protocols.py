"""Protocols for mathlang.

Defines the contract between the lexer and the parser that consumes it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mathlang.tokens import Token


@runtime_checkable
class TokenReader(Protocol):
    """Source of tokens for a parser.

    Lexer satisfies this structurally; tests and tools may substitute any
    object with a compatible ``next()``.

    Thread Safety:
        Implementations are not required to be thread-safe. A reader
        belongs to the parser that drains it.

    """

    def next(self) -> Token | None:
        """Return the next token, or None when input is exhausted.

        Must keep returning None on every call after the first None.

        Raises:
            LexError: If the input is malformed. Not resumable.
        """
        ...
