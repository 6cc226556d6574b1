"""Exception classes for mathlang.

Every failure the lexer can report is a LexError; both kinds abort the
current tokenization and leave the cursor at an unspecified position.
"""

from __future__ import annotations


class MathlangError(Exception):
    """Base exception for all mathlang errors."""

    pass


class LexError(MathlangError):
    """Error during tokenization.

    Raised when the lexer meets input that does not begin any token shape.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            offset: Absolute offset into the source (0-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.offset = offset
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnterminatedStringError(LexError):
    """A string literal hit a newline before its closing quote.

    With ``LexConfig(strict_strings=True)`` also raised when the literal
    runs off the end of the source.
    """

    def __init__(
        self,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        super().__init__(
            "unterminated string literal",
            lineno=lineno,
            col_offset=col_offset,
            offset=offset,
            source_file=source_file,
        )


class UnrecognizedCharacterError(LexError):
    """A character that starts no token: not whitespace, letter, digit, quote or symbol."""

    def __init__(
        self,
        char: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize unrecognized character error.

        Args:
            char: The offending character
            lineno: Line number of the character (1-indexed)
            col_offset: Column of the character (1-indexed)
            offset: Absolute offset of the character (0-indexed)
            source_file: Path to source file (optional)
        """
        self.char = char
        super().__init__(
            f"unrecognized character {char!r}",
            lineno=lineno,
            col_offset=col_offset,
            offset=offset,
            source_file=source_file,
        )
