"""Pull-based lexer for mathlang source text.

Each call to ``next()`` skips whitespace, classifies the lookahead
character, consumes the maximal span for that token shape, and commits
the cursor past it. Nothing is scanned ahead of what has been requested.

No regex in the hot path. The cursor only moves forward.

Thread Safety:
Lexer instances are single-use and not safe for concurrent ``next()``
calls. Create one per source string (and per thread).
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from mathlang.config import get_lex_config
from mathlang.errors import UnrecognizedCharacterError, UnterminatedStringError
from mathlang.lexer.charsets import QUOTE, CharClass, classify, is_name_char
from mathlang.tokens import Token, TokenType
from mathlang.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer:
    """Single-pass token reader.

    Usage:
            >>> lexer = Lexer('print "hi"')
            >>> lexer.next()
            Token(NAME, 'print', 1:1)
            >>> lexer.next()
            Token(STRING, 'hi', 1:7)
            >>> lexer.next() is None
            True

    ``next()`` returns None once the input is exhausted and keeps
    returning None on every later call.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_strict_strings",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Whole program text (zero or more lines)
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._strict_strings = get_lex_config().strict_strings

    @property
    def position(self) -> int:
        """Cursor offset into the source."""
        return self._pos

    @property
    def at_end(self) -> bool:
        """True if only whitespace remains after the cursor."""
        source = self._source
        pos = self._pos
        while pos < self._source_len and source[pos].isspace():
            pos += 1
        return pos >= self._source_len

    def next(self) -> Token | None:
        """Return the next token, or None at end of input.

        Raises:
            UnterminatedStringError: A string literal reaches a newline
                before its closing quote.
            UnrecognizedCharacterError: The lookahead character begins no
                token shape.
        """
        self._skip_whitespace()
        if self._pos >= self._source_len:
            return None

        char = self._source[self._pos]
        char_class = classify(char)
        if char_class is CharClass.LETTER:
            return self._scan_name()
        elif char_class is CharClass.DIGIT:
            return self._scan_number()
        elif char_class is CharClass.QUOTE:
            return self._scan_string()
        elif char_class is CharClass.SYMBOL:
            return self._make_token(TokenType.SYMBOL, char, self._pos + 1)

        lineno, col = self._coords_at(self._pos)
        logger.debug("Unrecognized character %r at offset %d", char, self._pos)
        raise UnrecognizedCharacterError(
            char,
            lineno=lineno,
            col_offset=col,
            offset=self._pos,
            source_file=self._source_file,
        )

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens until end of input.

        Tokens are scanned lazily, one per iteration step.

        Yields:
            Token objects one at a time
        """
        while (token := self.next()) is not None:
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    # =========================================================================
    # Token scanners
    # =========================================================================

    def _scan_name(self) -> Token:
        """Scan a name. The cursor is on a letter."""
        source = self._source
        end = self._pos + 1
        while end < self._source_len and is_name_char(source[end]):
            end += 1
        return self._make_token(TokenType.NAME, source[self._pos : end], end)

    def _scan_number(self) -> Token:
        """Scan digits, then an optional ``.`` and more digits.

        A trailing point with no fraction digits (``3.``) is part of the number.
        """
        end = self._skip_digits(self._pos)
        if end < self._source_len and self._source[end] == ".":
            end = self._skip_digits(end + 1)
        return self._make_token(TokenType.NUMBER, float(self._source[self._pos : end]), end)

    def _scan_string(self) -> Token | None:
        """Scan a double-quoted string literal. The cursor is on the opening quote.

        Returns:
            STRING token, or None when the source ends before the closing
            quote (unless strict_strings is configured).
        """
        source = self._source
        start = self._pos + 1
        close = source.find(QUOTE, start)
        limit = close if close != -1 else self._source_len

        newline = source.find("\n", start, limit)
        if newline != -1:
            self._raise_unterminated(newline)

        if close == -1:
            if self._strict_strings:
                self._raise_unterminated(self._source_len)
            lineno, col = self._coords_at(self._pos)
            logger.warning(
                "Unterminated string at %d:%d runs to end of input; treating as end of input",
                lineno,
                col,
            )
            self._commit_to(self._source_len)
            return None

        return self._make_token(TokenType.STRING, source[start:close], close + 1)

    def _raise_unterminated(self, pos: int) -> None:
        lineno, col = self._coords_at(pos)
        logger.debug("Unterminated string literal at offset %d", pos)
        raise UnterminatedStringError(
            lineno=lineno,
            col_offset=col,
            offset=pos,
            source_file=self._source_file,
        )

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _skip_whitespace(self) -> None:
        source = self._source
        end = self._pos
        while end < self._source_len and source[end].isspace():
            end += 1
        if end != self._pos:
            self._commit_to(end)

    def _skip_digits(self, pos: int) -> int:
        """Return the first position at or after pos that is not a digit."""
        source = self._source
        while pos < self._source_len and source[pos].isdecimal():
            pos += 1
        return pos

    def _coords_at(self, pos: int) -> tuple[int, int]:
        """Compute (lineno, col) of pos, which must not precede the cursor.

        Uses str.count / str.rfind over the skipped segment instead of a
        character loop.
        """
        segment = self._source[self._pos : pos]
        newline_count = segment.count("\n")
        if newline_count:
            return self._lineno + newline_count, len(segment) - segment.rfind("\n")
        return self._lineno, self._col + len(segment)

    def _commit_to(self, end: int) -> None:
        """Advance the cursor to end, updating line/column tracking."""
        self._lineno, self._col = self._coords_at(end)
        self._pos = end

    def _make_token(self, token_type: TokenType, value: str | float, end: int) -> Token:
        """Create a Token starting at the cursor, then commit the cursor to end."""
        token = Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=self._col,
            _start_offset=self._pos,
            _end_offset=end,
            _source_file=self._source_file,
        )
        self._commit_to(end)
        return token
