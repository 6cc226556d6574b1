"""Token and TokenType definitions for the mathlang lexer.

The lexer produces Token objects one at a time; the parser pulls them
with ``Lexer.next()``. Each Token has a type, a payload value, and
source coordinates.

Equality:
Tokens compare by (type, value) only. Source coordinates are carried
for diagnostics but never take part in ``==`` or ``hash()``, so
``Token.name("x")`` equals a lexed ``x`` wherever it appeared.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mathlang.location import SourceLocation

# The four single-character operator/terminator symbols
SYMBOLS: frozenset[str] = frozenset("=+-;")


class TokenType(Enum):
    """The closed set of token shapes."""

    NAME = auto()  # print, x, note
    NUMBER = auto()  # 5, 67.5, 3.
    STRING = auto()  # "hello" (quotes excluded from value)
    SYMBOL = auto()  # = + - ;


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Payload. ``str`` for NAME, STRING and SYMBOL; ``float`` for NUMBER.
        _lineno: Start line number (1-indexed, 0 when unknown)
        _col: Start column offset (1-indexed, 0 when unknown)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file path

    Build tokens by hand with the variant constructors::

        Token.name("print")
        Token.number(67.5)
        Token.string("hi")
        Token.symbol(";")

    """

    type: TokenType
    value: str | float
    _lineno: int = field(default=0, compare=False)
    _col: int = field(default=0, compare=False)
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def name(cls, text: str) -> Token:
        """Create a NAME token."""
        return cls(TokenType.NAME, text)

    @classmethod
    def number(cls, value: float) -> Token:
        """Create a NUMBER token. Integers are stored as floats."""
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def string(cls, text: str) -> Token:
        """Create a STRING token from its unquoted content."""
        return cls(TokenType.STRING, text)

    @classmethod
    def symbol(cls, ch: str) -> Token:
        """Create a SYMBOL token.

        Raises:
            ValueError: If ``ch`` is not one of ``= + - ;``.
        """
        if ch not in SYMBOLS:
            msg = f"Not a symbol character: {ch!r}"
            raise ValueError(msg)
        return cls(TokenType.SYMBOL, ch)

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from mathlang.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
