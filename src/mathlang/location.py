"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Line and column are 1-indexed; offsets are 0-indexed positions into
    the source string, ``end_offset`` exclusive.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(1, 5, 4, 9, "prog.ml")
            >>> str(loc)
            'prog.ml:1:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.ml:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of source characters covered."""
        return max(self.end_offset - self.offset, 0)

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Used for tokens built by hand rather than by the lexer.
        """
        return cls(lineno=0, col_offset=0)
