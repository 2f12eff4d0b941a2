"""Immutable cursor over a string of code points.

Models the Infra "position variable": an index into a string that
algorithms advance as they consume code points.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Positions count code points, which is what Python str indexes by

Reference: https://infra.spec.whatwg.org/#string-position-variable

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from infratext.codepoints import is_ascii_whitespace
from infratext.diagnostics import ErrorTemplate

if TYPE_CHECKING:
    from infratext.codepoints import CodepointPredicate

__all__ = ["CodepointRun", "Cursor"]


class CodepointRun(NamedTuple):
    """Result of collecting a sequence of code points.

    Attributes:
        value: The collected code points (possibly empty)
        position: Position immediately after the collected run

    Being a NamedTuple, it unpacks and compares like a plain pair:

        >>> CodepointRun("test", 4) == ("test", 4)
        True
    """

    value: str
    position: int


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
        >>> Cursor("hi", -3).pos
        0
    """

    source: str
    pos: int

    def __post_init__(self) -> None:
        # Negative positions would index from the end of source
        if self.pos < 0:
            object.__setattr__(self, "pos", 0)

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get the code point at the current position.

        Returns:
            Current code point

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at code point with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Code point at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos < 0 or target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> Cursor:
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = max(self.pos, min(self.pos + count, len(self.source)))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def collect(self, predicate: CodepointPredicate) -> tuple[str, Cursor]:
        """Collect a sequence of code points matching predicate.

        Consumes code points while predicate holds and stops at the first
        one that fails or at EOF.

        Args:
            predicate: Single code point classifier

        Returns:
            Tuple of (collected text, cursor after the run)

        Example:
            >>> text, cursor = Cursor("abc123", 0).collect(str.isalpha)
            >>> text, cursor.pos
            ('abc', 3)
        """
        c = self
        while not c.is_eof and predicate(c.current):
            c = c.advance()
        return self.slice_to(c.pos), c

    def skip_ascii_whitespace(self) -> Cursor:
        """Skip TAB, LF, FF, CR, and SPACE.

        Example:
            >>> Cursor("\\t\\n hello", 0).skip_ascii_whitespace().pos
            3
        """
        _, cursor = self.collect(is_ascii_whitespace)
        return cursor
