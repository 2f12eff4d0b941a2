"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Cursor errors (position handling)
        2000-2999: Argument errors (caller supplied an out-of-domain value)
        3000-3999: Encoding errors (byte/code point conversion)
    """

    # Cursor errors (1000-1999)
    UNEXPECTED_EOF = 1001

    # Argument errors (2000-2999)
    INVALID_DELIMITER = 2001

    # Encoding errors (3000-3999)
    ISOMORPHIC_ENCODE_OUT_OF_RANGE = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Code point offset the diagnostic refers to (if any)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None
    help_url: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INVALID_DELIMITER]: Delimiter must be exactly one code point, got ', '
              = help: Pass a single character such as ','
              = note: see https://infra.spec.whatwg.org/#strictly-split

        Control characters in the message are escaped so that diagnostics
        built from untrusted text cannot forge extra log lines.

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape_controls(self.message)}"]
        if self.position is not None:
            lines.append(f"  --> position {self.position}")
        if self.hint:
            lines.append(f"  = help: {_escape_controls(self.hint)}")
        if self.help_url:
            lines.append(f"  = note: see {self.help_url}")
        return "\n".join(lines)


def _escape_controls(text: str) -> str:
    return "".join(
        ch if ch.isprintable() else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )
