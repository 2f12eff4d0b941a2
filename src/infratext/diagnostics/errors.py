"""infratext exception hierarchy with structured diagnostics.

Predicates and string transforms never raise. Only operations with a
restricted input domain (strictly split, isomorphic encode) do, and their
exceptions also subclass ValueError so callers can catch them generically.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class InfraError(Exception):
    """Base exception for all infratext errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize InfraError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidDelimiterError(InfraError, ValueError):
    """Split delimiter is not exactly one code point."""


class IsomorphicEncodeError(InfraError, ValueError):
    """Input contains a code point that does not fit in one byte.

    Attributes:
        code_point: The offending code point
        position: Its code point offset in the input
    """

    def __init__(self, message: str | Diagnostic, code_point: str, position: int) -> None:
        super().__init__(message)
        self.code_point = code_point
        self.position = position
