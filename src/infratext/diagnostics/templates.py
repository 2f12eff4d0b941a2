"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from infratext.constants import ISOMORPHIC_MAX

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    # Base documentation URL
    _DOCS_BASE = "https://infra.spec.whatwg.org"

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of its source.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            position=position,
            hint="Check cursor.is_eof before reading cursor.current",
        )

    @staticmethod
    def invalid_delimiter(delimiter: str) -> Diagnostic:
        """Split delimiter is not a single code point.

        Args:
            delimiter: The rejected delimiter value

        Returns:
            Diagnostic for INVALID_DELIMITER
        """
        msg = f"Delimiter must be exactly one code point, got {delimiter!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DELIMITER,
            message=msg,
            hint="Pass a single character such as ','",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#strictly-split",
        )

    @staticmethod
    def isomorphic_encode_out_of_range(code_point: str, position: int) -> Diagnostic:
        """Isomorphic encode met a code point above U+00FF.

        Args:
            code_point: The offending code point
            position: Its code point offset in the input

        Returns:
            Diagnostic for ISOMORPHIC_ENCODE_OUT_OF_RANGE
        """
        msg = (
            f"Code point U+{ord(code_point):04X} at position {position} "
            "cannot be isomorphic encoded"
        )
        return Diagnostic(
            code=DiagnosticCode.ISOMORPHIC_ENCODE_OUT_OF_RANGE,
            message=msg,
            position=position,
            hint=f"Isomorphic encode accepts only code points U+0000 to U+{ISOMORPHIC_MAX:04X}",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#isomorphic-encode",
        )
