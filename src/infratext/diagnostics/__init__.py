"""Diagnostic system for infratext errors.

Provides structured error diagnostics with codes, positions, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import InfraError, InvalidDelimiterError, IsomorphicEncodeError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InfraError",
    "InvalidDelimiterError",
    "IsomorphicEncodeError",
]
