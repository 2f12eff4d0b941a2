"""infratext - WHATWG Infra code point predicates and string algorithms.

Exact building blocks for URL, HTML, and MIME type parsers: code point
range classification, newline normalization, ASCII whitespace stripping and
collapsing, and the "collect a sequence of code points" scanner.

Public API:
    Code points - is_ascii_byte, is_surrogate, is_scalar_value,
        is_noncharacter, is_ascii_whitespace, is_c0_control, is_control,
        is_ascii_digit, is_ascii_hex_digit, is_ascii_alpha,
        is_ascii_alphanumeric, and the rest of infratext.codepoints
    Strings - convert_to_scalar_value_string, strip_newlines,
        normalize_newlines, strip_leading_and_trailing_ascii_whitespace,
        strip_and_collapse_ascii_whitespace, collect_code_points, splitting,
        ASCII case mapping, isomorphic encode/decode
    Cursor, CodepointRun - position tracking and scan results

Exceptions:
    InfraError - Base exception class
    InvalidDelimiterError - strictly_split called with a bad delimiter
    IsomorphicEncodeError - Code point above U+00FF in isomorphic_encode

Submodules:
    infratext.codepoints - Code point predicates
    infratext.strings - String algorithms
    infratext.cursor - Immutable code point cursor
    infratext.constants - Named code points and range bounds
    infratext.diagnostics - Error types and message templates
"""

import logging

from .codepoints import (
    CodepointPredicate,
    is_ascii_alpha,
    is_ascii_alphanumeric,
    is_ascii_byte,
    is_ascii_code_point,
    is_ascii_digit,
    is_ascii_hex_digit,
    is_ascii_lower_alpha,
    is_ascii_lower_hex_digit,
    is_ascii_tab_or_newline,
    is_ascii_upper_alpha,
    is_ascii_upper_hex_digit,
    is_ascii_whitespace,
    is_c0_control,
    is_c0_control_or_space,
    is_code_point_between,
    is_control,
    is_leading_surrogate,
    is_noncharacter,
    is_scalar_value,
    is_surrogate,
    is_trailing_surrogate,
)
from .cursor import CodepointRun, Cursor
from .diagnostics import InfraError, InvalidDelimiterError, IsomorphicEncodeError
from .strings import (
    ascii_case_insensitive_match,
    ascii_lowercase,
    ascii_uppercase,
    code_point_length,
    code_point_substring,
    collect_code_points,
    convert_to_scalar_value_string,
    is_ascii_string,
    isomorphic_decode,
    isomorphic_encode,
    normalize_newlines,
    skip_ascii_whitespace,
    split_on_ascii_whitespace,
    split_on_commas,
    strictly_split,
    strip_and_collapse_ascii_whitespace,
    strip_leading_and_trailing_ascii_whitespace,
    strip_newlines,
)

# Library logging: silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("infratext")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__spec_url__ = "https://infra.spec.whatwg.org/"

__all__ = [
    "CodepointPredicate",
    "CodepointRun",
    "Cursor",
    "InfraError",
    "InvalidDelimiterError",
    "IsomorphicEncodeError",
    "__spec_url__",
    "__version__",
    "ascii_case_insensitive_match",
    "ascii_lowercase",
    "ascii_uppercase",
    "code_point_length",
    "code_point_substring",
    "collect_code_points",
    "convert_to_scalar_value_string",
    "is_ascii_alpha",
    "is_ascii_alphanumeric",
    "is_ascii_byte",
    "is_ascii_code_point",
    "is_ascii_digit",
    "is_ascii_hex_digit",
    "is_ascii_lower_alpha",
    "is_ascii_lower_hex_digit",
    "is_ascii_string",
    "is_ascii_tab_or_newline",
    "is_ascii_upper_alpha",
    "is_ascii_upper_hex_digit",
    "is_ascii_whitespace",
    "is_c0_control",
    "is_c0_control_or_space",
    "is_code_point_between",
    "is_control",
    "is_leading_surrogate",
    "is_noncharacter",
    "is_scalar_value",
    "is_surrogate",
    "is_trailing_surrogate",
    "isomorphic_decode",
    "isomorphic_encode",
    "normalize_newlines",
    "skip_ascii_whitespace",
    "split_on_ascii_whitespace",
    "split_on_commas",
    "strictly_split",
    "strip_and_collapse_ascii_whitespace",
    "strip_leading_and_trailing_ascii_whitespace",
    "strip_newlines",
]
