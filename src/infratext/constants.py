"""Shared constants for infratext.

This module provides the code point values and range bounds used by the
predicates and string transforms. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Named code points: characters referenced by name in Infra algorithms
- Ranges: inclusive (low, high) ordinal bounds for each category
- Non-characters: the permanently reserved code points

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Named code points
    "TAB",
    "LINE_FEED",
    "FORM_FEED",
    "CARRIAGE_RETURN",
    "SPACE",
    "COMMA",
    "REPLACEMENT_CHARACTER",
    # Ranges
    "ASCII_RANGE",
    "SURROGATE_RANGE",
    "LEADING_SURROGATE_RANGE",
    "TRAILING_SURROGATE_RANGE",
    "NONCHARACTER_RANGE",
    "C0_CONTROL_RANGE",
    "C1_CONTROL_RANGE",
    "ASCII_DIGIT_RANGE",
    "ASCII_UPPER_HEX_RANGE",
    "ASCII_LOWER_HEX_RANGE",
    "ASCII_UPPER_ALPHA_RANGE",
    "ASCII_LOWER_ALPHA_RANGE",
    "ISOMORPHIC_MAX",
    # Non-characters
    "PLANE_END_NONCHARACTERS",
    # Whitespace sets
    "ASCII_TAB_OR_NEWLINE",
    "ASCII_WHITESPACE",
]

# ============================================================================
# NAMED CODE POINTS
# ============================================================================

TAB: str = "\u0009"
LINE_FEED: str = "\u000a"
FORM_FEED: str = "\u000c"
CARRIAGE_RETURN: str = "\u000d"
SPACE: str = " "
COMMA: str = ","

# U+FFFD substitutes surrogates when converting to a scalar value string.
REPLACEMENT_CHARACTER: str = "\ufffd"

# ============================================================================
# RANGES (inclusive ordinal bounds)
# ============================================================================

ASCII_RANGE: tuple[int, int] = (0x0000, 0x007F)

SURROGATE_RANGE: tuple[int, int] = (0xD800, 0xDFFF)
LEADING_SURROGATE_RANGE: tuple[int, int] = (0xD800, 0xDBFF)
TRAILING_SURROGATE_RANGE: tuple[int, int] = (0xDC00, 0xDFFF)

NONCHARACTER_RANGE: tuple[int, int] = (0xFDD0, 0xFDEF)

C0_CONTROL_RANGE: tuple[int, int] = (0x0000, 0x001F)
# DELETE through APPLICATION PROGRAM COMMAND
C1_CONTROL_RANGE: tuple[int, int] = (0x007F, 0x009F)

ASCII_DIGIT_RANGE: tuple[int, int] = (0x0030, 0x0039)
ASCII_UPPER_HEX_RANGE: tuple[int, int] = (0x0041, 0x0046)
ASCII_LOWER_HEX_RANGE: tuple[int, int] = (0x0061, 0x0066)
ASCII_UPPER_ALPHA_RANGE: tuple[int, int] = (0x0041, 0x005A)
ASCII_LOWER_ALPHA_RANGE: tuple[int, int] = (0x0061, 0x007A)

# Highest code point representable by isomorphic encode (one byte).
ISOMORPHIC_MAX: int = 0x00FF

# ============================================================================
# NON-CHARACTERS
# ============================================================================

# The last two code points of each of the 17 planes: U+FFFE, U+FFFF,
# U+1FFFE, U+1FFFF, ..., U+10FFFE, U+10FFFF (34 values).
PLANE_END_NONCHARACTERS: frozenset[int] = frozenset(
    (plane << 16) | low for plane in range(17) for low in (0xFFFE, 0xFFFF)
)

# ============================================================================
# WHITESPACE SETS
# ============================================================================

ASCII_TAB_OR_NEWLINE: frozenset[str] = frozenset((TAB, LINE_FEED, CARRIAGE_RETURN))
ASCII_WHITESPACE: frozenset[str] = ASCII_TAB_OR_NEWLINE | frozenset((FORM_FEED, SPACE))
