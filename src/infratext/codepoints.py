"""Code point classification per the WHATWG Infra standard.

Every category in the Infra "code points" section is defined as an
inclusive range of ordinals, or a small union of such ranges. Each
predicate here is a range check on ``ord()`` so it stays O(1) and traces
directly to the standard's prose.

Totality:
    Predicates accept any ``str``. The range predicates look at the first
    code point only and return False for the empty string. The exact-match
    predicates (tab-or-newline, whitespace) require the value to be that
    single code point. ``is_surrogate`` is the exception: it holds only if
    EVERY code point of the value is a surrogate, so ``""`` is vacuously a
    surrogate and ``is_scalar_value("")`` is False.

Lone Surrogates:
    Python ``str`` is a sequence of code points and can hold unpaired
    surrogates (e.g. ``"\\ud800"`` or text decoded with
    ``errors="surrogatepass"``). Each one is a single element and is
    classified like any other code point.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Reference: https://infra.spec.whatwg.org/#code-points

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable

from infratext.constants import (
    ASCII_DIGIT_RANGE,
    ASCII_LOWER_ALPHA_RANGE,
    ASCII_LOWER_HEX_RANGE,
    ASCII_RANGE,
    ASCII_TAB_OR_NEWLINE,
    ASCII_UPPER_ALPHA_RANGE,
    ASCII_UPPER_HEX_RANGE,
    ASCII_WHITESPACE,
    C0_CONTROL_RANGE,
    C1_CONTROL_RANGE,
    LEADING_SURROGATE_RANGE,
    NONCHARACTER_RANGE,
    PLANE_END_NONCHARACTERS,
    SPACE,
    SURROGATE_RANGE,
    TRAILING_SURROGATE_RANGE,
)

__all__ = [
    "CodepointPredicate",
    "is_ascii_alpha",
    "is_ascii_alphanumeric",
    "is_ascii_byte",
    "is_ascii_code_point",
    "is_ascii_digit",
    "is_ascii_hex_digit",
    "is_ascii_lower_alpha",
    "is_ascii_lower_hex_digit",
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
]

type CodepointPredicate = Callable[[str], bool]


def is_code_point_between(value: str, low: int, high: int) -> bool:
    """Check if the first code point of value lies inclusively in [low, high].

    This is the primitive every single-range predicate is built on.

    Args:
        value: Text whose first code point is examined
        low: Inclusive lower ordinal bound
        high: Inclusive upper ordinal bound

    Returns:
        True if value is non-empty and low <= ord(value[0]) <= high

    Example:
        >>> is_code_point_between("\\u0020", 0x00, 0x20)
        True
        >>> is_code_point_between("\\u007f", 0x00, 0x20)
        False
        >>> is_code_point_between("", 0x00, 0x20)
        False
    """
    if not value:
        return False
    return low <= ord(value[0]) <= high


def _in_range(value: str, bounds: tuple[int, int]) -> bool:
    return is_code_point_between(value, bounds[0], bounds[1])


def is_ascii_byte(v: str) -> bool:
    """U+0000 NULL to U+007F DELETE, inclusive.

    See https://infra.spec.whatwg.org/#ascii-byte
    """
    return _in_range(v, ASCII_RANGE)


def is_ascii_code_point(v: str) -> bool:
    """U+0000 NULL to U+007F DELETE, inclusive.

    Same range as an ASCII byte; Infra names it separately for code points.

    See https://infra.spec.whatwg.org/#ascii-code-point
    """
    return _in_range(v, ASCII_RANGE)


def is_leading_surrogate(v: str) -> bool:
    """U+D800 to U+DBFF, inclusive."""
    return _in_range(v, LEADING_SURROGATE_RANGE)


def is_trailing_surrogate(v: str) -> bool:
    """U+DC00 to U+DFFF, inclusive."""
    return _in_range(v, TRAILING_SURROGATE_RANGE)


def is_surrogate(v: str) -> bool:
    """Check if every code point of v is a surrogate (U+D800 to U+DFFF).

    Unlike the other predicates this examines the whole value, not only
    the first code point. An empty value is vacuously a surrogate.

    Args:
        v: Text to classify

    Returns:
        True if no code point of v lies outside the surrogate range

    Example:
        >>> is_surrogate("\\ud800")
        True
        >>> is_surrogate("\\ud800a")
        False
        >>> is_surrogate("\\ue000")
        False

    See https://infra.spec.whatwg.org/#surrogate
    """
    if not isinstance(v, str):
        return False
    low, high = SURROGATE_RANGE
    return all(low <= ord(code_point) <= high for code_point in v)


def is_scalar_value(v: str) -> bool:
    """A code point that is not a surrogate.

    See https://infra.spec.whatwg.org/#scalar-value
    """
    return isinstance(v, str) and not is_surrogate(v)


def is_noncharacter(v: str) -> bool:
    """Check if the first code point of v is a non-character.

    Non-characters are U+FDD0 to U+FDEF, plus the last two code points of
    each of the 17 planes (U+FFFE, U+FFFF, U+1FFFE, ..., U+10FFFF).

    Args:
        v: Text whose first code point is examined

    Returns:
        True if the code point is permanently reserved as a non-character

    Example:
        >>> is_noncharacter("\\ufdd0")
        True
        >>> is_noncharacter("\\U0010ffff")
        True
        >>> is_noncharacter("\\ufffd")
        False

    See https://infra.spec.whatwg.org/#noncharacter
    """
    if not v:
        return False
    return _in_range(v, NONCHARACTER_RANGE) or ord(v[0]) in PLANE_END_NONCHARACTERS


def is_ascii_tab_or_newline(v: str) -> bool:
    """U+0009 TAB, U+000A LF, or U+000D CR.

    See https://infra.spec.whatwg.org/#ascii-tab-or-newline
    """
    return v in ASCII_TAB_OR_NEWLINE


def is_ascii_whitespace(v: str) -> bool:
    """Check if v is ASCII whitespace.

    ASCII whitespace is an ASCII tab or newline, U+000C FF, or U+0020 SPACE.
    U+000B VERTICAL TAB is deliberately NOT included, which is where this
    differs from ``str.isspace()``.

    Example:
        >>> is_ascii_whitespace("\\u000c")
        True
        >>> is_ascii_whitespace("\\u000b")
        False

    See https://infra.spec.whatwg.org/#ascii-whitespace
    """
    return v in ASCII_WHITESPACE


def is_c0_control(v: str) -> bool:
    """U+0000 NULL to U+001F INFORMATION SEPARATOR ONE, inclusive.

    See https://infra.spec.whatwg.org/#c0-control
    """
    return _in_range(v, C0_CONTROL_RANGE)


def is_c0_control_or_space(v: str) -> bool:
    """A C0 control or U+0020 SPACE.

    See https://infra.spec.whatwg.org/#c0-control-or-space
    """
    return is_c0_control(v) or v == SPACE


def is_control(v: str) -> bool:
    """A C0 control, or U+007F DELETE to U+009F APPLICATION PROGRAM COMMAND.

    See https://infra.spec.whatwg.org/#control
    """
    return is_c0_control(v) or _in_range(v, C1_CONTROL_RANGE)


def is_ascii_digit(v: str) -> bool:
    """U+0030 (0) to U+0039 (9), inclusive.

    Unlike ``str.isdigit()`` this rejects superscripts and other Unicode digits.

    See https://infra.spec.whatwg.org/#ascii-digit
    """
    return _in_range(v, ASCII_DIGIT_RANGE)


def is_ascii_upper_hex_digit(v: str) -> bool:
    """U+0041 (A) to U+0046 (F), inclusive."""
    return _in_range(v, ASCII_UPPER_HEX_RANGE)


def is_ascii_lower_hex_digit(v: str) -> bool:
    """U+0061 (a) to U+0066 (f), inclusive."""
    return _in_range(v, ASCII_LOWER_HEX_RANGE)


def is_ascii_hex_digit(v: str) -> bool:
    """An ASCII upper hex digit or ASCII lower hex digit.

    Only the letters A-F and a-f; decimal digits are classified by
    ``is_ascii_digit``. Combine the two when parsing hexadecimal numbers.

    See https://infra.spec.whatwg.org/#ascii-hex-digit
    """
    return is_ascii_upper_hex_digit(v) or is_ascii_lower_hex_digit(v)


def is_ascii_upper_alpha(v: str) -> bool:
    """U+0041 (A) to U+005A (Z), inclusive."""
    return _in_range(v, ASCII_UPPER_ALPHA_RANGE)


def is_ascii_lower_alpha(v: str) -> bool:
    """U+0061 (a) to U+007A (z), inclusive."""
    return _in_range(v, ASCII_LOWER_ALPHA_RANGE)


def is_ascii_alpha(v: str) -> bool:
    """An ASCII upper alpha or ASCII lower alpha.

    See https://infra.spec.whatwg.org/#ascii-alpha
    """
    return is_ascii_upper_alpha(v) or is_ascii_lower_alpha(v)


def is_ascii_alphanumeric(v: str) -> bool:
    """An ASCII digit or ASCII alpha.

    See https://infra.spec.whatwg.org/#ascii-alphanumeric
    """
    return is_ascii_digit(v) or is_ascii_alpha(v)
