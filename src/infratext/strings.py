"""String algorithms per the WHATWG Infra standard.

Newline handling, ASCII whitespace stripping/collapsing/splitting, the
"collect a sequence of code points" scanner, ASCII case mapping, and
isomorphic encode/decode.

Iteration:
    Python ``str`` indexes and iterates by code point, so positions here
    are code point offsets. Unpaired surrogates are single code points and
    pass through every transform except convert_to_scalar_value_string,
    which replaces them with U+FFFD.

Failure Semantics:
    The transforms and the scanner are total: empty text, lone surrogates
    and out-of-range positions all produce a value. Only strictly_split
    (bad delimiter) and isomorphic_encode (code point above U+00FF) raise,
    both with ValueError subclasses from infratext.diagnostics.

Differences from ``str`` builtins:
    ``str.strip()``/``str.split()`` treat U+000B VERTICAL TAB, U+0085 and
    Unicode space separators as whitespace. Infra ASCII whitespace is only
    TAB, LF, FF, CR, and SPACE. ``str.lower()``/``str.upper()`` map
    non-ASCII letters; the Infra ASCII case maps do not.

Thread Safety:
    All functions are pure. Safe for concurrent use.

Reference: https://infra.spec.whatwg.org/#strings

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import string
from typing import TYPE_CHECKING

from infratext.codepoints import is_ascii_whitespace, is_surrogate
from infratext.constants import (
    CARRIAGE_RETURN,
    COMMA,
    LINE_FEED,
    REPLACEMENT_CHARACTER,
    SPACE,
)
from infratext.cursor import CodepointRun, Cursor
from infratext.diagnostics import (
    ErrorTemplate,
    InvalidDelimiterError,
    IsomorphicEncodeError,
)

if TYPE_CHECKING:
    from infratext.codepoints import CodepointPredicate

__all__ = [
    "ascii_case_insensitive_match",
    "ascii_lowercase",
    "ascii_uppercase",
    "code_point_length",
    "code_point_substring",
    "collect_code_points",
    "convert_to_scalar_value_string",
    "is_ascii_string",
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

logger = logging.getLogger(__name__)

# Translation tables touch A-Z / a-z only.
_ASCII_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_NEWLINES: frozenset[str] = frozenset((LINE_FEED, CARRIAGE_RETURN))


def _is_not_ascii_whitespace(code_point: str) -> bool:
    return not is_ascii_whitespace(code_point)


def _is_not_comma(code_point: str) -> bool:
    return code_point != COMMA


# ============================================================================
# SCANNING
# ============================================================================


def collect_code_points(
    text: str, position: int, predicate: CodepointPredicate
) -> CodepointRun:
    """Collect a sequence of code points meeting predicate.

    Starting at position, consumes code points while predicate holds.

    Args:
        text: Input text
        position: Starting code point offset. Negative values are treated
            as 0; values at or past the end collect nothing.
        predicate: Single code point classifier

    Returns:
        CodepointRun(value, position) where value is the longest matching
        run and position is the offset just after it (unchanged if nothing
        matched)

    Example:
        >>> from infratext.codepoints import is_ascii_alpha
        >>> collect_code_points("test1234", 0, is_ascii_alpha)
        CodepointRun(value='test', position=4)
        >>> collect_code_points("test", 5, is_ascii_alpha)
        CodepointRun(value='', position=5)

    See https://infra.spec.whatwg.org/#collect-a-sequence-of-code-points
    """
    position = max(position, 0)
    if position >= len(text):
        return CodepointRun("", position)

    value, cursor = Cursor(text, position).collect(predicate)
    return CodepointRun(value, cursor.pos)


def skip_ascii_whitespace(text: str, position: int) -> int:
    """Return the position after any ASCII whitespace starting at position.

    See https://infra.spec.whatwg.org/#skip-ascii-whitespace
    """
    return collect_code_points(text, position, is_ascii_whitespace).position


# ============================================================================
# TRANSFORMS
# ============================================================================


def convert_to_scalar_value_string(text: str) -> str:
    """Replace every surrogate code point with U+FFFD REPLACEMENT CHARACTER.

    Args:
        text: Input text, possibly containing unpaired surrogates

    Returns:
        Text with no surrogate code points

    Example:
        >>> convert_to_scalar_value_string("a\\ud800b") == "a\\ufffdb"
        True

    See https://infra.spec.whatwg.org/#javascript-string-convert
    """
    return "".join(
        REPLACEMENT_CHARACTER if is_surrogate(code_point) else code_point
        for code_point in text
    )


def strip_newlines(text: str) -> str:
    """Remove all U+000A LF and U+000D CR code points.

    See https://infra.spec.whatwg.org/#strip-newlines
    """
    return "".join(code_point for code_point in text if code_point not in _NEWLINES)


def normalize_newlines(text: str) -> str:
    """Replace every CRLF pair with LF, then every remaining CR with LF.

    A trailing lone CR becomes LF as well.

    Example:
        >>> normalize_newlines("a\\r\\ntttt\\r")
        'a\\ntttt\\n'

    See https://infra.spec.whatwg.org/#normalize-newlines
    """
    crlf = CARRIAGE_RETURN + LINE_FEED
    return text.replace(crlf, LINE_FEED).replace(CARRIAGE_RETURN, LINE_FEED)


def strip_leading_and_trailing_ascii_whitespace(text: str) -> str:
    """Remove ASCII whitespace from the start and end of text.

    Only TAB, LF, FF, CR, and SPACE are removed; U+000B VERTICAL TAB,
    U+00A0 NO-BREAK SPACE and other Unicode spaces are kept, unlike
    ``str.strip()``.

    Args:
        text: Input text

    Returns:
        text[i:j] where i is the first and j - 1 the last non-whitespace
        offset; empty if text is empty or all whitespace

    Example:
        >>> strip_leading_and_trailing_ascii_whitespace(" \\t\\vcat\\n")
        '\\x0bcat'
        >>> strip_leading_and_trailing_ascii_whitespace("   ")
        ''

    See https://infra.spec.whatwg.org/#strip-leading-and-trailing-ascii-whitespace
    """
    start = Cursor(text, 0).skip_ascii_whitespace().pos

    # end never drops below start, so the slice is never reversed
    end = len(text)
    while end > start and is_ascii_whitespace(text[end - 1]):
        end -= 1

    return text[start:end]


def strip_and_collapse_ascii_whitespace(text: str) -> str:
    """Collapse ASCII whitespace runs to one SPACE, then strip both ends.

    Example:
        >>> strip_and_collapse_ascii_whitespace("\\r  \\n  cat dog  hamster \\n\\r")
        'cat dog hamster'

    See https://infra.spec.whatwg.org/#strip-and-collapse-ascii-whitespace
    """
    parts: list[str] = []
    cursor = Cursor(text, 0)
    while not cursor.is_eof:
        whitespace, cursor = cursor.collect(is_ascii_whitespace)
        if whitespace:
            parts.append(SPACE)
        word, cursor = cursor.collect(_is_not_ascii_whitespace)
        parts.append(word)

    return strip_leading_and_trailing_ascii_whitespace("".join(parts))


# ============================================================================
# SPLITTING
# ============================================================================


def split_on_ascii_whitespace(text: str) -> list[str]:
    """Split text into tokens separated by ASCII whitespace.

    Leading, trailing, and repeated whitespace never produce empty tokens.

    Example:
        >>> split_on_ascii_whitespace("  a\\tb\\n\\nc ")
        ['a', 'b', 'c']
        >>> split_on_ascii_whitespace("a\\u00a0b")
        ['a\\xa0b']

    See https://infra.spec.whatwg.org/#split-on-ascii-whitespace
    """
    tokens: list[str] = []
    cursor = Cursor(text, 0).skip_ascii_whitespace()
    while not cursor.is_eof:
        token, cursor = cursor.collect(_is_not_ascii_whitespace)
        tokens.append(token)
        cursor = cursor.skip_ascii_whitespace()
    return tokens


def strictly_split(text: str, delimiter: str) -> list[str]:
    """Split text on every occurrence of a single code point delimiter.

    Empty tokens are kept, so the result always has
    ``text.count(delimiter) + 1`` entries.

    Args:
        text: Input text
        delimiter: Exactly one code point

    Returns:
        List of tokens

    Raises:
        InvalidDelimiterError: If delimiter is not exactly one code point

    Example:
        >>> strictly_split("a,,b", ",")
        ['a', '', 'b']

    See https://infra.spec.whatwg.org/#strictly-split
    """
    if len(delimiter) != 1:
        logger.debug("Rejected strictly_split delimiter: %r", delimiter)
        raise InvalidDelimiterError(ErrorTemplate.invalid_delimiter(delimiter))
    return text.split(delimiter)


def split_on_commas(text: str) -> list[str]:
    """Split text on U+002C (,) and strip ASCII whitespace from each token.

    Empty input yields no tokens. A comma at the very end does not yield
    a trailing empty token; other empty tokens are kept.

    Example:
        >>> split_on_commas(" a , b,,c")
        ['a', 'b', '', 'c']
        >>> split_on_commas("a,")
        ['a']

    See https://infra.spec.whatwg.org/#split-on-commas
    """
    tokens: list[str] = []
    cursor = Cursor(text, 0)
    while not cursor.is_eof:
        token, cursor = cursor.collect(_is_not_comma)
        tokens.append(strip_leading_and_trailing_ascii_whitespace(token))
        # not at EOF means the run stopped on a comma
        cursor = cursor.advance()
    return tokens


# ============================================================================
# ASCII CASE
# ============================================================================


def ascii_lowercase(text: str) -> str:
    """Map A-Z to a-z, leaving every other code point unchanged.

    Example:
        >>> ascii_lowercase("ÀBC")
        'Àbc'

    See https://infra.spec.whatwg.org/#ascii-lowercase
    """
    return text.translate(_ASCII_LOWER_TABLE)


def ascii_uppercase(text: str) -> str:
    """Map a-z to A-Z, leaving every other code point unchanged.

    See https://infra.spec.whatwg.org/#ascii-uppercase
    """
    return text.translate(_ASCII_UPPER_TABLE)


def ascii_case_insensitive_match(a: str, b: str) -> bool:
    """True if a and b are equal after ASCII lowercasing both.

    See https://infra.spec.whatwg.org/#ascii-case-insensitive
    """
    return ascii_lowercase(a) == ascii_lowercase(b)


def is_ascii_string(text: str) -> bool:
    """True if every code point of text is an ASCII code point.

    See https://infra.spec.whatwg.org/#ascii-string
    """
    return text.isascii()


# ============================================================================
# CODE POINT LENGTH / SUBSTRING
# ============================================================================


def code_point_length(text: str) -> int:
    """Number of code points in text (surrogates count as one each)."""
    return len(text)


def code_point_substring(text: str, start: int, length: int) -> str:
    """Return up to length code points of text beginning at start.

    Bounds are clamped: a negative start is treated as 0, a negative
    length as 0, and a range running past the end is truncated.

    See https://infra.spec.whatwg.org/#code-point-substring
    """
    start = max(start, 0)
    end = start + max(length, 0)
    return text[start:end]


# ============================================================================
# ISOMORPHIC ENCODING
# ============================================================================


def isomorphic_encode(text: str) -> bytes:
    """Encode each code point as the byte of equal value.

    Args:
        text: Text whose code points are all U+0000 to U+00FF

    Returns:
        Bytes of the same length as text

    Raises:
        IsomorphicEncodeError: If a code point is above U+00FF

    Example:
        >>> isomorphic_encode("caf\\u00e9")
        b'caf\\xe9'

    See https://infra.spec.whatwg.org/#isomorphic-encode
    """
    try:
        # latin-1 maps U+0000..U+00FF to the byte of equal value
        return text.encode("latin-1")
    except UnicodeEncodeError as e:
        code_point = text[e.start]
        logger.debug("Isomorphic encode failed at position %d", e.start)
        diagnostic = ErrorTemplate.isomorphic_encode_out_of_range(code_point, e.start)
        raise IsomorphicEncodeError(diagnostic, code_point, e.start) from e


def isomorphic_decode(data: bytes) -> str:
    """Decode each byte as the code point of equal value.

    Example:
        >>> isomorphic_decode(b"caf\\xe9")
        'café'

    See https://infra.spec.whatwg.org/#isomorphic-decode
    """
    return bytes(data).decode("latin-1")
