"""Quickstart example for infratext.

This example demonstrates the Infra building blocks a URL or MIME type
parser is assembled from.

Note: Positions are code point offsets, which is what Python str indexes by.
"""

from infratext import (
    InvalidDelimiterError,
    IsomorphicEncodeError,
    collect_code_points,
    convert_to_scalar_value_string,
    is_ascii_alpha,
    is_ascii_whitespace,
    isomorphic_encode,
    normalize_newlines,
    skip_ascii_whitespace,
    split_on_commas,
    strictly_split,
    strip_and_collapse_ascii_whitespace,
    strip_leading_and_trailing_ascii_whitespace,
)

# Example 1: Scanning a MIME type essence
print("=" * 50)
print("Example 1: Collect a Sequence of Code Points")
print("=" * 50)

source = "  text/html;charset=utf-8"
position = skip_ascii_whitespace(source, 0)
kind, position = collect_code_points(source, position, is_ascii_alpha)
print(kind, position)
# Output: text 6

subtype, position = collect_code_points(source, position + 1, lambda cp: cp != ";")
print(subtype, position)
# Output: html 11

# Example 2: Whitespace
print("\n" + "=" * 50)
print("Example 2: Strip and Collapse")
print("=" * 50)

print(repr(strip_leading_and_trailing_ascii_whitespace("\t hello world \n")))
# Output: 'hello world'
print(repr(strip_and_collapse_ascii_whitespace("  a \t\n b   c ")))
# Output: 'a b c'
print(is_ascii_whitespace("\x0b"))
# Output: False

# Example 3: Newlines and surrogates
print("\n" + "=" * 50)
print("Example 3: Newlines and Scalar Values")
print("=" * 50)

print(repr(normalize_newlines("a\r\nb\rc")))
# Output: 'a\nb\nc'
lone = b"x\xed\xa0\x80".decode("utf-8", "surrogatepass")
print(convert_to_scalar_value_string(lone).encode("utf-8"))
# Output: b'x\xef\xbf\xbd'

# Example 4: Splitting
print("\n" + "=" * 50)
print("Example 4: Splitting")
print("=" * 50)

print(split_on_commas("gzip, deflate ,br,"))
# Output: ['gzip', 'deflate', 'br']
print(strictly_split("a::b", ":"))
# Output: ['a', '', 'b']

# Example 5: Errors carry structured diagnostics
print("\n" + "=" * 50)
print("Example 5: Diagnostics")
print("=" * 50)

try:
    strictly_split("a, b", ", ")
except InvalidDelimiterError as e:
    print(e.diagnostic.code.name if e.diagnostic else e)
# Output: INVALID_DELIMITER

try:
    isomorphic_encode("caf\u00e9 \u2603")
except IsomorphicEncodeError as e:
    print(e.code_point == "\u2603", e.position)
# Output: True 5
