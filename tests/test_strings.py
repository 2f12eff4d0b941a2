"""Tests for Infra string algorithms.

Covers scalar value conversion, newline handling, ASCII whitespace
stripping/collapsing/splitting, the code point collector, ASCII case
mapping, and isomorphic encode/decode.
"""

from __future__ import annotations

import pytest

from infratext.codepoints import is_ascii_alpha, is_ascii_digit
from infratext.cursor import CodepointRun
from infratext.diagnostics import (
    DiagnosticCode,
    InfraError,
    InvalidDelimiterError,
    IsomorphicEncodeError,
)
from infratext.strings import (
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

# ============================================================================
# COLLECT A SEQUENCE OF CODE POINTS
# ============================================================================


class TestCollectCodePoints:
    """Test the code point collector."""

    @pytest.mark.parametrize(
        ("value", "position", "expected"),
        [
            ("test1234", 0, ("test", 4)),
            # collect nothing if position > length of string
            ("test", 5, ("", 5)),
            ("test", 4, ("", 4)),
            ("", 0, ("", 0)),
            ("1234test", 0, ("", 0)),
            ("12ab34", 2, ("ab", 4)),
        ],
    )
    def test_collect_ascii_alpha(
        self, value: str, position: int, expected: tuple[str, int]
    ) -> None:
        """Collects the longest run of matching code points."""
        assert collect_code_points(value, position, is_ascii_alpha) == expected

    def test_empty_text_always_true_predicate(self) -> None:
        """Nothing to collect from empty text."""
        assert collect_code_points("", 0, lambda _: True) == ("", 0)

    def test_returns_codepoint_run(self) -> None:
        """Result is a named pair."""
        result = collect_code_points("42px", 0, is_ascii_digit)
        assert isinstance(result, CodepointRun)
        assert result.value == "42"
        assert result.position == 2
        value, position = result
        assert (value, position) == ("42", 2)

    def test_negative_position_clamped(self) -> None:
        """Negative start positions are treated as 0."""
        assert collect_code_points("ab1", -3, is_ascii_alpha) == ("ab", 2)

    def test_collects_through_surrogates(self) -> None:
        """Lone surrogates are single code points the predicate sees."""
        text = "\ud800\udfffx"
        assert collect_code_points(text, 0, lambda cp: cp != "x") == ("\ud800\udfff", 2)

    def test_astral_code_points_count_once(self) -> None:
        """Positions advance by code point, not UTF-16 unit."""
        text = "\U0001f600\U0001f600a"
        assert collect_code_points(text, 0, lambda cp: ord(cp) > 0xFFFF) == (
            "\U0001f600\U0001f600",
            2,
        )

    def test_skip_ascii_whitespace(self) -> None:
        """Returns the position after the whitespace run."""
        assert skip_ascii_whitespace("  \t\nabc", 0) == 4
        assert skip_ascii_whitespace("abc", 0) == 0
        assert skip_ascii_whitespace("a  ", 1) == 3
        assert skip_ascii_whitespace("", 7) == 7
        assert skip_ascii_whitespace("\x0babc", 0) == 0


# ============================================================================
# SCALAR VALUE STRINGS
# ============================================================================


class TestConvertToScalarValueString:
    """Test surrogate replacement."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", ""),
            ("\ud800", "\ufffd"),
            ("\udfff", "\ufffd"),
            ("test", "test"),
            ("a\ud800b\udc00c", "a\ufffdb\ufffdc"),
            ("\ud800\udc00", "\ufffd\ufffd"),
            ("\U0001f600", "\U0001f600"),
        ],
    )
    def test_convert(self, value: str, expected: str) -> None:
        """Every surrogate becomes U+FFFD; everything else passes through."""
        assert convert_to_scalar_value_string(value) == expected

    def test_result_is_encodable(self) -> None:
        """The result always encodes as strict UTF-8."""
        result = convert_to_scalar_value_string("x\udbffy")
        assert result.encode("utf-8").decode("utf-8") == result


# ============================================================================
# NEWLINES
# ============================================================================


class TestStripNewlines:
    """Test LF/CR removal."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", ""),
            ("a\n\n", "a"),
            ("a\r\n\r\n", "a"),
            ("a\r\r", "a"),
            ("apple\nbanana", "applebanana"),
            ("a\tb\x0cc d", "a\tb\x0cc d"),
        ],
    )
    def test_strip_newlines(self, value: str, expected: str) -> None:
        """Only LF and CR are removed."""
        assert strip_newlines(value) == expected

    def test_unicode_line_separators_kept(self) -> None:
        """U+2028, U+0085 and VT are not Infra newlines."""
        value = "a\u2028b\x85c\x0bd"
        assert strip_newlines(value) == value


class TestNormalizeNewlines:
    """Test CRLF/CR to LF conversion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", ""),
            ("\r", "\n"),
            ("\r\n\r\n", "\n\n"),
            ("a\r\ntttt\r", "a\ntttt\n"),
            ("\r\r\n", "\n\n"),
            ("\n\r", "\n\n"),
            ("a\rb\rc", "a\nb\nc"),
            ("no newlines", "no newlines"),
        ],
    )
    def test_normalize_newlines(self, value: str, expected: str) -> None:
        """CRLF collapses to LF; every lone CR becomes LF."""
        assert normalize_newlines(value) == expected

    def test_trailing_lone_cr(self) -> None:
        """A CR at the very end still becomes LF."""
        assert normalize_newlines("line\r") == "line\n"


# ============================================================================
# WHITESPACE STRIPPING / COLLAPSING
# ============================================================================


class TestStripLeadingAndTrailingAsciiWhitespace:
    """Test ASCII whitespace trimming."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", ""),
            (" ", ""),
            ("\t\n\x0c\r ", ""),
            ("  cat  ", "cat"),
            ("\r\ncat dog\t", "cat dog"),
            ("cat", "cat"),
            (" a ", "a"),
        ],
    )
    def test_strip(self, value: str, expected: str) -> None:
        """Removes TAB, LF, FF, CR, SPACE from both ends only."""
        assert strip_leading_and_trailing_ascii_whitespace(value) == expected

    @pytest.mark.parametrize("edge", ["\x0b", "\xa0", "\u2003", "\u3000"])
    def test_non_ascii_whitespace_kept(self, edge: str) -> None:
        """Diverges from str.strip(): VT and Unicode spaces survive."""
        value = f"{edge} cat {edge}"
        assert strip_leading_and_trailing_ascii_whitespace(value) == value
        assert value.strip() != value

    def test_interior_whitespace_kept(self) -> None:
        """Whitespace between words is untouched."""
        assert strip_leading_and_trailing_ascii_whitespace(" a \t\n b ") == "a \t\n b"


class TestStripAndCollapseAsciiWhitespace:
    """Test whitespace collapsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", ""),
            ("    ", ""),
            ("cat dog  hamster \n\r", "cat dog hamster"),
            ("\r  \n  cat dog  hamster", "cat dog hamster"),
            ("\r  \n  cat dog  hamster \n\r", "cat dog hamster"),
            ("a\t\t\tb", "a b"),
            ("a\x0bb", "a\x0bb"),
            ("a \x0b b", "a \x0b b"),
            ("single", "single"),
        ],
    )
    def test_collapse(self, value: str, expected: str) -> None:
        """Runs collapse to one SPACE, ends are stripped."""
        assert strip_and_collapse_ascii_whitespace(value) == expected

    def test_preserves_lone_surrogates(self) -> None:
        """Surrogates are ordinary non-whitespace code points here."""
        assert strip_and_collapse_ascii_whitespace(" \ud800  \udc00 ") == "\ud800 \udc00"


# ============================================================================
# SPLITTING
# ============================================================================


class TestSplitOnAsciiWhitespace:
    """Test whitespace tokenization."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", []),
            ("   ", []),
            ("a", ["a"]),
            ("  a\tb\n\nc ", ["a", "b", "c"]),
            ("a\xa0b c", ["a\xa0b", "c"]),
            ("a\x0bb", ["a\x0bb"]),
        ],
    )
    def test_split(self, value: str, expected: list[str]) -> None:
        """Never yields empty tokens; only ASCII whitespace separates."""
        assert split_on_ascii_whitespace(value) == expected


class TestStrictlySplit:
    """Test single-delimiter splitting."""

    @pytest.mark.parametrize(
        ("value", "delimiter", "expected"),
        [
            ("", ",", [""]),
            ("a", ",", ["a"]),
            ("a,,b", ",", ["a", "", "b"]),
            (",a,", ",", ["", "a", ""]),
            ("a\U0001f600b", "\U0001f600", ["a", "b"]),
        ],
    )
    def test_split(self, value: str, delimiter: str, expected: list[str]) -> None:
        """Empty tokens are kept."""
        assert strictly_split(value, delimiter) == expected

    @pytest.mark.parametrize("delimiter", ["", ", ", "ab"])
    def test_rejects_bad_delimiter(self, delimiter: str) -> None:
        """Delimiter must be exactly one code point."""
        with pytest.raises(InvalidDelimiterError) as exc_info:
            strictly_split("a,b", delimiter)

        assert isinstance(exc_info.value, ValueError)
        assert isinstance(exc_info.value, InfraError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_DELIMITER

    def test_bad_delimiter_logged(self, debug_log: pytest.LogCaptureFixture) -> None:
        """Rejection is logged at DEBUG before raising."""
        with pytest.raises(InvalidDelimiterError):
            strictly_split("a", "")

        assert "delimiter" in debug_log.text
        assert debug_log.records[-1].name == "infratext.strings"


class TestSplitOnCommas:
    """Test comma splitting with per-token whitespace stripping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            (" a , b,,c", ["a", "b", "", "c"]),
            ("a,", ["a"]),
            (",a", ["", "a"]),
            (" , ", ["", ""]),
            ("text/html ,\tapplication/xml", ["text/html", "application/xml"]),
        ],
    )
    def test_split(self, value: str, expected: list[str]) -> None:
        """Tokens are ASCII-whitespace stripped; empty ones kept."""
        assert split_on_commas(value) == expected


# ============================================================================
# ASCII CASE
# ============================================================================


class TestAsciiCase:
    """Test ASCII-only case mapping."""

    def test_lowercase(self) -> None:
        """Only A-Z change."""
        assert ascii_lowercase("Hello, WORLD 42") == "hello, world 42"
        assert ascii_lowercase("\u00c0\u0130") == "\u00c0\u0130"

    def test_uppercase(self) -> None:
        """Only a-z change."""
        assert ascii_uppercase("Hello, world 42") == "HELLO, WORLD 42"
        assert ascii_uppercase("\u00df\u00e9") == "\u00df\u00e9"

    def test_case_insensitive_match(self) -> None:
        """Compares after ASCII lowercasing."""
        assert ascii_case_insensitive_match("Content-Type", "content-type")
        assert not ascii_case_insensitive_match("\u00c9", "\u00e9")
        assert not ascii_case_insensitive_match("a", "ab")

    def test_is_ascii_string(self) -> None:
        """True only when every code point is ASCII."""
        assert is_ascii_string("")
        assert is_ascii_string("\x00\x7f")
        assert not is_ascii_string("\x80")
        assert not is_ascii_string("a\ud800")


# ============================================================================
# CODE POINT SUBSTRING
# ============================================================================


class TestCodePointSubstring:
    """Test clamped substring extraction."""

    def test_length_counts_code_points(self) -> None:
        """Astral code points and surrogates count as one each."""
        assert code_point_length("\U0001f600a\ud800") == 3
        assert code_point_length("") == 0

    @pytest.mark.parametrize(
        ("start", "length", "expected"),
        [
            (0, 3, "abc"),
            (2, 2, "cd"),
            (4, 10, "e"),
            (10, 2, ""),
            (-2, 2, "ab"),
            (1, -1, ""),
        ],
    )
    def test_substring(self, start: int, length: int, expected: str) -> None:
        """Out-of-range bounds are clamped."""
        assert code_point_substring("abcde", start, length) == expected


# ============================================================================
# ISOMORPHIC ENCODING
# ============================================================================


class TestIsomorphic:
    """Test isomorphic encode and decode."""

    def test_encode(self) -> None:
        """Each code point becomes the byte of equal value."""
        assert isomorphic_encode("") == b""
        assert isomorphic_encode("caf\u00e9\x00\xff") == b"caf\xe9\x00\xff"

    def test_decode(self) -> None:
        """Each byte becomes the code point of equal value."""
        assert isomorphic_decode(b"") == ""
        assert isomorphic_decode(b"\x80\xff") == "\x80\xff"
        assert isomorphic_decode(bytearray(b"ab")) == "ab"

    def test_encode_rejects_wide_code_point(self) -> None:
        """Code points above U+00FF raise with position information."""
        with pytest.raises(IsomorphicEncodeError) as exc_info:
            isomorphic_encode("ab\u0100c")

        err = exc_info.value
        assert isinstance(err, ValueError)
        assert err.position == 2
        assert err.code_point == "\u0100"
        assert err.diagnostic is not None
        assert err.diagnostic.code is DiagnosticCode.ISOMORPHIC_ENCODE_OUT_OF_RANGE
        assert "U+0100" in str(err)

    def test_encode_failure_logged(self, debug_log: pytest.LogCaptureFixture) -> None:
        """The failing position is logged at DEBUG."""
        with pytest.raises(IsomorphicEncodeError):
            isomorphic_encode("\u0100")

        assert "position 0" in debug_log.text

    def test_encode_rejects_lone_surrogate(self) -> None:
        """Surrogates are above U+00FF too."""
        with pytest.raises(IsomorphicEncodeError) as exc_info:
            isomorphic_encode("\ud800")

        assert exc_info.value.position == 0
        assert exc_info.value.__cause__ is not None
