#!/usr/bin/env python3
"""String Algorithm Fuzzer (Atheris).

Targets: infratext.strings, infratext.codepoints
Feeds arbitrary text, lone surrogates included, through every transform
and checks the output-shape invariants.
"""

from __future__ import annotations

import atexit
import json
import logging
import sys

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)

atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    sys.exit(1)

logging.getLogger("infratext").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["infratext"]):
    from infratext.codepoints import is_ascii_alphanumeric, is_ascii_whitespace, is_surrogate
    from infratext.diagnostics import InfraError
    from infratext.strings import (
        collect_code_points,
        convert_to_scalar_value_string,
        isomorphic_decode,
        isomorphic_encode,
        normalize_newlines,
        split_on_ascii_whitespace,
        split_on_commas,
        strip_and_collapse_ascii_whitespace,
        strip_leading_and_trailing_ascii_whitespace,
        strip_newlines,
    )


def _finding(msg: str) -> None:
    raise RuntimeError(msg)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test string transform invariants."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)

    try:
        source = fdp.ConsumeUnicode(1024)
        position = fdp.ConsumeIntInRange(-4, 1100)

        # 1. Scalar value conversion
        scalar = convert_to_scalar_value_string(source)
        if len(scalar) != len(source) or any(is_surrogate(cp) for cp in scalar):
            _finding("convert_to_scalar_value_string left a surrogate")

        # 2. Newline handling
        if "\r" in normalize_newlines(source):
            _finding("normalize_newlines left a CR")
        stripped = strip_newlines(source)
        if "\n" in stripped or "\r" in stripped:
            _finding("strip_newlines left a newline")

        # 3. Whitespace
        trimmed = strip_leading_and_trailing_ascii_whitespace(source)
        if trimmed and (is_ascii_whitespace(trimmed[0]) or is_ascii_whitespace(trimmed[-1])):
            _finding(f"strip left edge whitespace: {trimmed!r}")
        collapsed = strip_and_collapse_ascii_whitespace(source)
        if strip_and_collapse_ascii_whitespace(collapsed) != collapsed:
            _finding("strip_and_collapse is not idempotent")
        if " ".join(split_on_ascii_whitespace(source)) != collapsed:
            _finding("split_on_ascii_whitespace disagrees with collapse")
        split_on_commas(source)

        # 4. Collection
        value, end = collect_code_points(source, position, is_ascii_alphanumeric)
        start = max(position, 0)
        if end != start + len(value) or not all(is_ascii_alphanumeric(cp) for cp in value):
            _finding(f"collect_code_points bad run at {position}: {value!r}, {end}")

        # 5. Isomorphic encode (may legitimately reject)
        encoded = isomorphic_encode(source)
        if isomorphic_decode(encoded) != source:
            _finding("isomorphic round trip mismatch")

    except InfraError:
        pass
    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise

if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
