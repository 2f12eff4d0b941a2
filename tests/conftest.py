"""Pytest configuration for the infratext test suite.

Hypothesis profiles:
    dev      local runs, 300 examples
    ci       CI=true, 50 derandomized examples with reproduction blobs
    verbose  100 examples with per-example output

HYPOTHESIS_PROFILE overrides the automatic choice.

Tests marked @pytest.mark.fuzz run only under ``pytest -m fuzz``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, Verbosity, settings

# Text strategies mixing lone surrogates with whitespace runs filter little
# but generate slowly on the first examples.
_COMMON_SETTINGS: dict[str, object] = {
    "suppress_health_check": [HealthCheck.too_slow],
}

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 300},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _overrides in _PROFILES.items():
    settings.register_profile(_name, **_COMMON_SETTINGS, **_overrides)  # type: ignore[arg-type]


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


# ============================================================================
# MARKERS
# ============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the fuzz marker."""
    config.addinivalue_line("markers", "fuzz: long-running totality checks (pytest -m fuzz)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the marker expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def debug_log(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture DEBUG records from the infratext logger tree."""
    with caplog.at_level(logging.DEBUG, logger="infratext"):
        yield caplog
