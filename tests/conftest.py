"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the actionlimits test suite.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests (hypothesis)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove limit overrides inherited from the calling environment."""
    monkeypatch.delenv("ACTIONLIMITS_MEMORY", raising=False)


@pytest.fixture
def limits_file(tmp_path: Path) -> Callable[[str], Path]:
    """
    Provide a factory writing YAML text to a temporary action definition.

    Returns:
        Callable taking YAML text and returning the file path
    """

    def _write(text: str) -> Path:
        path = tmp_path / "action.yaml"
        path.write_text(text)
        return path

    return _write
