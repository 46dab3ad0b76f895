"""Pytest configuration for colored-text tests."""

from collections.abc import Iterator

import pytest

from colored_text import terminal_check


@pytest.fixture(autouse=True)
def color_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Enable colors regardless of how the test runner's stdout is attached."""
    monkeypatch.delenv("NO_COLOR", raising=False)

    # Output is captured by pytest, so stdout is never a terminal
    with terminal_check(False):
        yield


@pytest.fixture
def no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable colors via NO_COLOR."""
    monkeypatch.setenv("NO_COLOR", "1")

