"""Shared pytest fixtures for uiflow tests.

This module provides fixtures for:
- A clean environment for settings tests
- Explicit settings and compact timeout tiers
- A mocked Playwright page and locators for unit tests of the action layer
- Test data factories

Usage:
    @pytest.mark.unit
    def test_something(mock_page, fast_timeouts):
        actions = ElementActions(mock_page, fast_timeouts)
"""

from collections.abc import Callable, Generator
from unittest.mock import MagicMock

import pytest

from tests.support.factories import SignupDataFactory
from uiflow.config import EnvironmentSettings, load_environment
from uiflow.constants.timeouts import TimeoutTiers

# Variables that would leak a developer's shell or .env into unit tests
SUITE_ENV_VARS = [
    "TEST_ENV",
    "BASE_URL",
    "API_URL",
    "RETRIES",
    "WORKERS",
    "HEADED",
    "SLOW_MO",
    "DEBUG",
    "LOG_LEVEL",
]


# =============================================================================
# Environment Configuration
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Remove suite environment variables for the duration of a test."""
    for name in SUITE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch


@pytest.fixture
def settings(clean_env: pytest.MonkeyPatch) -> EnvironmentSettings:
    """Local-profile settings, ignoring any .env file."""
    return load_environment("local", _env_file=None)


@pytest.fixture
def fast_timeouts() -> TimeoutTiers:
    """Small tiers so polling fallbacks finish quickly."""
    return TimeoutTiers(short=20, medium=50, long=100, very_long=200)


# =============================================================================
# Mocked Playwright
# =============================================================================


@pytest.fixture
def mock_page() -> MagicMock:
    """Mock Playwright Page.

    ``wait_for_timeout`` does not sleep, so retry and fallback pauses are
    recorded as calls instead of slowing the test down.
    """
    page = MagicMock(name="page")
    page.url = "http://localhost:3000/"
    return page


@pytest.fixture
def make_locator() -> Callable[[str], MagicMock]:
    """Build a mock Locator whose str() looks like Playwright's."""

    def _make(selector: str = "button") -> MagicMock:
        locator = MagicMock(name=selector)
        locator.__str__.return_value = f"<Locator selector='{selector}'>"
        return locator

    return _make


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def signup_data_factory() -> type[SignupDataFactory]:
    """Provide signup data factory for creating form input."""
    return SignupDataFactory
