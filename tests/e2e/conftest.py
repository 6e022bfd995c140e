"""Playwright E2E test fixtures for the signup demo application.

This module provides fixtures for:
- Environment settings selected by TEST_ENV, built once per session
- Browser and context configuration for pytest-playwright
- Page objects bound to the test's page
- Screenshot capture and a run record on failure

Usage:
    @pytest.mark.e2e
    def test_signup(signup_page, account_page):
        signup_page.goto()
"""

from collections.abc import Generator
from typing import Any

import pytest
from playwright.sync_api import Page

from uiflow.config import EnvironmentSettings, load_environment
from uiflow.config.logging import configure_logging, get_logger
from uiflow.models import RunResult, RunStatus
from uiflow.pages import AccountPage, SamplePage, SignupPage

log = get_logger(__name__)


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture(scope="session")
def environment() -> EnvironmentSettings:
    """Settings for the target environment (TEST_ENV, default staging)."""
    settings = load_environment()
    configure_logging(settings)
    log.info("e2e_session_start", test_env=settings.test_env, base_url=settings.base_url)
    return settings


@pytest.fixture(scope="session")
def base_url(environment: EnvironmentSettings) -> str:
    """Override pytest-base-url so page.goto("/signup") resolves against the environment."""
    return environment.base_url or ""


# =============================================================================
# pytest-playwright Configuration
# =============================================================================


@pytest.fixture(scope="session")
def browser_context_args(
    browser_context_args: dict[str, Any], environment: EnvironmentSettings
) -> dict[str, Any]:
    """Configure browser context for the application."""
    return {
        **browser_context_args,
        "base_url": environment.base_url,
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="session")
def browser_type_launch_args(
    browser_type_launch_args: dict[str, Any], environment: EnvironmentSettings
) -> dict[str, Any]:
    """Configure browser launch arguments."""
    return {
        **browser_type_launch_args,
        "headless": not environment.headed,
        "slow_mo": environment.slow_mo,
    }


@pytest.fixture
def configured_page(page: Page, environment: EnvironmentSettings) -> Generator[Page, None, None]:
    """The test's page with environment timeouts applied."""
    if environment.timeout is not None:
        page.set_default_timeout(environment.timeout.default)
        page.set_default_navigation_timeout(environment.timeout.navigation)
    yield page


# =============================================================================
# Page Object Fixtures
# =============================================================================


@pytest.fixture
def signup_page(configured_page: Page, environment: EnvironmentSettings) -> SignupPage:
    return SignupPage(configured_page, environment)


@pytest.fixture
def account_page(configured_page: Page, environment: EnvironmentSettings) -> AccountPage:
    return AccountPage(configured_page, environment)


@pytest.fixture
def sample_page(configured_page: Page, environment: EnvironmentSettings) -> SamplePage:
    return SamplePage(configured_page, environment)


# =============================================================================
# Failure Artifacts
# =============================================================================


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    """Log a RunResult for each test and screenshot the page on failure."""
    outcome = yield
    report = outcome.get_result()
    if report.when != "call":
        return

    status = RunStatus.PASSED
    if report.failed:
        status = RunStatus.FAILED
    elif report.skipped:
        status = RunStatus.SKIPPED

    result = RunResult(
        test_name=item.nodeid,
        status=status,
        error=str(call.excinfo.value) if call.excinfo else None,
        duration=report.duration,
    )
    log.info("e2e_test_result", **result.model_dump(mode="json"))

    page = item.funcargs.get("configured_page") if hasattr(item, "funcargs") else None
    environment = item.funcargs.get("environment") if hasattr(item, "funcargs") else None
    if report.failed and page is not None and environment is not None:
        path = environment.screenshot_dir / f"{item.name}.png"
        page.screenshot(path=path, full_page=True)
        log.info("failure_screenshot", path=str(path))
