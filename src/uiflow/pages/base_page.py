"""Base page object shared by all pages of the application under test."""

from __future__ import annotations

from abc import ABC, abstractmethod

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from uiflow.config.logging import get_logger
from uiflow.config.settings import EnvironmentSettings
from uiflow.constants.timeouts import DEFAULT_TIMEOUTS, TimeoutTiers, resolve_timeout
from uiflow.core.actions import ByValue, ElementActions, WaitActions, WaitState
from uiflow.core.exceptions import WaitTimeoutError

log = get_logger(__name__)


class BasePage(ABC):
    """Page Object Model base class.

    Pattern:
        - One subclass per page
        - Properties for locators
        - Methods for actions, delegating to ElementActions/WaitActions
        - Boolean ``is_*`` queries for assertions in tests

    Settings are injected, never read from a global, so a test can point a
    page at another environment by passing different settings.
    """

    def __init__(
        self,
        page: Page,
        settings: EnvironmentSettings,
        timeouts: TimeoutTiers = DEFAULT_TIMEOUTS,
    ) -> None:
        self.page = page
        self.settings = settings
        self.timeouts = timeouts
        self.actions = ElementActions(page, timeouts)
        self.waits = WaitActions(page, timeouts)

    @property
    def base_url(self) -> str:
        return self.settings.base_url or ""

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @abstractmethod
    def goto(self) -> None:
        """Navigate to the page's default URL and wait until it is usable."""

    def navigate_to(self, path: str) -> None:
        """Navigate to a path relative to the base URL, or an absolute URL."""
        url = self.resolve_url(path)
        log.info("navigate", url=url)
        self.page.goto(
            url,
            wait_until="domcontentloaded",
            timeout=self.settings.timeout.navigation if self.settings.timeout else None,
        )
        self.waits.wait_for_page_ready()

    def resolve_url(self, path: str) -> str:
        """Convert a relative path to an absolute URL.

        Example:
            resolve_url("signup")  # "https://host/signup"
        """
        if path.startswith("http"):
            return path
        normalized = path if path.startswith("/") else f"/{path}"
        return f"{self.base_url}{normalized}"

    def reload(self) -> None:
        self.page.reload(wait_until="domcontentloaded")
        self.waits.wait_for_page_ready()

    def go_back(self) -> None:
        self.page.go_back(wait_until="domcontentloaded")
        self.waits.wait_for_page_ready()

    def get_page_title(self) -> str:
        return self.page.title()

    def get_current_url(self) -> str:
        return self.page.url

    def is_on_page(self, path: str) -> bool:
        return path in self.get_current_url()

    # -------------------------------------------------------------------------
    # Interactions with built-in visibility waits
    # -------------------------------------------------------------------------

    def click(self, locator: Locator) -> None:
        self.actions.wait_for_visible(locator)
        self.actions.click(locator)

    def fill(self, locator: Locator, text: str) -> None:
        self.actions.wait_for_visible(locator)
        self.actions.fill(locator, text, clear=True)

    def select_option(self, locator: Locator, value: str) -> None:
        self.actions.wait_for_visible(locator)
        self.actions.select(locator, ByValue(value))

    def check(self, locator: Locator) -> None:
        self.actions.wait_for_visible(locator)
        self.actions.check(locator)

    def uncheck(self, locator: Locator) -> None:
        self.actions.wait_for_visible(locator)
        self.actions.uncheck(locator)

    # -------------------------------------------------------------------------
    # Element state
    # -------------------------------------------------------------------------

    def wait_for_element(
        self,
        locator: Locator,
        state: WaitState = WaitState.VISIBLE,
        timeout: float | None = None,
    ) -> None:
        """Wait for an element to reach a state.

        Raises:
            WaitTimeoutError: If the state is not reached in time.
        """
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        try:
            locator.wait_for(state=state.value, timeout=timeout)
        except PlaywrightTimeoutError as e:
            raise WaitTimeoutError(f"{locator} to be {state.value}", timeout) from e

    def wait_for_visible(self, locator: Locator, timeout: float | None = None) -> None:
        self.wait_for_element(locator, WaitState.VISIBLE, timeout)

    def wait_for_hidden(self, locator: Locator, timeout: float | None = None) -> None:
        self.wait_for_element(locator, WaitState.HIDDEN, timeout)

    def is_visible(self, locator: Locator, timeout: float | None = None) -> bool:
        """Return whether the element becomes visible within timeout (SHORT)."""
        timeout = resolve_timeout(timeout, self.timeouts.short)
        try:
            self.wait_for_element(locator, WaitState.VISIBLE, timeout)
        except (WaitTimeoutError, PlaywrightError):
            return False
        return True

    # -------------------------------------------------------------------------
    # Artifacts
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str) -> bytes:
        """Save a full-page screenshot to ``<screenshot_dir>/<name>.png``."""
        path = self.settings.screenshot_dir / f"{name}.png"
        log.info("screenshot", path=str(path))
        return self.page.screenshot(path=path, full_page=True)
