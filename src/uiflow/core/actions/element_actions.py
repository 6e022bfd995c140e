"""Element-level interactions against a Playwright page.

Every method takes the locator to act on; nothing is cached between calls,
so a locator is re-resolved against the current DOM on each operation.
Playwright failures are re-raised as ActionError with the original error
chained, except for ``is_visible`` which is total.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from uiflow.constants.timeouts import (
    CLICK_RETRY_ATTEMPTS,
    CLICK_RETRY_DELAY_MS,
    DEFAULT_TIMEOUTS,
    DEFAULT_TYPING_DELAY_MS,
    TimeoutTiers,
    resolve_timeout,
)
from uiflow.core.actions.options import SelectOption
from uiflow.core.exceptions import ActionError

log = structlog.get_logger()

FilePaths = str | Path | Sequence[str | Path]


class ElementActions:
    """Reusable actions for interacting with page elements.

    Usage:
        actions = ElementActions(page)
        actions.fill(page.get_by_role("textbox", name="Email *"), "a@b.co")
        actions.click(page.get_by_role("button", name="Sign up"), retry=True)
    """

    def __init__(self, page: Page, timeouts: TimeoutTiers = DEFAULT_TIMEOUTS) -> None:
        self.page = page
        self.timeouts = timeouts

    @contextmanager
    def _action(self, operation: str, locator: Locator) -> Iterator[None]:
        try:
            yield
        except PlaywrightError as e:
            raise ActionError(operation, str(locator), e.message) from e

    def _sleep(self, seconds: float) -> None:
        # Pause through the page so traces and slow_mo see it
        self.page.wait_for_timeout(seconds * 1000)

    # -------------------------------------------------------------------------
    # Pointer
    # -------------------------------------------------------------------------

    def click(
        self,
        locator: Locator,
        *,
        force: bool = False,
        timeout: float | None = None,
        retry: bool = False,
    ) -> None:
        """Click an element, optionally retrying.

        Args:
            locator: Element to click.
            force: Bypass actionability checks.
            timeout: Per-attempt timeout, MEDIUM by default.
            retry: Make up to 3 attempts, 1 second apart.

        Raises:
            ActionError: If the last attempt fails. Its cause is the
                last Playwright error.
        """
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        attempts = CLICK_RETRY_ATTEMPTS if retry else 1

        def log_retry(retry_state: RetryCallState) -> None:
            log.info(
                "click_retry",
                target=str(locator),
                attempt=retry_state.attempt_number,
                max_attempts=attempts,
            )

        retryer = Retrying(
            stop=stop_after_attempt(attempts),
            wait=wait_fixed(CLICK_RETRY_DELAY_MS / 1000),
            retry=retry_if_exception_type(PlaywrightError),
            sleep=self._sleep,
            before_sleep=log_retry,
            reraise=True,
        )
        with self._action("click", locator):
            for attempt in retryer:
                with attempt:
                    locator.click(force=force, timeout=timeout)

    def double_click(self, locator: Locator) -> None:
        with self._action("double_click", locator):
            locator.dblclick(timeout=self.timeouts.medium)

    def hover(self, locator: Locator) -> None:
        with self._action("hover", locator):
            locator.hover(timeout=self.timeouts.medium)

    def drag_and_drop(self, source: Locator, target: Locator) -> None:
        with self._action("drag_and_drop", source):
            source.drag_to(target)

    # -------------------------------------------------------------------------
    # Keyboard and inputs
    # -------------------------------------------------------------------------

    def fill(
        self,
        locator: Locator,
        value: str,
        *,
        clear: bool = False,
        timeout: float | None = None,
    ) -> None:
        """Set an input's value, optionally clearing it first."""
        with self._action("fill", locator):
            if clear:
                locator.clear()
            locator.fill(value, timeout=resolve_timeout(timeout, self.timeouts.medium))

    def type(self, locator: Locator, text: str, delay: float = DEFAULT_TYPING_DELAY_MS) -> None:
        """Type text one key at a time, like a user would.

        Args:
            locator: Input element, clicked first to take focus.
            text: Text to type.
            delay: Milliseconds between keystrokes.
        """
        with self._action("type", locator):
            locator.click()
            locator.press_sequentially(text, delay=delay)

    def clear(self, locator: Locator) -> None:
        with self._action("clear", locator):
            locator.clear()

    def focus(self, locator: Locator) -> None:
        with self._action("focus", locator):
            locator.focus()

    def press(self, key: str) -> None:
        """Press a key on the page keyboard (e.g. "Enter", "Control+A")."""
        self.page.keyboard.press(key)

    def select(self, locator: Locator, option: SelectOption) -> None:
        """Select dropdown option(s).

        Args:
            locator: <select> element.
            option: ByValue, ByValues or ByOption.

        Example:
            actions.select(country, ByOption(label="Vietnam"))
        """
        with self._action("select", locator):
            locator.select_option(**option.as_kwargs())

    def upload_file(self, locator: Locator, file_path: FilePaths) -> None:
        with self._action("upload_file", locator):
            locator.set_input_files(file_path)

    # -------------------------------------------------------------------------
    # Checkboxes
    # -------------------------------------------------------------------------

    def check(self, locator: Locator) -> None:
        """Check a checkbox or radio button unless it is already checked."""
        with self._action("check", locator):
            if not locator.is_checked():
                locator.check()

    def uncheck(self, locator: Locator) -> None:
        """Uncheck a checkbox unless it is already unchecked."""
        with self._action("uncheck", locator):
            if locator.is_checked():
                locator.uncheck()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_text(self, locator: Locator) -> str:
        with self._action("get_text", locator):
            return locator.text_content() or ""

    def get_inner_text(self, locator: Locator) -> str:
        with self._action("get_inner_text", locator):
            return locator.inner_text() or ""

    def get_value(self, locator: Locator) -> str:
        with self._action("get_value", locator):
            return locator.input_value()

    def get_attribute(self, locator: Locator, name: str) -> str | None:
        with self._action("get_attribute", locator):
            return locator.get_attribute(name)

    def is_visible(self, locator: Locator) -> bool:
        """Return whether the element is visible, never raising."""
        try:
            return locator.is_visible(timeout=self.timeouts.short)
        except PlaywrightError as e:
            log.debug("visibility_check_failed", target=str(locator), error=e.message)
            return False

    def is_enabled(self, locator: Locator) -> bool:
        with self._action("is_enabled", locator):
            return locator.is_enabled()

    def is_checked(self, locator: Locator) -> bool:
        with self._action("is_checked", locator):
            return locator.is_checked()

    # -------------------------------------------------------------------------
    # Element waits
    # -------------------------------------------------------------------------

    def wait_for_visible(self, locator: Locator, timeout: float | None = None) -> None:
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        with self._action("wait_for_visible", locator):
            locator.wait_for(state="visible", timeout=timeout)

    def wait_for_hidden(self, locator: Locator, timeout: float | None = None) -> None:
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        with self._action("wait_for_hidden", locator):
            locator.wait_for(state="hidden", timeout=timeout)

    def scroll_into_view(self, locator: Locator) -> None:
        with self._action("scroll_into_view", locator):
            locator.scroll_into_view_if_needed()
