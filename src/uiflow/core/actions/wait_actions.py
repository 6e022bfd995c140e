"""Wait strategies for page conditions.

Each wait blocks the calling test until a condition observable on the page
holds, or fails with WaitTimeoutError. The only local recovery is the
best-effort fallback of ``wait_for_button_submission``.

Load states per navigation: Pending -> DOMReady (domcontentloaded)
-> NetworkIdle (networkidle).
"""

import inspect
import re
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from uiflow.constants.timeouts import (
    DEFAULT_TIMEOUTS,
    POLL_INTERVAL_MS,
    SUBMISSION_FALLBACK_PAUSE_MS,
    TimeoutTiers,
    resolve_timeout,
)
from uiflow.core.actions.options import SubmissionOutcome
from uiflow.core.exceptions import ElementCountMismatchError, WaitTimeoutError

log = structlog.get_logger()

UrlPattern = str | re.Pattern[str] | Callable[[str], bool]


class WaitActions:
    """Reusable wait strategies for test stability.

    Usage:
        waits = WaitActions(page)
        waits.wait_for_url("**/account")
        waits.wait_for_page_ready()
    """

    def __init__(self, page: Page, timeouts: TimeoutTiers = DEFAULT_TIMEOUTS) -> None:
        self.page = page
        self.timeouts = timeouts

    @contextmanager
    def _bounded(self, condition: str, timeout: float | None) -> Iterator[None]:
        try:
            yield
        except PlaywrightTimeoutError as e:
            raise WaitTimeoutError(condition, timeout) from e

    def _poll_until(
        self,
        predicate: Callable[[], Any],
        timeout: float,
        condition: str,
    ) -> Any:
        """Evaluate predicate until truthy, pausing through the page between polls.

        A timeout of 0 polls without a deadline.
        """
        deadline = time.monotonic() + timeout / 1000
        while True:
            result = predicate()
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(f"Predicate for {condition} returned an awaitable")
            if result:
                return result
            if timeout and time.monotonic() >= deadline:
                raise WaitTimeoutError(condition, timeout)
            self.page.wait_for_timeout(POLL_INTERVAL_MS)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def wait_for_navigation(self) -> None:
        """Wait until the page reports network idle."""
        timeout = self.timeouts.long
        with self._bounded("networkidle", timeout):
            self.page.wait_for_load_state("networkidle", timeout=timeout)

    def wait_for_url(self, url_pattern: UrlPattern, timeout: float | None = None) -> None:
        """Wait for the page URL to match a glob, regex or predicate.

        Args:
            url_pattern: e.g. "**/account" or re.compile(r"/account$").
            timeout: Custom timeout, LONG by default.
        """
        timeout = resolve_timeout(timeout, self.timeouts.long)
        with self._bounded(f"url {url_pattern!r}", timeout):
            self.page.wait_for_url(url_pattern, timeout=timeout, wait_until="domcontentloaded")

    def wait_for_page_ready(self) -> None:
        """Wait for both DOM content loaded and network idle.

        The sync API cannot wait on both at once, so they are awaited in
        order and the MEDIUM bound on network idle starts at DOM ready.
        """
        with self._bounded("domcontentloaded", None):
            self.page.wait_for_load_state("domcontentloaded")
        timeout = self.timeouts.medium
        with self._bounded("networkidle", timeout):
            self.page.wait_for_load_state("networkidle", timeout=timeout)

    # -------------------------------------------------------------------------
    # Buttons
    # -------------------------------------------------------------------------

    def wait_for_button_submission(
        self,
        button: Locator,
        button_text: str,
        loading_text: str | None = None,
    ) -> SubmissionOutcome:
        """Wait for a submit button to go through its loading state.

        Phase 1 waits (SHORT) for the button labelled ``loading_text`` to
        appear. Phase 2 returns as soon as either the loading button is
        hidden or ``button`` is visible again (MEDIUM).

        If either phase times out or fails, the submission was probably too
        fast to observe: pause one second and report DEGRADED instead of failing.

        Args:
            button: The submit button in its idle state.
            button_text: Idle label of the button, e.g. "Sign up".
            loading_text: Label while submitting, defaults to button_text.

        Returns:
            CONFIRMED if the loading state and its end were observed,
            DEGRADED if the fixed pause was used instead.
        """
        loading_button = self.page.get_by_role("button", name=loading_text or button_text)

        try:
            loading_button.wait_for(state="visible", timeout=self.timeouts.short)
            self._poll_until(
                lambda: loading_button.is_hidden() or button.is_visible(),
                self.timeouts.medium,
                f"button {button_text!r} to finish submitting",
            )
        except (PlaywrightError, WaitTimeoutError) as e:
            log.info(
                "button_submission_degraded",
                button_text=button_text,
                loading_text=loading_text,
                reason=str(e),
            )
            self.page.wait_for_timeout(SUBMISSION_FALLBACK_PAUSE_MS)
            return SubmissionOutcome.DEGRADED

        return SubmissionOutcome.CONFIRMED

    # -------------------------------------------------------------------------
    # Elements and text
    # -------------------------------------------------------------------------

    def wait_for_element_count(
        self,
        locator: Locator,
        count: int,
        timeout: float | None = None,
    ) -> None:
        """Wait for the first match, then assert the exact number of matches.

        Raises:
            WaitTimeoutError: If no element appears in time.
            ElementCountMismatchError: If the count differs. Not retried.
        """
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        with self._bounded(f"first of {locator}", timeout):
            locator.first.wait_for(timeout=timeout)
        actual = locator.count()
        if actual != count:
            raise ElementCountMismatchError(expected=count, actual=actual)

    def wait_for_text(self, text: str, timeout: float | None = None) -> None:
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        with self._bounded(f"text {text!r} to appear", timeout):
            self.page.get_by_text(text).wait_for(state="visible", timeout=timeout)

    def wait_for_text_to_disappear(self, text: str, timeout: float | None = None) -> None:
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        with self._bounded(f"text {text!r} to disappear", timeout):
            self.page.get_by_text(text).wait_for(state="hidden", timeout=timeout)

    def wait_for_selector(self, selector: str, timeout: float | None = None) -> None:
        """Wait for a CSS selector to be visible."""
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        with self._bounded(f"selector {selector!r}", timeout):
            self.page.wait_for_selector(selector, state="visible", timeout=timeout)

    # -------------------------------------------------------------------------
    # Generic
    # -------------------------------------------------------------------------

    def wait(self, ms: float) -> None:
        """Unconditional pause. Prefer a condition wait."""
        self.page.wait_for_timeout(ms)

    def wait_for_function(
        self,
        predicate: str | Callable[[], Any],
        timeout: float | None = None,
    ) -> Any:
        """Wait until a predicate returns a truthy value.

        Args:
            predicate: JavaScript expression evaluated in the page, or a
                synchronous Python callable polled from the test.
            timeout: Custom timeout, MEDIUM by default.

        Returns:
            The truthy value (a JSHandle for JavaScript expressions).

        Raises:
            TypeError: If the callable is a coroutine function or returns an
                awaitable. The sync API has no event loop to drive it; use
                a JavaScript expression for asynchronous checks.
        """
        timeout = resolve_timeout(timeout, self.timeouts.medium)
        if isinstance(predicate, str):
            with self._bounded(f"function {predicate!r}", timeout):
                return self.page.wait_for_function(predicate, timeout=timeout)
        name = getattr(predicate, "__name__", repr(predicate))
        if inspect.iscoroutinefunction(predicate):
            raise TypeError(f"Async predicate {name} is not supported by the sync API")
        return self._poll_until(predicate, timeout, f"predicate {name}")
