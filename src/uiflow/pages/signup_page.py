"""Signup page object."""

from __future__ import annotations

import time

from playwright.sync_api import Locator

from uiflow.config.logging import get_logger
from uiflow.constants.app import (
    SIGNUP_BUTTON_TEXT,
    SIGNUP_LOADING_TEXT,
    Routes,
    SuccessMessages,
)
from uiflow.core.actions import SubmissionOutcome
from uiflow.core.exceptions import WaitTimeoutError
from uiflow.models import SignupData
from uiflow.pages.base_page import BasePage

log = get_logger(__name__)

TEST_USER_PASSWORD = "TestPassword123!"
VALIDATION_ERROR_SELECTOR = '[role="alert"], .error, .error-message, .invalid-feedback'


class SignupPage(BasePage):
    """Signup form: name, email, password and confirmation.

    Usage:
        signup = SignupPage(page, settings)
        signup.goto()
        signup.fill_signup_form(SignupPage.generate_test_user_data())
        signup.submit_form()
    """

    # -------------------------------------------------------------------------
    # Form locators
    # -------------------------------------------------------------------------

    @property
    def name_input(self) -> Locator:
        return self.page.get_by_role("textbox", name="Name *")

    @property
    def email_input(self) -> Locator:
        return self.page.get_by_role("textbox", name="Email *")

    @property
    def password_input(self) -> Locator:
        # exact, otherwise "Confirm Password *" matches too
        return self.page.get_by_role("textbox", name="Password *", exact=True)

    @property
    def confirm_password_input(self) -> Locator:
        return self.page.get_by_role("textbox", name="Confirm Password *")

    @property
    def signup_button(self) -> Locator:
        return self.page.get_by_role("button", name=SIGNUP_BUTTON_TEXT)

    @property
    def google_signin_button(self) -> Locator:
        return self.page.get_by_role("button", name="Sign in with Google")

    @property
    def login_link(self) -> Locator:
        return self.page.get_by_role("link", name="Login here")

    # -------------------------------------------------------------------------
    # Result locators
    # -------------------------------------------------------------------------

    @property
    def success_notification(self) -> Locator:
        return self.page.get_by_text(SuccessMessages.SIGNUP_VERIFY_EMAIL)

    @property
    def validation_errors(self) -> Locator:
        return self.page.locator(VALIDATION_ERROR_SELECTOR)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def goto(self) -> None:
        self.navigate_to(Routes.SIGNUP)
        self.wait_for_visible(self.name_input)
        self.wait_for_visible(self.signup_button)

    def verify_form_elements_visible(self) -> None:
        """Wait for every form field and the submit button.

        Raises:
            WaitTimeoutError: If any element is missing.
        """
        for locator in (
            self.name_input,
            self.email_input,
            self.password_input,
            self.confirm_password_input,
            self.signup_button,
        ):
            self.wait_for_visible(locator)

    def click_login_link(self) -> None:
        self.actions.click(self.login_link)

    # -------------------------------------------------------------------------
    # Form
    # -------------------------------------------------------------------------

    def fill_signup_form(self, data: SignupData) -> None:
        self.actions.fill(self.name_input, data.name)
        self.actions.fill(self.email_input, data.email)
        self.actions.fill(self.password_input, data.password)
        self.actions.fill(self.confirm_password_input, data.confirm_password or data.password)

    def submit_form(self) -> SubmissionOutcome:
        """Click "Sign up" and wait for the button to leave its loading state."""
        self.actions.click(self.signup_button, retry=True)
        outcome = self.waits.wait_for_button_submission(
            self.signup_button, SIGNUP_BUTTON_TEXT, SIGNUP_LOADING_TEXT
        )
        log.info("signup_submitted", outcome=outcome.value)
        return outcome

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    def is_signup_successful(self) -> bool:
        return self.is_visible(self.success_notification, timeout=self.timeouts.medium)

    def is_on_account_page(self) -> bool:
        try:
            self.waits.wait_for_url(f"**{Routes.ACCOUNT}", timeout=self.timeouts.medium)
        except WaitTimeoutError:
            return False
        return self.is_on_page(Routes.ACCOUNT)

    def get_validation_errors(self) -> list[str]:
        """Return the visible validation messages, empty when the form is valid."""
        texts = self.validation_errors.all_inner_texts()
        return [text.strip() for text in texts if text.strip()]

    def is_google_signin_available(self) -> bool:
        return self.actions.is_visible(self.google_signin_button)

    # -------------------------------------------------------------------------
    # Test data
    # -------------------------------------------------------------------------

    @staticmethod
    def generate_test_user_data() -> SignupData:
        """Unique signup data, avoiding duplicate email rejections.

        Example:
            SignupPage.generate_test_user_data().email
            # "testuser_1718000000000@example.com"
        """
        timestamp = time.time_ns() // 1_000_000
        return SignupData(
            name=f"Test User {timestamp}",
            email=f"testuser_{timestamp}@example.com",
            password=TEST_USER_PASSWORD,
            confirm_password=TEST_USER_PASSWORD,
        )
