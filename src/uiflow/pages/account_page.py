"""Account page object (shown after a successful signup)."""

from __future__ import annotations

from playwright.sync_api import Locator

from uiflow.constants.app import Routes
from uiflow.models import UserProfile
from uiflow.pages.base_page import BasePage


class AccountPage(BasePage):
    """Account page: "My Profile" card and the Personal Information form."""

    @property
    def my_profile_heading(self) -> Locator:
        return self.page.get_by_role("heading", name="My Profile")

    @property
    def profile_name_heading(self) -> Locator:
        return self.page.get_by_role("heading", level=2)

    @property
    def profile_email_text(self) -> Locator:
        return self.profile_name_heading.locator("..").locator("p")

    @property
    def _personal_info_inputs(self) -> Locator:
        # Inputs have no labels; rely on their order inside the section
        return (
            self.page.get_by_role("heading", name="Personal Information")
            .locator("..")
            .locator("input")
        )

    @property
    def full_name_input(self) -> Locator:
        return self._personal_info_inputs.first

    @property
    def email_input(self) -> Locator:
        return self._personal_info_inputs.nth(1)

    def goto(self) -> None:
        self.navigate_to(Routes.ACCOUNT)
        self.wait_for_visible(self.my_profile_heading)

    def is_on_account_page(self) -> bool:
        return self.is_visible(self.my_profile_heading, timeout=self.timeouts.medium)

    def get_profile_full_name(self) -> str:
        self.wait_for_visible(self.profile_name_heading)
        return self.actions.get_text(self.profile_name_heading).strip()

    def get_profile_email(self) -> str:
        self.wait_for_visible(self.profile_email_text)
        return self.actions.get_text(self.profile_email_text).strip()

    def get_personal_info_full_name(self) -> str:
        self.wait_for_visible(self.full_name_input)
        return self.actions.get_value(self.full_name_input)

    def get_personal_info_email(self) -> str:
        self.wait_for_visible(self.email_input)
        return self.actions.get_value(self.email_input)

    def get_profile(self) -> UserProfile:
        """Read the profile card into a model."""
        return UserProfile(
            email=self.get_profile_email(),
            full_name=self.get_profile_full_name(),
        )
