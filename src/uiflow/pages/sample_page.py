"""Sample form page used as a smoke target."""

from __future__ import annotations

from playwright.sync_api import Locator

from uiflow.constants.app import Routes, SuccessMessages
from uiflow.pages.base_page import BasePage


class SamplePage(BasePage):
    @property
    def name_input(self) -> Locator:
        return self.page.get_by_role("textbox", name="name")

    @property
    def submit_button(self) -> Locator:
        return self.page.get_by_role("button", name="Submit")

    @property
    def success_message(self) -> Locator:
        return self.page.get_by_text(f"{SuccessMessages.SIGNUP_SUCCESS}!")

    def goto(self) -> None:
        self.navigate_to(Routes.SAMPLE)
        self.wait_for_visible(self.name_input)

    def fill_sample_form(self, name: str) -> None:
        self.actions.fill(self.name_input, name)

    def submit_form(self) -> None:
        self.actions.click(self.submit_button)

    def is_successfully_submitted(self) -> bool:
        return self.actions.is_visible(self.success_message)
