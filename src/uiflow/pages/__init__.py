"""
Page Objects

Page Object Model (POM) for the signup demo application.
Encapsulates page interactions and locators.

Usage:
    from uiflow.pages import SignupPage, AccountPage

    signup = SignupPage(page, settings)
    signup.goto()
    signup.fill_signup_form(data)

Pattern:
    - One class per page
    - Properties for locators
    - Methods for actions (delegating to ElementActions/WaitActions)
    - Boolean queries for assertions
"""

from uiflow.pages.account_page import AccountPage
from uiflow.pages.base_page import BasePage
from uiflow.pages.sample_page import SamplePage
from uiflow.pages.signup_page import SignupPage

__all__ = ["AccountPage", "BasePage", "SamplePage", "SignupPage"]
