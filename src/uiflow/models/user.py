"""User, credential and signup form models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class LoginCredentials(BaseModel):
    """Email/password pair for the login form."""

    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class UserCredentials(LoginCredentials):
    """Credentials with a display username."""

    username: str


class SignupData(LoginCredentials):
    """Values entered in the signup form.

    ``confirm_password`` defaults to ``password``; set it explicitly to
    exercise the mismatch validation of the form.
    """

    name: str
    confirm_password: str | None = None

    @model_validator(mode="after")
    def default_confirmation(self) -> SignupData:
        if self.confirm_password is None:
            self.confirm_password = self.password
        return self

    @property
    def passwords_match(self) -> bool:
        return self.password == self.confirm_password


class Address(BaseModel):
    address_line1: str
    address_line2: str | None = None
    city: str
    state: str
    postal_code: str
    country: str | None = None


class UserProfile(BaseModel):
    """Profile as displayed on the account page."""

    id: str | None = None
    email: str
    username: str | None = None
    full_name: str | None = None
    phone: str | None = None
    address: Address | None = None
