"""Data models for users, signup forms and test runs."""

from uiflow.models.user import (
    Address,
    LoginCredentials,
    SignupData,
    UserCredentials,
    UserProfile,
)
from uiflow.models.run import RunResult, RunStatus

__all__ = [
    "Address",
    "LoginCredentials",
    "RunResult",
    "RunStatus",
    "SignupData",
    "UserCredentials",
    "UserProfile",
]
