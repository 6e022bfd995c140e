"""
Test Data Factories

Factory-boy based factories for generating form input.
Follows the pattern: Faker + overrides.

Usage:
    from tests.support.factories import SignupDataFactory

    data = SignupDataFactory.build()
    batch = SignupDataFactory.build_batch(3)
"""

from tests.support.factories.signup_factory import (
    AddressFactory,
    SignupDataFactory,
    UserCredentialsFactory,
    UserProfileFactory,
)

__all__ = [
    "AddressFactory",
    "SignupDataFactory",
    "UserCredentialsFactory",
    "UserProfileFactory",
]
