"""
Signup Data Factory

Generates unique signup form input using Faker.
Emails carry a sequence number and a timestamp so repeated runs against
the same environment never hit "email already registered".
"""

from __future__ import annotations

import time

import factory
from faker import Faker

from uiflow.constants.app import (
    DEFAULT_ADDRESS_LINE_1,
    DEFAULT_CITY,
    DEFAULT_FULL_NAME,
    DEFAULT_PHONE,
    DEFAULT_POSTAL_CODE,
    DEFAULT_STATE,
)
from uiflow.models import Address, SignupData, UserCredentials, UserProfile

fake = Faker()


class SignupDataFactory(factory.Factory):
    """
    Factory for generating SignupData.

    Usage:
        # Valid form input
        data = SignupDataFactory.build()

        # Password confirmation mismatch
        data = SignupDataFactory.build(confirm_password="different")

        # Complex email format
        data = SignupDataFactory.build(email="test.email+tag@domain.co.uk")
    """

    class Meta:
        model = SignupData

    name = factory.LazyFunction(lambda: fake.name())
    email = factory.Sequence(lambda n: f"testuser_{time.time_ns() // 1_000_000}_{n}@example.com")
    password = factory.LazyFunction(
        lambda: fake.password(length=14, special_chars=True, digits=True, upper_case=True)
    )
    confirm_password = factory.SelfAttribute("password")


class UserCredentialsFactory(factory.Factory):
    """Factory for login credentials with a display username."""

    class Meta:
        model = UserCredentials

    username = factory.LazyFunction(lambda: fake.user_name())
    email = factory.Sequence(lambda n: f"user_{n}_{fake.user_name()}@example.com")
    password = factory.LazyFunction(lambda: fake.password(length=12))


class AddressFactory(factory.Factory):
    """Factory for profile addresses, seeded from the app's test-data defaults."""

    class Meta:
        model = Address

    address_line1 = DEFAULT_ADDRESS_LINE_1
    city = DEFAULT_CITY
    state = DEFAULT_STATE
    postal_code = DEFAULT_POSTAL_CODE


class UserProfileFactory(factory.Factory):
    """Factory for the profile expected on the account page."""

    class Meta:
        model = UserProfile

    email = factory.Sequence(lambda n: f"profile_{n}@example.com")
    full_name = DEFAULT_FULL_NAME
    phone = DEFAULT_PHONE
    address = factory.SubFactory(AddressFactory)
