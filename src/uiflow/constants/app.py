"""Application constants for the signup demo app under test."""

from typing import Final


class Routes:
    """Relative paths of the application pages."""

    HOME: Final[str] = "/"
    LOGIN: Final[str] = "/login"
    SIGNUP: Final[str] = "/signup"
    ACCOUNT: Final[str] = "/account"
    DASHBOARD: Final[str] = "/dashboard"
    PROFILE: Final[str] = "/profile"
    PRODUCTS: Final[str] = "/products"
    CART: Final[str] = "/cart"
    CHECKOUT: Final[str] = "/checkout"
    SAMPLE: Final[str] = "/sampe-page"  # Path as deployed


class Roles:
    """ARIA roles used with get_by_role."""

    BUTTON: Final[str] = "button"
    TEXTBOX: Final[str] = "textbox"
    LINK: Final[str] = "link"
    HEADING: Final[str] = "heading"
    CHECKBOX: Final[str] = "checkbox"


class DataTestIds:
    """data-testid selectors."""

    PROFILE_SECTION: Final[str] = '[data-testid="profile-section"]'
    USER_INFO: Final[str] = '[data-testid="user-info"]'
    DASHBOARD: Final[str] = '[data-testid="dashboard"]'
    LOGOUT_BUTTON: Final[str] = '[data-testid="logout-button"]'


class ErrorMessages:
    INVALID_EMAIL: Final[str] = "Invalid email format"
    INVALID_PASSWORD: Final[str] = "Invalid password"
    PASSWORDS_MISMATCH: Final[str] = "Passwords do not match"
    USER_NOT_FOUND: Final[str] = "User not found"
    INVALID_CREDENTIALS: Final[str] = "Invalid credentials"


class SuccessMessages:
    LOGIN_SUCCESS: Final[str] = "Login successful"
    SIGNUP_SUCCESS: Final[str] = "Signup successful"
    SIGNUP_VERIFY_EMAIL: Final[str] = (
        "Signup successful! Please check your email to verify your account."
    )
    LOGOUT_SUCCESS: Final[str] = "Logout successful"


class UserRoles:
    ADMIN: Final[str] = "admin"
    USER: Final[str] = "user"
    GUEST: Final[str] = "guest"


# =============================================================================
# Test Data Defaults
# =============================================================================

DEFAULT_PASSWORD: Final[str] = "secret"
DEFAULT_FULL_NAME: Final[str] = "Test User"
DEFAULT_PHONE: Final[str] = "0905111222"
DEFAULT_CITY: Final[str] = "Da nang"
DEFAULT_STATE: Final[str] = "Danang"
DEFAULT_POSTAL_CODE: Final[str] = "55555"
DEFAULT_ADDRESS_LINE_1: Final[str] = "Test Address"

# Signup button labels
SIGNUP_BUTTON_TEXT: Final[str] = "Sign up"
SIGNUP_LOADING_TEXT: Final[str] = "Signing up..."
