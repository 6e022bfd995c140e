"""Configuration module for uiflow.

Usage:
    from uiflow.config import load_environment

    settings = load_environment("local")
    print(settings.base_url)

Note:
    There is no module-level settings instance. Fixtures build one per
    session and pass it to page objects, so a test can override any value.
"""

from uiflow.config.settings import (
    ENVIRONMENT_PROFILES,
    EnvironmentProfile,
    EnvironmentSettings,
    NavigationTimeouts,
    load_environment,
)

__all__ = [
    "ENVIRONMENT_PROFILES",
    "EnvironmentProfile",
    "EnvironmentSettings",
    "NavigationTimeouts",
    "load_environment",
]
