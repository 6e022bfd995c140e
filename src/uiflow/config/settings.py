"""Environment settings using pydantic-settings."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Literal

import structlog
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uiflow.core.exceptions import ConfigurationError

log = structlog.get_logger()

EnvironmentName = Literal["local", "staging", "production"]

DEFAULT_ENVIRONMENT: Final[str] = "staging"
DEMO_APP_URL: Final[str] = "https://dummy-demo-njndex.web.app"


class NavigationTimeouts(BaseModel):
    """Per-environment Playwright timeouts (milliseconds)."""

    default: int = Field(ge=1, description="Default action timeout")
    navigation: int = Field(ge=1, description="Page navigation timeout")
    assertion: int = Field(ge=1, description="expect() assertion timeout")


@dataclass(frozen=True)
class EnvironmentProfile:
    """Defaults applied for one named environment."""

    base_url: str
    api_url: str
    timeout: NavigationTimeouts
    retries: int
    workers: int


ENVIRONMENT_PROFILES: Final[dict[str, EnvironmentProfile]] = {
    "local": EnvironmentProfile(
        base_url="http://localhost:3000",
        api_url="http://localhost:3000/api",
        timeout=NavigationTimeouts(default=30_000, navigation=30_000, assertion=5_000),
        retries=0,
        workers=4,
    ),
    "staging": EnvironmentProfile(
        base_url=DEMO_APP_URL,
        api_url=f"{DEMO_APP_URL}/api",
        timeout=NavigationTimeouts(default=40_000, navigation=40_000, assertion=10_000),
        retries=1,
        workers=2,
    ),
    "production": EnvironmentProfile(
        base_url=DEMO_APP_URL,
        api_url=f"{DEMO_APP_URL}/api",
        timeout=NavigationTimeouts(default=60_000, navigation=60_000, assertion=15_000),
        retries=2,
        workers=1,
    ),
}


class EnvironmentSettings(BaseSettings):
    """Suite configuration from environment variables.

    ``TEST_ENV`` selects a profile; any field left unset (``BASE_URL``,
    ``API_URL``, ``TIMEOUT__NAVIGATION``...) is filled from that profile.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Environment selection
    test_env: EnvironmentName = Field(
        default="staging", description="Target environment profile"
    )

    # Application under test
    base_url: str | None = Field(default=None, description="Application base URL")
    api_url: str | None = Field(default=None, description="Application API URL")

    # Playwright timeouts and runner hints
    timeout: NavigationTimeouts | None = Field(default=None)
    retries: int | None = Field(default=None, ge=0, description="Retries per failed test")
    workers: int | None = Field(default=None, ge=1, description="Parallel workers")

    # Browser
    headed: bool = Field(default=False, description="Run browsers headed")
    slow_mo: int = Field(default=0, ge=0, description="Delay between browser operations (ms)")
    screenshot_dir: Path = Field(
        default=Path("screenshots"), description="Directory for page screenshots"
    )

    # Logging
    debug: bool = Field(default=False, description="Pretty console logs")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    @field_validator("test_env", mode="before")
    @classmethod
    def fallback_unknown_env(cls, v: Any) -> Any:
        """Unknown environment names fall back to staging."""
        if isinstance(v, str) and v.lower() not in ENVIRONMENT_PROFILES:
            log.warning("unknown_test_env", test_env=v, fallback=DEFAULT_ENVIRONMENT)
            return DEFAULT_ENVIRONMENT
        return v.lower() if isinstance(v, str) else v

    @field_validator("base_url", "api_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Validate URL format and drop trailing slashes."""
        if v is None:
            return v
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @model_validator(mode="after")
    def apply_profile(self) -> "EnvironmentSettings":
        """Fill unset values from the selected environment profile."""
        profile = ENVIRONMENT_PROFILES[self.test_env]
        if self.base_url is None:
            self.base_url = profile.base_url
        if self.api_url is None:
            self.api_url = profile.api_url
        if self.timeout is None:
            self.timeout = profile.timeout.model_copy()
        if self.retries is None:
            self.retries = profile.retries
        if self.workers is None:
            self.workers = profile.workers
        return self


def load_environment(name: str | None = None, **overrides: Any) -> EnvironmentSettings:
    """Build settings for an environment.

    Args:
        name: Profile name (local, staging, production). Defaults to
            ``TEST_ENV`` or staging.
        **overrides: Explicit field values, taking precedence over
            environment variables and the profile.

    Returns:
        A new EnvironmentSettings instance. Nothing is cached.

    Raises:
        ConfigurationError: If a value fails validation.

    Example:
        settings = load_environment("local", base_url="http://127.0.0.1:8080")
    """
    if name is not None:
        overrides["test_env"] = name
    try:
        settings = EnvironmentSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid environment settings: {e}") from e
    log.debug(
        "environment_loaded",
        test_env=settings.test_env,
        base_url=settings.base_url,
    )
    return settings
