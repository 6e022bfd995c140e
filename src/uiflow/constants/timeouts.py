"""Timeout tiers shared by actions, waits and page objects.

All values are milliseconds, matching the Playwright API.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# Wait Tiers
# =============================================================================

SHORT_TIMEOUT_MS: Final[int] = 5_000  # Transient states (loading spinners)
MEDIUM_TIMEOUT_MS: Final[int] = 10_000  # Element actions
LONG_TIMEOUT_MS: Final[int] = 30_000  # Navigation
VERY_LONG_TIMEOUT_MS: Final[int] = 60_000  # Slow environments

# =============================================================================
# Fixed Pauses
# =============================================================================

CLICK_RETRY_ATTEMPTS: Final[int] = 3
CLICK_RETRY_DELAY_MS: Final[int] = 1_000
SUBMISSION_FALLBACK_PAUSE_MS: Final[int] = 1_000
DEFAULT_TYPING_DELAY_MS: Final[int] = 100
POLL_INTERVAL_MS: Final[int] = 100


@dataclass(frozen=True)
class TimeoutTiers:
    """Named timeout durations injected into actions and pages.

    Call sites pick a tier by intent ("navigation is slow") instead of
    repeating literals. Tests build smaller tiers to keep fallbacks fast.
    """

    short: int = SHORT_TIMEOUT_MS
    medium: int = MEDIUM_TIMEOUT_MS
    long: int = LONG_TIMEOUT_MS
    very_long: int = VERY_LONG_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not 0 < self.short <= self.medium <= self.long <= self.very_long:
            raise ValueError(
                "Timeout tiers must be positive and ordered short <= medium <= long <= very_long"
            )


DEFAULT_TIMEOUTS: Final[TimeoutTiers] = TimeoutTiers()


def resolve_timeout(timeout: float | None, default: float) -> float:
    """Return ``timeout`` unless it is None.

    An explicit 0 is kept: Playwright treats it as "no timeout".
    """
    return default if timeout is None else timeout
