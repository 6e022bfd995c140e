"""Constants for the uiflow suite."""

from uiflow.constants.timeouts import DEFAULT_TIMEOUTS, TimeoutTiers

__all__ = ["DEFAULT_TIMEOUTS", "TimeoutTiers"]
