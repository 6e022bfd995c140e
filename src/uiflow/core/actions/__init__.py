"""Resilient element and wait actions.

Usage:
    from uiflow.core.actions import ElementActions, WaitActions

    actions = ElementActions(page)
    waits = WaitActions(page)
"""

from uiflow.core.actions.element_actions import ElementActions
from uiflow.core.actions.options import (
    ByOption,
    ByValue,
    ByValues,
    SelectOption,
    SubmissionOutcome,
    WaitState,
)
from uiflow.core.actions.wait_actions import WaitActions

__all__ = [
    "ByOption",
    "ByValue",
    "ByValues",
    "ElementActions",
    "SelectOption",
    "SubmissionOutcome",
    "WaitActions",
    "WaitState",
]
