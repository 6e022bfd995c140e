"""Value types consumed and produced by the action layer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class WaitState(str, Enum):
    """Target element state for existence/visibility waits."""

    VISIBLE = "visible"
    HIDDEN = "hidden"
    ATTACHED = "attached"
    DETACHED = "detached"


class SubmissionOutcome(str, Enum):
    """How a button submission wait finished."""

    CONFIRMED = "confirmed"  # Loading state seen and completion observed
    DEGRADED = "degraded"  # State change not observed, fixed pause applied


# =============================================================================
# Select options (tagged union)
# =============================================================================


@dataclass(frozen=True)
class ByValue:
    """Select a single option by its value attribute."""

    value: str

    def as_kwargs(self) -> dict[str, Any]:
        return {"value": self.value}


@dataclass(frozen=True)
class ByValues:
    """Select several options of a multi-select by value."""

    values: Sequence[str]

    def __post_init__(self) -> None:
        # A bare string is a Sequence[str] too, and would select per character
        if isinstance(self.values, str):
            raise TypeError("ByValues needs a sequence of values, not a string; use ByValue")

    def as_kwargs(self) -> dict[str, Any]:
        return {"value": list(self.values)}


@dataclass(frozen=True)
class ByOption:
    """Select one option by value, label or index.

    Only one criterion is sent to Playwright, resolved in the order
    value > label > index. Index is used only when value and label are
    both absent.
    """

    value: str | None = None
    label: str | None = None
    index: int | None = None

    def __post_init__(self) -> None:
        if not self.value and not self.label and self.index is None:
            raise ValueError("ByOption needs a value, label or index")

    def as_kwargs(self) -> dict[str, Any]:
        if self.value:
            return {"value": self.value}
        if self.label:
            return {"label": self.label}
        return {"index": self.index}


SelectOption = Union[ByValue, ByValues, ByOption]
