"""Test run bookkeeping models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field

from uiflow.models.user import UserCredentials


class RunStatus(str, Enum):
    """Outcome of a single test."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


class RunResult(BaseModel):
    """Result record for one test, e.g. for a signup run report."""

    test_name: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    status: RunStatus
    user_credentials: UserCredentials | None = None
    error: str | None = None
    duration: float | None = Field(default=None, ge=0, description="Seconds")
