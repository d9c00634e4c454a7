"""Submission transport seam used by the form controllers."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from formdesk.config import SUBMIT_DELAY_SECONDS

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """Raised by a transport when a submission could not be delivered."""


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    error: str | None = None

    @classmethod
    def success(cls) -> SubmissionResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> SubmissionResult:
        return cls(ok=False, error=error)


class Submitter(Protocol):
    async def submit(self, snapshot: dict[str, Any]) -> SubmissionResult: ...


class DelayedSubmitter:
    """Mock transport: waits a fixed delay, then always succeeds."""

    def __init__(self, delay_seconds: float = SUBMIT_DELAY_SECONDS) -> None:
        self.delay_seconds = delay_seconds

    async def submit(self, snapshot: dict[str, Any]) -> SubmissionResult:
        logger.debug("mock submit fields=%s delay=%.2fs", sorted(snapshot), self.delay_seconds)
        await asyncio.sleep(self.delay_seconds)
        return SubmissionResult.success()
