"""Check outcomes and the failure raised to callers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Success:
    """A check action found nothing wrong."""


@dataclass(frozen=True)
class Failure:
    """A check action found a problem.

    Attributes:
        message: Fully rendered failure text.
    """

    message: str


Outcome = Success | Failure

SUCCESS = Success()


class CheckFailure(AssertionError):
    """Raised when a check expression fails.

    Subclasses AssertionError so test runners report it as a failed
    assertion rather than an error.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
