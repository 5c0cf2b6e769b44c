"""Fluent assertions with structural field comparison and negation-aware checks."""

from fluentcheck.check import Check, CheckLink, FluentCheck, check, check_that
from fluentcheck.checker import Checker
from fluentcheck.config import FluentCheckConfig, load_config
from fluentcheck.messages import FluentMessage, build_message
from fluentcheck.outcome import CheckFailure, Failure, Outcome, Success

__all__ = [
    "Check",
    "CheckFailure",
    "CheckLink",
    "Checker",
    "Failure",
    "FluentCheck",
    "FluentCheckConfig",
    "FluentMessage",
    "Outcome",
    "Success",
    "build_message",
    "check",
    "check_that",
    "load_config",
]
