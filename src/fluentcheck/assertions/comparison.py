"""Ordering checks (``is_after``/``is_before``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluentcheck.outcome import SUCCESS, Failure, Outcome

if TYPE_CHECKING:
    from fluentcheck.check import CheckLink
    from fluentcheck.checker import Checker


def is_after(checker: Checker, reference: Any) -> CheckLink:
    """Check that the value is strictly greater than ``reference``."""

    def action() -> Outcome:
        if checker.value > reference:
            return SUCCESS
        message = (
            checker.build_message("The {checked} is not after the reference value.")
            .and_.expected(reference)
            .comparison("after")
        )
        return Failure(str(message))

    negated_message = (
        checker.build_message("The {checked} is after the reference value whereas it must not.")
        .and_.expected(reference)
        .comparison("before")
    )
    return checker.execute_check(action, str(negated_message))


def is_before(checker: Checker, reference: Any) -> CheckLink:
    """Check that the value is strictly less than ``reference``."""

    def action() -> Outcome:
        if checker.value < reference:
            return SUCCESS
        message = (
            checker.build_message("The {checked} is not before the reference value.")
            .and_.expected(reference)
            .comparison("before")
        )
        return Failure(str(message))

    negated_message = (
        checker.build_message("The {checked} is before the reference value whereas it must not.")
        .and_.expected(reference)
        .comparison("after")
    )
    return checker.execute_check(action, str(negated_message))
