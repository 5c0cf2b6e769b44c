"""Value equality checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluentcheck.outcome import SUCCESS, Failure, Outcome

if TYPE_CHECKING:
    from fluentcheck.check import CheckLink
    from fluentcheck.checker import Checker


def is_equal_to(checker: Checker, expected: Any) -> CheckLink:
    """Check that the value equals ``expected`` (``==``)."""

    def action() -> Outcome:
        if checker.value == expected:
            return SUCCESS
        message = checker.build_message("The {checked} is different from the {expected} one.")
        return Failure(str(message.and_.expected(expected)))

    negated_message = (
        checker.build_message("The {checked} is equal to the {expected} one whereas it must not.")
        .and_.expected(expected)
        .comparison("different from")
    )
    return checker.execute_check(action, str(negated_message))
