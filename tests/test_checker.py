"""Tests for the negation-aware check executor."""

import pytest

from fluentcheck.check import CheckLink, FluentCheck
from fluentcheck.checker import Checker, PendingCheck, resolve
from fluentcheck.outcome import SUCCESS, CheckFailure, Failure, Success


def _succeeds():
    return SUCCESS


def _fails():
    return Failure("action failed")


def _checker(negated: bool) -> Checker:
    fluent_check = FluentCheck(42)
    if negated:
        fluent_check.negate()
    return Checker(fluent_check)


# --- resolve ---


@pytest.mark.parametrize(
    "outcome, negated, expected",
    [
        (SUCCESS, False, SUCCESS),
        (SUCCESS, True, Failure("stored negated message")),
        (Failure("action failed"), False, Failure("action failed")),
        (Failure("action failed"), True, SUCCESS),
    ],
)
def test_resolve_four_cases(outcome, negated, expected):
    assert resolve(outcome, negated, "stored negated message") == expected


# --- execute_check ---


def test_success_not_negated_returns_link():
    link = _checker(negated=False).execute_check(_succeeds, "negated")
    assert isinstance(link, CheckLink)
    assert link.check.value == 42


def test_success_negated_raises_stored_message():
    with pytest.raises(CheckFailure) as exc_info:
        _checker(negated=True).execute_check(_succeeds, "stored negated message")
    assert exc_info.value.message == "stored negated message"
    assert str(exc_info.value) == "stored negated message"


def test_failure_not_negated_propagates_message():
    with pytest.raises(CheckFailure) as exc_info:
        _checker(negated=False).execute_check(_fails, "negated")
    assert exc_info.value.message == "action failed"


def test_failure_negated_is_absorbed():
    link = _checker(negated=True).execute_check(_fails, "negated")
    assert isinstance(link, CheckLink)


def test_check_failure_is_assertion_error():
    with pytest.raises(AssertionError):
        _checker(negated=False).execute_not_chainable_check(_fails, "negated")


def test_not_chainable_check_returns_none():
    assert _checker(negated=False).execute_not_chainable_check(_succeeds, "negated") is None


def test_action_runs_once():
    calls = []

    def action():
        calls.append(1)
        return SUCCESS

    _checker(negated=False).execute_check(action, "negated")
    assert calls == [1]


# --- PendingCheck ---


def test_pending_check_cannot_run_twice():
    pending = PendingCheck(_succeeds, "negated")
    assert isinstance(pending.run(negated=False), Success)
    assert pending.executed
    with pytest.raises(RuntimeError, match="already been executed"):
        pending.run(negated=False)


# --- messages ---


def test_build_message_carries_label_and_prefix():
    fluent_check = FluentCheck(1, custom_message="Custom", label="answer")
    message = Checker(fluent_check).build_message("The {checked} is odd.")
    assert str(message) == "Custom\nThe checked [answer] is odd.\nThe checked [answer]:\n\t[1]"


def test_build_short_message_has_no_value():
    message = Checker(FluentCheck(1)).build_short_message("The {checked} is odd.")
    assert str(message) == "The checked value is odd."
