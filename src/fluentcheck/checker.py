"""Negation-aware execution of check logic.

Assertions only describe their positive failure condition, as an action
returning an Outcome. The Checker runs that action, then applies the
``not_`` qualifier of the check expression:

    action succeeds, not negated  -> success
    action succeeds, negated      -> failure with the negated message
    action fails,    not negated  -> the action's failure
    action fails,    negated      -> success
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from fluentcheck.messages import FluentMessage
from fluentcheck.outcome import SUCCESS, CheckFailure, Failure, Outcome

if TYPE_CHECKING:
    from fluentcheck.check import CheckLink, FluentCheck
    from fluentcheck.fields.normalizer import FieldNameNormalizer

logger = logging.getLogger(__name__)

Action = Callable[[], Outcome]


def resolve(outcome: Outcome, negated: bool, negated_message: str) -> Outcome:
    """Apply the negation qualifier to the outcome of a positive check."""
    if isinstance(outcome, Failure):
        return SUCCESS if negated else outcome
    if negated:
        return Failure(negated_message)
    return SUCCESS


class PendingCheck:
    """A check action waiting to run. Runs once."""

    def __init__(self, action: Action, negated_message: str):
        self.action = action
        self.negated_message = negated_message
        self._executed = False

    @property
    def executed(self) -> bool:
        return self._executed

    def run(self, negated: bool) -> Outcome:
        if self._executed:
            raise RuntimeError("Pending check has already been executed")
        self._executed = True
        return resolve(self.action(), negated, self.negated_message)


class Checker:
    """Extension point handed to assertion implementations.

    Gives access to the checked value and the negation flag, builds
    messages carrying the expression's label and custom prefix, and runs
    positive check actions through ``execute_check``.
    """

    def __init__(self, fluent_check: FluentCheck):
        self.fluent_check = fluent_check

    @property
    def value(self) -> Any:
        return self.fluent_check.value

    @property
    def negated(self) -> bool:
        return self.fluent_check.negated

    @property
    def normalizer(self) -> FieldNameNormalizer:
        return self.fluent_check.normalizer

    def build_message(self, sentence: str) -> FluentMessage:
        """Message for ``sentence``, with the checked value already attached."""
        return self.build_short_message(sentence).on(self.value)

    def build_short_message(self, sentence: str) -> FluentMessage:
        """Message for ``sentence`` without any value attached."""
        context = self.fluent_check
        return FluentMessage(
            sentence,
            prefix=context.custom_message,
            label=context.label,
            max_value_length=context.config.messages.max_value_length,
        )

    def build_chaining_object(self) -> CheckLink:
        from fluentcheck.check import CheckLink

        return CheckLink(self.fluent_check)

    def execute_check(self, action: Action, negated_message: str) -> CheckLink:
        """Run ``action`` with negation applied and return a link for chaining.

        Raises:
            CheckFailure: The check failed.
        """
        self.execute_not_chainable_check(action, negated_message)
        return self.build_chaining_object()

    def execute_not_chainable_check(self, action: Action, negated_message: str) -> None:
        """Run ``action`` with negation applied.

        Raises:
            CheckFailure: The check failed.
        """
        pending = PendingCheck(action, negated_message)
        self.fluent_check.mark_executed()
        outcome = pending.run(self.negated)
        logger.debug(f"Check on {self.value!r} resolved to {type(outcome).__name__}, negated={self.negated}")
        if isinstance(outcome, Failure):
            raise CheckFailure(outcome.message)
