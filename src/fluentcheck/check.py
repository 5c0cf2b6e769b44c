"""Entry point for fluent check expressions.

    from fluentcheck import check

    check.that(42).as_("answer").is_after(100)
    check.that(person).not_.has_fields_with_same_values(other)
    check.with_custom_message("We should get 2.").that(1).is_equal_to(2)
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any

from fluentcheck.assertions import comparison, equality, object_fields
from fluentcheck.checker import Checker
from fluentcheck.config import FluentCheckConfig
from fluentcheck.fields.normalizer import DEFAULT_NORMALIZER, FieldNameNormalizer

_DEFAULT_CONFIG = FluentCheckConfig()


class FluentCheck:
    """A check expression on one value.

    Not shareable: the negation flag is set in place by ``not_`` and is
    only valid before the first check runs.
    """

    def __init__(
        self,
        value: Any,
        *,
        custom_message: str | None = None,
        label: str | None = None,
        config: FluentCheckConfig = _DEFAULT_CONFIG,
        normalizer: FieldNameNormalizer = DEFAULT_NORMALIZER,
    ):
        self.value = value
        self.custom_message = custom_message
        self.label = label
        self.config = config
        self.normalizer = normalizer
        self._negated = False
        self._executed = False

    @property
    def negated(self) -> bool:
        return self._negated

    def negate(self) -> FluentCheck:
        if self._negated:
            raise RuntimeError("Check expression is already negated")
        if self._executed:
            raise RuntimeError("Cannot negate a check expression after a check has run")
        self._negated = True
        return self

    @property
    def not_(self) -> FluentCheck:
        return self.negate()

    def as_(self, label: str) -> FluentCheck:
        """Name the checked value in failure messages."""
        self.label = label
        return self

    def mark_executed(self) -> None:
        self._executed = True

    def fork(self) -> FluentCheck:
        """A fresh, non-negated expression on the same value."""
        return FluentCheck(
            self.value,
            custom_message=self.custom_message,
            label=self.label,
            config=self.config,
            normalizer=self.normalizer,
        )

    def _checker(self) -> Checker:
        return Checker(self)

    # --- equality ---

    def is_equal_to(self, expected: Any) -> CheckLink:
        return equality.is_equal_to(self._checker(), expected)

    # --- ordering ---

    def is_after(self, reference: Any) -> CheckLink:
        return comparison.is_after(self._checker(), reference)

    def is_before(self, reference: Any) -> CheckLink:
        return comparison.is_before(self._checker(), reference)

    # --- fields ---

    def has_fields_with_same_values(self, expected: Any) -> CheckLink:
        return object_fields.has_fields_with_same_values(self._checker(), expected)

    def has_not_fields_with_same_values(self, expected: Any) -> CheckLink:
        return object_fields.has_not_fields_with_same_values(self._checker(), expected)

    def has_fields_equal_to_those(self, expected: Any) -> CheckLink:
        warnings.warn(
            "has_fields_equal_to_those is deprecated, use has_fields_with_same_values",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.has_fields_with_same_values(expected)

    def has_fields_not_equal_to_those(self, expected: Any) -> CheckLink:
        warnings.warn(
            "has_fields_not_equal_to_those is deprecated, use has_not_fields_with_same_values",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.has_not_fields_with_same_values(expected)

    def __repr__(self) -> str:
        return f"FluentCheck({self.value!r}, negated={self._negated})"


@dataclass(frozen=True)
class CheckLink:
    """Returned by a successful check so further checks can follow."""

    check: FluentCheck

    @property
    def and_(self) -> FluentCheck:
        return self.check.fork()


class Check:
    """Factory for check expressions.

    Immutable: ``with_custom_message`` and ``with_config`` return new
    factories.
    """

    def __init__(
        self,
        custom_message: str | None = None,
        config: FluentCheckConfig = _DEFAULT_CONFIG,
    ):
        self.custom_message = custom_message
        self.config = config
        if config is _DEFAULT_CONFIG:
            self.normalizer = DEFAULT_NORMALIZER
        else:
            self.normalizer = config.build_normalizer()

    def that(self, value: Any) -> FluentCheck:
        return FluentCheck(
            value,
            custom_message=self.custom_message,
            config=self.config,
            normalizer=self.normalizer,
        )

    def with_custom_message(self, message: str) -> Check:
        return Check(custom_message=message, config=self.config)

    def with_config(self, config: FluentCheckConfig) -> Check:
        return Check(custom_message=self.custom_message, config=config)


check = Check()


def check_that(value: Any) -> FluentCheck:
    return check.that(value)
