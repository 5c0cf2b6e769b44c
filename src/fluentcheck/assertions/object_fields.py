"""Field-by-field comparison checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluentcheck.fields.comparator import MismatchKind, MismatchReport, compare_fields
from fluentcheck.messages import escape_braces
from fluentcheck.outcome import CheckFailure

if TYPE_CHECKING:
    from fluentcheck.check import CheckLink
    from fluentcheck.checker import Checker


def has_fields_with_same_values(checker: Checker, expected: Any) -> CheckLink:
    """Check that every field of ``expected`` has an equal counterpart on the value.

    Fields are matched by name, bridging synthesized names (backing
    fields, anonymous-type fields, private-name mangling). Fields whose
    value has no ``__eq__`` of its own but has fields are compared
    recursively. A value without fields, such as an int, is compared
    with ``==``.

    Raises:
        CheckFailure: A field is missing or differs.
    """
    return _check_field_equality(checker, expected, checker.negated)


def has_not_fields_with_same_values(checker: Checker, expected: Any) -> CheckLink:
    """Check that no field of ``expected`` has an equal counterpart on the value.

    Fields missing from the value are not counted either way.

    Raises:
        CheckFailure: A field has the same value on both sides.
    """
    return _check_field_equality(checker, expected, not checker.negated)


def _check_field_equality(checker: Checker, expected: Any, negated: bool) -> CheckLink:
    checker.fluent_check.mark_executed()
    report = compare_fields(checker.value, expected, negated, normalizer=checker.normalizer)
    if report is not None:
        raise CheckFailure(render_mismatch(checker, report))
    return checker.build_chaining_object()


def render_mismatch(checker: Checker, report: MismatchReport) -> str:
    if report.expected_field.is_root:
        subject = "The {checked}"
    else:
        subject = f"The {{checked}}'s {escape_braces(report.label)}"

    if report.kind == MismatchKind.ABSENT:
        message = (
            checker.build_message(f"{subject} is absent from the {{expected}}.")
            .on(report.actual_holder)
            .and_.expected(report.expected_holder)
        )
        return str(message)

    actual_value = report.actual_field.value if report.actual_field else None
    expected_value = report.expected_field.value

    if report.negated:
        message = (
            checker.build_message(
                f"{subject} has the same value in the comparand, whereas it must not."
            )
            .on(actual_value)
            .and_.expected(expected_value)
            .comparison("different from")
        )
        return str(message)

    message = (
        checker.build_message(f"{subject} does not have the expected value.")
        .on(actual_value)
        .and_.expected(expected_value)
    )
    return str(message)
