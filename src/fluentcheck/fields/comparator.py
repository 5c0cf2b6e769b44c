"""Recursive field-by-field comparison of two objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fluentcheck.fields.descriptor import describe, has_fields, implements_equality
from fluentcheck.fields.locator import locate
from fluentcheck.fields.normalizer import DEFAULT_NORMALIZER, FieldKind, FieldNameNormalizer

logger = logging.getLogger(__name__)


class MismatchKind(str, Enum):
    ABSENT = "absent"
    NULL_MISMATCH = "null-mismatch"
    VALUE_MISMATCH = "value-mismatch"


@dataclass(frozen=True)
class FieldDescriptor:
    """A field taking part in one comparison step."""

    raw_name: str
    source_name: str
    kind: FieldKind
    prefix: str = ""
    value: Any = None

    @property
    def path(self) -> str:
        return f"{self.prefix}{self.source_name}"

    @property
    def is_root(self) -> bool:
        """True when this stands for a compared object rather than one of its fields."""
        return not self.raw_name

    @property
    def label(self) -> str:
        if self.kind == FieldKind.AUTO_PROPERTY:
            return f"autoproperty '{self.path}' (field '{self.raw_name}')"
        if self.kind == FieldKind.PRIVATE:
            return f"private field '{self.path}' (field '{self.raw_name}')"
        return f"field '{self.path}'"


@dataclass(frozen=True)
class MismatchReport:
    """The first field found to break the comparison.

    Attributes:
        kind: What went wrong.
        expected_field: The field of the expected object.
        actual_field: Its counterpart on the actual object; None when absent.
        actual_holder: Object owning ``actual_field`` at this nesting level.
        expected_holder: Object owning ``expected_field`` at this nesting level.
        negated: Whether the comparison ran with inverted polarity.
    """

    kind: MismatchKind
    expected_field: FieldDescriptor
    actual_field: FieldDescriptor | None
    actual_holder: Any
    expected_holder: Any
    negated: bool

    @property
    def path(self) -> str:
        return self.expected_field.path

    @property
    def label(self) -> str:
        return self.expected_field.label


def compare_fields(
    actual: Any,
    expected: Any,
    negated: bool = False,
    prefix: str = "",
    normalizer: FieldNameNormalizer = DEFAULT_NORMALIZER,
) -> MismatchReport | None:
    """Compare every field of ``expected`` with its counterpart on ``actual``.

    With ``negated`` set, a field fails when its values are equal instead
    of when they differ, and fields missing from ``actual`` are skipped.
    Fields whose expected value has no ``__eq__`` of its own but has fields
    are compared recursively. An ``expected`` without fields, such as an
    int, a date or a dict, is compared as a whole with ``==``. Returns the
    first mismatch found, or None.
    """
    expected_fields = list(describe(expected).fields())
    if not expected_fields and implements_equality(expected):
        return _compare_whole(actual, expected, negated, prefix)

    actual_descriptor = describe(actual)

    for field in expected_fields:
        source_name, kind = normalizer.normalize(field.name)
        expected_value = field.value_of(expected)
        expected_field = FieldDescriptor(field.name, source_name, kind, prefix, expected_value)

        match = locate(actual_descriptor, field.name, normalizer)
        if match is None:
            if negated:
                logger.debug(f"Skipping field '{expected_field.path}' absent from actual")
                continue
            return _report(MismatchKind.ABSENT, expected_field, None, actual, expected, negated)

        actual_value = match.value_of(actual)
        actual_source, actual_kind = normalizer.normalize(match.name)
        actual_field = FieldDescriptor(match.name, actual_source, actual_kind, prefix, actual_value)

        if expected_value is None:
            if (actual_value is None) != negated:
                continue
            return _report(
                MismatchKind.NULL_MISMATCH, expected_field, actual_field, actual, expected, negated
            )

        if (
            actual_value is not None
            and not implements_equality(expected_value)
            and has_fields(expected_value)
        ):
            nested = compare_fields(
                actual_value,
                expected_value,
                negated,
                f"{expected_field.path}.",
                normalizer,
            )
            if nested is not None:
                return nested
            continue

        if bool(expected_value == actual_value) == negated:
            return _report(
                MismatchKind.VALUE_MISMATCH, expected_field, actual_field, actual, expected, negated
            )

    return None


def _compare_whole(
    actual: Any, expected: Any, negated: bool, prefix: str
) -> MismatchReport | None:
    if bool(expected == actual) != negated:
        return None
    expected_root = FieldDescriptor("", "", FieldKind.NORMAL, prefix, expected)
    actual_root = FieldDescriptor("", "", FieldKind.NORMAL, prefix, actual)
    return _report(
        MismatchKind.VALUE_MISMATCH, expected_root, actual_root, actual, expected, negated
    )


def _report(
    kind: MismatchKind,
    expected_field: FieldDescriptor,
    actual_field: FieldDescriptor | None,
    actual_holder: Any,
    expected_holder: Any,
    negated: bool,
) -> MismatchReport:
    logger.debug(f"Field comparison failed on '{expected_field.path}': {kind.value}, negated={negated}")
    return MismatchReport(kind, expected_field, actual_field, actual_holder, expected_holder, negated)
