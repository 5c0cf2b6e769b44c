"""Checks built on the negation-aware executor and the field comparator."""

from fluentcheck.assertions.comparison import is_after, is_before
from fluentcheck.assertions.equality import is_equal_to
from fluentcheck.assertions.object_fields import (
    has_fields_with_same_values,
    has_not_fields_with_same_values,
    render_mismatch,
)

__all__ = [
    "has_fields_with_same_values",
    "has_not_fields_with_same_values",
    "is_after",
    "is_before",
    "is_equal_to",
    "render_mismatch",
]
