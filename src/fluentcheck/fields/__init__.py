"""Structural field comparison engine."""

from fluentcheck.fields.comparator import (
    FieldDescriptor,
    MismatchKind,
    MismatchReport,
    compare_fields,
)
from fluentcheck.fields.descriptor import FieldInfo, StructuralDescriptor, describe
from fluentcheck.fields.locator import locate
from fluentcheck.fields.normalizer import (
    DEFAULT_NORMALIZER,
    DEFAULT_RULES,
    FieldKind,
    FieldNameNormalizer,
    NameRule,
)

__all__ = [
    "DEFAULT_NORMALIZER",
    "DEFAULT_RULES",
    "FieldDescriptor",
    "FieldInfo",
    "FieldKind",
    "FieldNameNormalizer",
    "MismatchKind",
    "MismatchReport",
    "NameRule",
    "StructuralDescriptor",
    "compare_fields",
    "describe",
    "locate",
]
