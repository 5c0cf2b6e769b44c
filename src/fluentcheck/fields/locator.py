"""Find the counterpart of a field on another object."""

from __future__ import annotations

import logging

from fluentcheck.fields.descriptor import FieldInfo, StructuralDescriptor
from fluentcheck.fields.normalizer import DEFAULT_NORMALIZER, FieldNameNormalizer

logger = logging.getLogger(__name__)


def locate(
    descriptor: StructuralDescriptor,
    name: str,
    normalizer: FieldNameNormalizer = DEFAULT_NORMALIZER,
) -> FieldInfo | None:
    """Return the field of ``descriptor`` that matches ``name``, or None.

    Levels are searched most-derived first. At each level an exact match
    on the raw name wins; failing that, fields are matched on their
    normalized source name so that e.g. ``<Name>k__BackingField`` on one
    side finds ``<Name>i__Field`` or ``Name`` on the other.
    """
    wanted = normalizer.source_name(name)
    for level in descriptor.levels:
        for field in level:
            if field.name == name:
                return field
        for field in level:
            if normalizer.source_name(field.name) == wanted:
                logger.debug(
                    f"Matched field '{name}' to '{field.name}' on {field.owner.__name__} by source name"
                )
                return field
    return None
