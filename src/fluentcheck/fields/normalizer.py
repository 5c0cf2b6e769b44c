"""Map raw attribute names to the names they had in source code."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class FieldKind(str, Enum):
    NORMAL = "normal"
    AUTO_PROPERTY = "auto-property"
    ANONYMOUS = "anonymous"
    PRIVATE = "private"


@dataclass(frozen=True)
class NameRule:
    """One demangling rule: names matching ``pattern`` are of ``kind``.

    The source name is the named group ``name`` when the pattern has one,
    otherwise its first capturing group.
    """

    pattern: re.Pattern[str]
    kind: FieldKind

    @classmethod
    def compile(cls, pattern: str, kind: FieldKind | str) -> NameRule:
        compiled = re.compile(pattern)
        if compiled.groups < 1:
            raise ValueError(f"Pattern '{pattern}' must have a capturing group")
        return cls(pattern=compiled, kind=FieldKind(kind))

    def extract(self, raw_name: str) -> str | None:
        match = self.pattern.search(raw_name)
        if match is None:
            return None
        if "name" in self.pattern.groupindex:
            return match.group("name")
        return match.group(1)


DEFAULT_RULES: tuple[NameRule, ...] = (
    # <Name>k__BackingField
    NameRule.compile(r"^<(.*)>k_", FieldKind.AUTO_PROPERTY),
    # <Name>i__Field
    NameRule.compile(r"^<(.*)>i_", FieldKind.ANONYMOUS),
    # <Name>, as emitted by Mono for anonymous types
    NameRule.compile(r"^<(.*)>\Z", FieldKind.ANONYMOUS),
    # _Owner__name, Python private-name mangling. Owner is a CapWords class
    # name; dunders are never mangled
    NameRule.compile(
        r"^_[A-Z]\w*?__(?!\w*__\Z)(?P<name>[A-Za-z_]\w*)\Z", FieldKind.PRIVATE
    ),
)


class FieldNameNormalizer:
    """Ordered, immutable table of demangling rules. First match wins."""

    def __init__(self, rules: Iterable[NameRule] = DEFAULT_RULES):
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[NameRule, ...]:
        return self._rules

    def normalize(self, raw_name: str) -> tuple[str, FieldKind]:
        for rule in self._rules:
            source_name = rule.extract(raw_name)
            if source_name is not None:
                return source_name, rule.kind
        return raw_name, FieldKind.NORMAL

    def source_name(self, raw_name: str) -> str:
        return self.normalize(raw_name)[0]


DEFAULT_NORMALIZER = FieldNameNormalizer()
