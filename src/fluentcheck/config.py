from __future__ import annotations

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from fluentcheck.fields.normalizer import (
    DEFAULT_RULES,
    FieldKind,
    FieldNameNormalizer,
    NameRule,
)


class NameRuleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    pattern: str
    kind: FieldKind

    @field_validator("pattern")
    @classmethod
    def pattern_must_capture_name(cls, v: str) -> str:
        try:
            compiled = re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid field name pattern '{v}': {e}") from e
        if compiled.groups < 1:
            raise ValueError(f"Field name pattern '{v}' must have a capturing group")
        return v

    def to_rule(self) -> NameRule:
        return NameRule.compile(self.pattern, self.kind)


class FieldNamesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    replace_defaults: bool = False
    rules: tuple[NameRuleConfig, ...] = ()

    @field_validator("rules", mode="before")
    @classmethod
    def normalize_rules(cls, v: list) -> list:
        result = []
        for item in v or []:
            if isinstance(item, str):
                result.append(NameRuleConfig(pattern=item, kind=FieldKind.NORMAL))
            else:
                result.append(item)
        return result


class MessagesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    max_value_length: int | None = None

    @field_validator("max_value_length")
    @classmethod
    def length_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError("max_value_length must be at least 1")
        return v


class FluentCheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    field_names: FieldNamesConfig = FieldNamesConfig()
    messages: MessagesConfig = MessagesConfig()

    def build_normalizer(self) -> FieldNameNormalizer:
        """Normalizer with the default rules followed by the configured ones."""
        custom = [rule.to_rule() for rule in self.field_names.rules]
        if self.field_names.replace_defaults:
            return FieldNameNormalizer(custom)
        return FieldNameNormalizer([*DEFAULT_RULES, *custom])


def load_config(path: Path) -> FluentCheckConfig:
    """Load and validate a fluentcheck config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    return FluentCheckConfig(**(raw or {}))
