"""Generate JSON Schema for the fluentcheck YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from fluentcheck.config import FluentCheckConfig

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"


def generate_json_schema() -> dict:
    """Schema of ``fluentcheck.yaml``, for editor completion and validation."""
    schema = FluentCheckConfig.model_json_schema()
    return {"$schema": SCHEMA_DIALECT, **schema, "title": "fluentcheck config"}


def write_json_schema(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(generate_json_schema(), indent=2) + "\n")
