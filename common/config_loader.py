from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

from common.errors import ConfigError
from ingest.schema import DEFAULT_SCHEMA, RowSchema

def load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def load_schema(path: str | Path) -> RowSchema:
    """Build a RowSchema from the ``columns`` mapping of a YAML file.

    Columns missing from the file keep their default position.
    """
    try:
        raw = load_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"unable to load schema config {str(path)!r}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"schema config {str(path)!r} must be a mapping")
    columns = raw.get("columns") or {}
    if not isinstance(columns, dict):
        raise ConfigError(f"'columns' must be a mapping, got {type(columns).__name__}")

    known = set(RowSchema.field_names())
    unknown = sorted(set(columns) - known)
    if unknown:
        raise ConfigError(f"Unknown schema columns: {', '.join(unknown)}")

    positions = DEFAULT_SCHEMA.positions()
    for name, idx in columns.items():
        if isinstance(idx, bool) or not isinstance(idx, int) or idx < 0:
            raise ConfigError(f"Column {name!r} must be a non-negative integer, got {idx!r}")
        positions[name] = idx
    return RowSchema(**positions)
