"""Load drafts and form field mappings from JSON or YAML files."""

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..models import DRAFT_FIELDS, MilestoneDraft


def load_mapping(filepath: str) -> Any:
    """Read a JSON or YAML document.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the extension is not .json, .yaml or .yml, or the YAML is malformed
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    if path.suffix == '.json':
        with open(path, 'r') as f:
            return json.load(f)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'r') as f:
            try:
                return yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Malformed YAML in {filepath}: {exc}") from exc
    raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")


def _as_form_value(value: Any) -> str:
    # Form inputs only ever hold strings; YAML may hand back dates and numbers
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def load_drafts(filepath: str) -> List[MilestoneDraft]:
    """Load milestone drafts from a list of mappings.

    A top-level {"milestones": [...]} wrapper is also accepted. Missing
    keys become empty strings, exactly like an untouched form row.
    """
    data = load_mapping(filepath)
    if isinstance(data, dict):
        data = data.get("milestones", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of milestones in {filepath}")

    drafts = []
    for row in data:
        if not isinstance(row, dict):
            raise ValueError(f"Milestone entries must be mappings, got {type(row).__name__}")
        fields: Dict[str, str] = {name: _as_form_value(row.get(name)) for name in DRAFT_FIELDS}
        drafts.append(MilestoneDraft(**fields))
    return drafts
