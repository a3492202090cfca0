# budget_tracker/config.py
from __future__ import annotations

from pathlib import Path
from typing import Dict
import yaml

DEFAULT_CONFIG: Dict[str, object] = {
    "default_budget": 1000.0,
    "csv_file": "budget_data.csv",
    "manual_entries_file": None,
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Fill in default values for keys missing from the current config."""
    merged = dict(defaults)
    merged.update(current)
    return merged


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    """Read a YAML config file, falling back to defaults when it is absent."""
    if path is None or not Path(path).exists():
        return _merge_defaults({}, DEFAULT_CONFIG)
    with Path(path).open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level.")
    return _merge_defaults(data, DEFAULT_CONFIG)
