"""
Record files - read and write lists of theme records.

Files hold a list of plain records. `.json` files are read as JSON;
`.yaml` and `.yml` files are read as YAML.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

YAML_SUFFIXES = (".yaml", ".yml")


def load_records(path: Path) -> list[dict[str, Any]]:
    """
    Load a list of records from a file.

    A missing file is an empty collection.

    Args:
        path: Record file path

    Returns:
        List of plain records
    """
    if not path.exists():
        return []

    with open(path) as f:
        if path.suffix in YAML_SUFFIXES:
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of records in {path}")
    return data


def save_records(path: Path, records: list[dict[str, Any]]) -> Path:
    """
    Write a list of records to a file.

    Args:
        path: Record file path
        records: Plain records to write

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        if path.suffix in YAML_SUFFIXES:
            yaml.safe_dump(records, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(records, f, indent=2)
            f.write("\n")

    return path
