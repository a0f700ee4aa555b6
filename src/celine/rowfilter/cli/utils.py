# rowfilter/cli/utils.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import typer
import yaml


def load_rows_file(path: Path) -> Any:
    """Load rows from a JSON or YAML file, or JSON on stdin for ``-``."""
    if str(path) == "-":
        return json.load(typer.get_text_stream("stdin"))
    if not path.exists():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    with path.open("r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(f)
        return json.load(f)


def parse_where(conditions: List[str]) -> Dict[str, Any]:
    """Turn ``name=value`` pairs into reference attributes.

    A name given more than once collects its values into a list.
    """
    attributes: Dict[str, Any] = {}
    for cond in conditions:
        name, sep, value = cond.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid condition '{cond}', expected name=value")
        if name not in attributes:
            attributes[name] = value
        elif isinstance(attributes[name], list):
            attributes[name].append(value)
        else:
            attributes[name] = [attributes[name], value]
    return attributes
