"""CLI argument parsers and validators."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import typer
import yaml

_INT_PATTERN = re.compile(r"^-?\d+$")
_FLOAT_PATTERN = re.compile(r"^-?\d+(?:\.\d+)?$")


def coerce_value(value: str) -> bool | int | float | str:
    """Coerce a string value to its appropriate type.

    Args:
        value: String value to coerce

    Returns:
        Coerced value (bool, int, float, or str)
    """
    value_lower = value.lower()

    if value_lower in ("true", "false"):
        return value_lower == "true"

    if _INT_PATTERN.match(value):
        return int(value)

    if _FLOAT_PATTERN.match(value):
        return float(value)

    return value


def parse_assignment(value: str) -> tuple[str, bool | int | float | str]:
    """Parse a data override in format KEY=VALUE."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, raw = value.split("=", 1)
    key = key.strip()
    if not key or any(not part for part in key.split(".")):
        raise typer.BadParameter(f"Invalid key in assignment: {value!r}")
    return key, coerce_value(raw)


def assign_dotted(target: dict[str, Any], key: str, value: Any) -> None:
    """Set ``value`` at a dotted key, creating nested mappings as needed."""
    parts = key.split(".")
    node = target
    for part in parts[:-1]:
        next_node = node.get(part)
        if not isinstance(next_node, dict):
            next_node = {}
            node[part] = next_node
        node = next_node
    node[parts[-1]] = value


def parse_file_mode(value: str) -> int:
    """Parse octal file mode string."""
    try:
        return int(value, 8)
    except ValueError as e:
        raise typer.BadParameter(f"Invalid octal mode: {value!r}") from e


def load_data_file(path: Path) -> Any:
    """Load render data from a JSON or YAML file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise typer.BadParameter(f"Cannot read data file {path}: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise typer.BadParameter(f"Invalid data file {path}: {e}") from e
