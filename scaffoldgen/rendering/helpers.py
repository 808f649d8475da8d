"""Helper functions shared by the template engines.

Every helper is a pure function of its arguments. Jinja registers them as
filters (``{{ name | snake_case }}``); Handlebars registers them as helpers
(``{{snake_case name}}``).
"""

from __future__ import annotations

import json
import re
from typing import Any, Callable

_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z0-9])|[A-Z]?[a-z0-9]+|[A-Z]+|\d+")


def split_words(value: Any) -> list[str]:
    """Split a value into lowercase words across case and separator boundaries.

    Example:
        >>> split_words("HTTPServer_config-value")
        ['http', 'server', 'config', 'value']
    """
    return [word.lower() for word in _WORD_PATTERN.findall(str(value))]


def camel_case(value: Any) -> str:
    words = split_words(value)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def pascal_case(value: Any) -> str:
    return "".join(word.capitalize() for word in split_words(value))


def snake_case(value: Any) -> str:
    return "_".join(split_words(value))


def kebab_case(value: Any) -> str:
    return "-".join(split_words(value))


def constant_case(value: Any) -> str:
    return snake_case(value).upper()


def title_case(value: Any) -> str:
    return " ".join(word.capitalize() for word in split_words(value))


def upper(value: Any) -> str:
    return str(value).upper()


def lower(value: Any) -> str:
    return str(value).lower()


TEXT_HELPERS: dict[str, Callable[[Any], str]] = {
    "camel_case": camel_case,
    "pascal_case": pascal_case,
    "snake_case": snake_case,
    "kebab_case": kebab_case,
    "constant_case": constant_case,
    "title_case": title_case,
    "upper": upper,
    "lower": lower,
}


def eq(left: Any, right: Any) -> bool:
    return left == right


def ne(left: Any, right: Any) -> bool:
    return left != right


def to_json(value: Any, indent: int | None = None) -> str:
    return json.dumps(value, indent=indent, default=str)


def default(value: Any, fallback: Any) -> Any:
    return fallback if value in (None, "") else value


UTIL_HELPERS: dict[str, Callable[..., Any]] = {
    "eq": eq,
    "ne": ne,
    "json": to_json,
    "default": default,
}


__all__ = ["TEXT_HELPERS", "UTIL_HELPERS", "split_words"]
