"""Jinja2 rendering engine."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, StrictUndefined

from .helpers import TEXT_HELPERS


class JinjaRenderer:
    """Render template strings with Jinja2.

    Mapping data is exposed as top-level variables; any other value is
    exposed as ``this``.
    """

    name = "jinja"

    def __init__(self) -> None:
        self._env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
            enable_async=True,
        )
        self._env.filters.update(TEXT_HELPERS)

    async def render_string(self, template: str, data: Any) -> str:
        if isinstance(data, Mapping):
            # template names can only address string keys
            context = {k: v for k, v in data.items() if isinstance(k, str)}
        else:
            context = {"this": data}
        compiled = self._env.from_string(template)
        return await compiled.render_async(context)
