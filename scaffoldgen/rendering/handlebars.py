"""Handlebars rendering engine backed by pybars3."""

from __future__ import annotations

from typing import Any, Callable

from pybars import Compiler

from .helpers import TEXT_HELPERS, UTIL_HELPERS


def _as_helper(fn: Callable[..., Any]) -> Callable[..., Any]:
    # pybars passes the current scope as the first positional argument.
    def helper(this: Any, *args: Any, **kwargs: Any) -> Any:
        return fn(*args, **kwargs)

    helper.__name__ = fn.__name__
    return helper


class HandlebarsRenderer:
    """Render template strings with Handlebars syntax."""

    name = "handlebars"

    def __init__(self) -> None:
        self._compiler = Compiler()
        self._helpers = {
            name: _as_helper(fn)
            for name, fn in {**TEXT_HELPERS, **UTIL_HELPERS}.items()
        }

    async def render_string(self, template: str, data: Any) -> str:
        compiled = self._compiler.compile(template)
        return str(compiled(data, helpers=self._helpers))
