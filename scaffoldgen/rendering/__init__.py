"""
Rendering package: engine selection, render dispatch and artifact output.

Engines are independent classes satisfying the :class:`Renderer` protocol;
they are selected by identifier through :func:`create_renderer`.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

from ..core.errors import ConfigurationError
from .handlebars import HandlebarsRenderer
from .jinja import JinjaRenderer


class Renderer(Protocol):
    """Capability to render a template string against a data object."""

    async def render_string(self, template: str, data: Any) -> str: ...


ENGINES: dict[str, Callable[[], Renderer]] = {
    "jinja": JinjaRenderer,
    "handlebars": HandlebarsRenderer,
}


def create_renderer(engine: str) -> Renderer:
    """Instantiate the renderer registered under ``engine``.

    Raises:
        ConfigurationError: If no engine is registered under that identifier
    """
    factory = ENGINES.get(engine)
    if factory is None:
        raise ConfigurationError(
            f"Invalid render engine provided: {engine!r} "
            f"(expected one of: {', '.join(sorted(ENGINES))})"
        )
    return factory()


__all__ = [
    "ENGINES",
    "HandlebarsRenderer",
    "JinjaRenderer",
    "Renderer",
    "create_renderer",
]
