"""Generator façade: compose context, render dispatch and writing."""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Union

from .core.context import Context, Patch
from .core.models import GeneratorConfig, RenderedArtifact
from .rendering import Renderer, create_renderer
from .rendering.dispatch import RenderFn, render_context
from .rendering.io import ArtifactWriter

logger = logging.getLogger(__name__)

WriteFn = Callable[[RenderedArtifact], Awaitable[None]]
WriteCallback = Callable[[RenderedArtifact, WriteFn], Union[None, Awaitable[Any]]]


class Generator:
    """Fluent pipeline: ``add_context`` → ``render`` → ``write``.

    Example:
        >>> setter = await load_templates("templates")
        >>> gen = Generator(engine="handlebars", out="build")
        >>> gen.add_context(setter).add_context({"data": records})
        >>> await gen.render()
        >>> await gen.write()
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        *,
        engine: Optional[str] = None,
        out: Optional[Union[str, Path]] = None,
    ) -> None:
        config = config or GeneratorConfig()
        overrides: dict[str, Any] = {}
        if engine is not None:
            overrides["engine"] = engine
        if out is not None:
            overrides["out"] = Path(out)
        if overrides:
            config = config.model_copy(update=overrides)

        self.config = config
        self._renderer: Renderer = create_renderer(config.engine)
        self._writer = ArtifactWriter(file_mode=config.file_mode)
        self._context = Context()
        logger.debug(f"Generator ready: engine={config.engine}, out={config.out}")

    @property
    def context(self) -> Context:
        return self._context

    @property
    def out(self) -> Path:
        return self.config.out

    def add_context(self, patch: Patch) -> Generator:
        """Deep-merge a mapping, or a function of the current context, into the context."""
        self._context.merge(patch)
        return self

    async def render(self, render_fn: Optional[RenderFn] = None) -> Generator:
        """Render templates against the context data, appending to ``context.rendered``."""
        await render_context(self._context, self._renderer, self.out, render_fn)
        return self

    async def write(self, callback: Optional[WriteCallback] = None) -> Generator:
        """Persist every rendered artifact in order.

        Args:
            callback: Optional strategy receiving each artifact and the default
                write function; its return value is ignored
        """
        write_fn = self._writer.write_artifact
        for artifact in self._context.rendered:
            if callback is None:
                await write_fn(artifact)
                continue
            result = callback(artifact, write_fn)
            if inspect.isawaitable(result):
                await result
        return self
