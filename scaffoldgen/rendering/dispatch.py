"""Render dispatch: decide how many renders to perform and with which data."""

from __future__ import annotations

import enum
import inspect
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterable, Union

from pydantic import BaseModel

from ..core.context import Context
from ..core.errors import InvalidArgument, RenderFailure
from ..core.models import RenderedArtifact, TemplateEntry
from . import Renderer

logger = logging.getLogger(__name__)

RenderResult = Iterable[Union[RenderedArtifact, Mapping[str, Any]]]
RenderFn = Callable[[Context], Union[RenderResult, Awaitable[RenderResult]]]


class DispatchMode(enum.Enum):
    """Shape of ``Context.data`` as seen by the dispatcher."""

    ABSENT = "absent"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    SCALAR = "scalar"


def classify_data(data: Any) -> DispatchMode:
    """Classify caller data into a dispatch mode.

    ``None`` is absent; lists and tuples are sequences; mappings and
    pydantic models are structured objects; everything else is a scalar.
    """
    if data is None:
        return DispatchMode.ABSENT
    if isinstance(data, (list, tuple)):
        return DispatchMode.SEQUENCE
    if isinstance(data, (Mapping, BaseModel)):
        return DispatchMode.MAPPING
    return DispatchMode.SCALAR


def _as_render_data(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value


def _coerce_artifact(item: RenderedArtifact | Mapping[str, Any]) -> RenderedArtifact:
    if isinstance(item, RenderedArtifact):
        return item
    if isinstance(item, Mapping):
        fields = dict(item)
        if "output_path" not in fields and "path" in fields:
            fields["output_path"] = fields.pop("path")
        return RenderedArtifact.model_validate(fields)
    raise InvalidArgument(
        f"Custom render function must return artifacts or mappings, "
        f"got {type(item).__name__}"
    )


async def render_template(
    template: TemplateEntry, data: Any, renderer: Renderer, out: Path
) -> RenderedArtifact:
    """Render one template's content and output path against ``data``.

    Args:
        template: Template to render
        data: Data slice for this render
        renderer: Engine used for both content and path
        out: Base directory the rendered logical path is resolved against

    Returns:
        Artifact with an absolute output path
    """
    try:
        content = await renderer.render_string(template.content, data)
        save_path = await renderer.render_string(template.logical_path, data)
    except Exception as exc:
        raise RenderFailure(template.logical_path, template.source_path, exc) from exc

    output_path = Path(os.path.abspath(Path(out) / save_path))
    logger.debug(f"Rendered {template.logical_path} → {output_path}")
    return RenderedArtifact(output_path=output_path, content=content)


def _render_slices(mode: DispatchMode, data: Any) -> list[Any]:
    if mode is DispatchMode.ABSENT:
        return [{}]
    if mode is DispatchMode.SEQUENCE:
        return [_as_render_data(item) for item in data]
    if mode is DispatchMode.MAPPING:
        return [_as_render_data(data)]
    return []


async def render_context(
    context: Context,
    renderer: Renderer,
    out: Path,
    render_fn: RenderFn | None = None,
) -> list[RenderedArtifact]:
    """Run one render stage and append its artifacts to the context.

    Args:
        context: Generation context (templates, data, rendered)
        renderer: Engine used for built-in rendering
        out: Base output directory
        render_fn: Optional override producing artifacts from the context

    Returns:
        Artifacts produced by this call, in order
    """
    if render_fn is not None:
        result = render_fn(context)
        if inspect.isawaitable(result):
            result = await result
        artifacts = [_coerce_artifact(item) for item in result]
        logger.debug(f"Custom render function produced {len(artifacts)} artifact(s)")
        context.append_rendered(artifacts)
        return artifacts

    mode = classify_data(context.data)
    logger.debug(f"Dispatch mode: {mode.value}")

    if mode is DispatchMode.SCALAR:
        logger.warning(
            f"Context data is a {type(context.data).__name__}, not a mapping or "
            "sequence, and no render function was provided; nothing to render"
        )
        return []

    templates = list(context.templates.values())
    produced: list[RenderedArtifact] = []
    for data in _render_slices(mode, context.data):
        for template in templates:
            artifact = await render_template(template, data, renderer, out)
            # Appended as produced; a failure keeps earlier artifacts of this call.
            context.append_rendered((artifact,))
            produced.append(artifact)

    logger.info(f"Rendered {len(produced)} artifact(s) from {len(templates)} template(s)")
    return produced


__all__ = [
    "DispatchMode",
    "RenderFn",
    "classify_data",
    "render_context",
    "render_template",
]
