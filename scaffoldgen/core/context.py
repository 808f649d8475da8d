"""Generation context and its builder."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

from .errors import InvalidArgument
from .merge import deep_merge
from .models import RenderedArtifact, TemplateEntry

logger = logging.getLogger(__name__)

_RESERVED_KEYS = ("templates", "data", "rendered")

Patch = Union[Mapping[str, Any], Callable[["Context"], Mapping[str, Any]]]


def coerce_template(key: str, value: Any) -> TemplateEntry:
    """Build a template entry from a model, a field mapping or bare content."""
    if isinstance(value, TemplateEntry):
        return value
    if isinstance(value, str):
        return TemplateEntry(logical_path=key, source_path=Path(key), content=value)
    if isinstance(value, Mapping):
        fields = {"logical_path": key, "source_path": Path(key), **value}
        return TemplateEntry.model_validate(fields)
    raise InvalidArgument(
        f"Template {key!r} must be a TemplateEntry, mapping or string, "
        f"got {type(value).__name__}"
    )


class Context:
    """Accumulator for one generation run.

    Holds the template mapping, the caller data and the ordered list of
    rendered artifacts. All updates go through :meth:`merge` (templates,
    data, extras) or :meth:`append_rendered` (artifacts); the public
    attributes are read-only views.
    """

    def __init__(self) -> None:
        self._templates: dict[str, TemplateEntry] = {}
        self._data: Any = None
        self._rendered: list[RenderedArtifact] = []
        self._extras: dict[str, Any] = {}

    @property
    def templates(self) -> Mapping[str, TemplateEntry]:
        return MappingProxyType(self._templates)

    @property
    def data(self) -> Any:
        return self._data

    @property
    def rendered(self) -> tuple[RenderedArtifact, ...]:
        return tuple(self._rendered)

    @property
    def extras(self) -> Mapping[str, Any]:
        return MappingProxyType(self._extras)

    def merge(self, patch: Patch) -> Context:
        """Deep-merge a patch (or the patch returned by a callable) into the context.

        Args:
            patch: Mapping with any of ``templates``, ``data`` or extra keys,
                or a callable receiving this context and returning one

        Returns:
            This context, for chaining
        """
        if callable(patch):
            patch = patch(self)
        if not isinstance(patch, Mapping):
            raise InvalidArgument(
                f"Context patch must be a mapping, got {type(patch).__name__}"
            )
        if "rendered" in patch:
            raise InvalidArgument(
                "Rendered artifacts cannot be merged; use the render stage instead"
            )

        if "templates" in patch:
            incoming = patch["templates"]
            if not isinstance(incoming, Mapping):
                raise InvalidArgument(
                    f"'templates' must be a mapping, got {type(incoming).__name__}"
                )
            for key, value in incoming.items():
                self._templates[key] = coerce_template(key, value)

        if "data" in patch:
            incoming = patch["data"]
            if isinstance(self._data, Mapping) and isinstance(incoming, Mapping):
                self._data = deep_merge(self._data, incoming)
            else:
                self._data = incoming

        extras = {k: v for k, v in patch.items() if k not in _RESERVED_KEYS}
        if extras:
            self._extras = deep_merge(self._extras, extras)

        logger.debug(
            f"Merged context patch with keys: {sorted(map(str, patch.keys()))}"
        )
        return self

    def append_rendered(self, artifacts: Iterable[RenderedArtifact]) -> None:
        """Append artifacts produced by the render stage."""
        self._rendered.extend(artifacts)


__all__ = ["Context", "Patch", "coerce_template"]
