"""Template source: discover template files under a root directory."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Callable, Iterator

from ..core.errors import InvalidArgument
from ..core.models import TemplateEntry

logger = logging.getLogger(__name__)

RESERVED_MARKER = "_"
TEMPLATE_EXTENSIONS = (".jinja2", ".jinja", ".j2", ".handlebars", ".hbs")

TemplateFilter = Callable[[Path], bool]


def strip_template_extension(relative: str) -> str:
    """Remove a trailing template-format extension from a relative path."""
    for ext in TEMPLATE_EXTENSIONS:
        if relative.endswith(ext):
            return relative[: -len(ext)]
    return relative


def walk_templates(root: Path) -> Iterator[Path]:
    """Yield template files under ``root`` in sorted, depth-first order.

    Files and directories whose names start with the reserved marker are
    skipped together with everything below them.
    Symlinks are never followed.
    """
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.name.startswith(RESERVED_MARKER):
            logger.debug(f"Skipping reserved entry: {entry}")
            continue
        if entry.is_symlink():
            logger.debug(f"Skipping symlink: {entry}")
            continue
        if entry.is_dir():
            yield from walk_templates(entry)
        elif entry.is_file():
            yield entry


async def load_templates(
    root: str | os.PathLike[str], *, filter: TemplateFilter | None = None
) -> Callable[[Any], dict[str, dict[str, TemplateEntry]]]:
    """Load every template under ``root``.

    Args:
        root: Templates directory
        filter: Optional predicate receiving each candidate path; return
            False to drop the file

    Returns:
        Context setter that merges the discovered templates

    Raises:
        InvalidArgument: If ``root`` is empty, not a path or not a directory
    """
    if not isinstance(root, (str, os.PathLike)) or not os.fspath(root):
        raise InvalidArgument(f"Invalid templates path provided: {root!r}")

    root_path = Path(root).resolve()
    if not root_path.is_dir():
        raise InvalidArgument(f"Templates directory not found: {root_path}")

    candidates = await asyncio.to_thread(lambda: list(walk_templates(root_path)))

    record: dict[str, TemplateEntry] = {}
    for template_path in candidates:
        if filter is not None and not filter(template_path):
            logger.debug(f"Filtered out template: {template_path}")
            continue

        relative = strip_template_extension(template_path.relative_to(root_path).as_posix())
        content = await asyncio.to_thread(template_path.read_text, encoding="utf-8")
        record[relative] = TemplateEntry(
            logical_path=relative, source_path=template_path, content=content
        )

    logger.info(f"Loaded {len(record)} template(s) from {root_path}")

    def setter(_context: Any) -> dict[str, dict[str, TemplateEntry]]:
        return {"templates": record}

    return setter


__all__ = ["RESERVED_MARKER", "TEMPLATE_EXTENSIONS", "load_templates"]
