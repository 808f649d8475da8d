"""File I/O operations for writing rendered artifacts."""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from ..core.errors import WriteFailure
from ..core.models import RenderedArtifact

logger = logging.getLogger(__name__)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    The parent directory must already exist.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


@dataclass
class ArtifactWriter:
    """Default write strategy for rendered artifacts."""

    file_mode: int = 0o644

    async def write_artifact(self, artifact: RenderedArtifact) -> None:
        """Persist one artifact, creating its parent directories first.

        A failure to create the directory chain is logged and the write is
        still attempted; a failure to write the content raises. A missing
        directory therefore usually surfaces as the WriteFailure that follows.

        Raises:
            WriteFailure: If the content cannot be written
        """
        path = artifact.output_path
        try:
            await asyncio.to_thread(ensure_parent, path)
        except OSError as exc:
            logger.error(
                f"Failed to create output directory {path.parent} "
                f"(path={path}, error={exc}, content={artifact.content!r})"
            )

        try:
            await asyncio.to_thread(atomic_write_text, path, artifact.content, self.file_mode)
        except OSError as exc:
            raise WriteFailure(path, exc) from exc

        logger.info(f"Wrote {path}")


__all__ = ["ArtifactWriter", "atomic_write_text", "ensure_parent"]
