"""Exception hierarchy for the generation pipeline."""

from __future__ import annotations

from pathlib import Path


class ScaffoldgenError(Exception):
    """Base class for all pipeline errors."""


class InvalidArgument(ScaffoldgenError, ValueError):
    """Raised when required input is missing or malformed."""


class ConfigurationError(ScaffoldgenError):
    """Raised when the pipeline is constructed with an unusable configuration."""


class RenderFailure(ScaffoldgenError):
    """Raised when a rendering engine fails on a template."""

    def __init__(self, template: str, source_path: Path | None, cause: BaseException):
        self.template = template
        self.source_path = source_path
        location = f" ({source_path})" if source_path else ""
        super().__init__(f"Failed to render template {template!r}{location}: {cause}")


class WriteFailure(ScaffoldgenError, OSError):
    """Raised when rendered content cannot be written to its output path."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        super().__init__(f"Failed to write {path}: {cause}")
