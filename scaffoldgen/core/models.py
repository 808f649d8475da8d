"""Domain models for templates, rendered artifacts and generator configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class TemplateEntry(BaseModel):
    """A single template discovered by the template source."""

    model_config = ConfigDict(frozen=True)

    logical_path: str = Field(..., description="Output path template, extension stripped")
    source_path: Path = Field(..., description="Original template file location")
    content: str = Field(..., description="Raw, unrendered template text")


class RenderedArtifact(BaseModel):
    """A rendered (path, content) pair ready to be written."""

    model_config = ConfigDict(frozen=True)

    output_path: Path = Field(..., description="Resolved output file path")
    content: str = Field(..., description="Rendered content")


class GeneratorConfig(BaseModel):
    """Configuration for one generation run."""

    engine: str = Field(default="jinja", description="Template engine identifier")
    out: Path = Field(default_factory=Path.cwd, description="Base output directory")
    file_mode: int = Field(default=0o644, description="File permissions (octal)")
