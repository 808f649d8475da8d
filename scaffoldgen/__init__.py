"""Scaffoldgen - data-driven file scaffolding from a shared template set.

A Pydantic-based generation pipeline with pluggable template engines.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.errors import (
    ConfigurationError,
    InvalidArgument,
    RenderFailure,
    ScaffoldgenError,
    WriteFailure,
)
from .core.models import GeneratorConfig, RenderedArtifact, TemplateEntry
from .generator import Generator
from .templates import load_templates

# Re-export main CLI entry point
from .cli import main

__all__ = [
    "ConfigurationError",
    "Generator",
    "GeneratorConfig",
    "InvalidArgument",
    "RenderFailure",
    "RenderedArtifact",
    "ScaffoldgenError",
    "TemplateEntry",
    "WriteFailure",
    "load_templates",
    "main",
]
