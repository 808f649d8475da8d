"""Template discovery."""

from .loader import RESERVED_MARKER, TEMPLATE_EXTENSIONS, load_templates

__all__ = ["RESERVED_MARKER", "TEMPLATE_EXTENSIONS", "load_templates"]
