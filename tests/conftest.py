"""
Global pytest configuration and fixtures.

Async pipeline stages are driven with ``asyncio.run`` through the ``run``
fixture so tests stay free of event-loop plugins.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable

import pytest

from scaffoldgen.settings import get_settings


@pytest.fixture
def run() -> Callable[[Any], Any]:
    """Run a coroutine to completion."""
    return asyncio.run


@pytest.fixture
def template_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Factory writing ``{relative_path: content}`` under a fresh templates root."""

    def _factory(files: dict[str, str]) -> Path:
        root = tmp_path / "templates"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _factory


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
