"""Main CLI application."""

from __future__ import annotations

import asyncio
import fnmatch
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from typing_extensions import Annotated

from ..core.errors import ConfigurationError, ScaffoldgenError
from ..core.models import GeneratorConfig, RenderedArtifact
from ..generator import Generator
from ..settings import get_settings
from ..templates import load_templates
from .parsers import assign_dotted, load_data_file, parse_assignment, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="scaffoldgen",
    help="Scaffold files from a template directory and JSON/YAML data.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_settings().log_level.upper(),
        format="[%(levelname)s] %(message)s",
    )


def _exclude_filter(
    root: Path, patterns: list[str]
) -> Optional[Callable[[Path], bool]]:
    resolved_root = root.resolve()

    def keep(path: Path) -> bool:
        relative = path.relative_to(resolved_root).as_posix()
        return not any(
            fnmatch.fnmatch(relative, pattern) or fnmatch.fnmatch(path.name, pattern)
            for pattern in patterns
        )

    return keep if patterns else None


def _build_data(data_file: str, assignments: list[str]) -> Any:
    data = load_data_file(Path(data_file)) if data_file else None

    for key, value in map(parse_assignment, assignments):
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise typer.BadParameter(
                f"--set requires mapping data, got {type(data).__name__}",
                param_hint="--set",
            )
        assign_dotted(data, key, value)

    return data


async def _dry_run(artifact: RenderedArtifact, _write_fn: Any) -> None:
    typer.echo(f"{artifact.output_path} ({len(artifact.content)} chars)")


async def _generate(
    generator: Generator,
    templates: Path,
    data: Any,
    exclude: list[str],
    dry_run: bool,
) -> int:
    setter = await load_templates(templates, filter=_exclude_filter(templates, exclude))
    generator.add_context(setter)
    if data is not None:
        generator.add_context({"data": data})

    await generator.render()
    await generator.write(_dry_run if dry_run else None)
    return len(generator.context.rendered)


@app.command()
def render(
    templates: Annotated[
        Path,
        typer.Argument(help="Templates directory.", metavar="TEMPLATES"),
    ],
    out: Annotated[
        str,
        typer.Option(
            "--out",
            "-o",
            help="Base directory for output paths (default: cwd).",
            metavar="DIR",
        ),
    ] = "",
    engine: Annotated[
        str,
        typer.Option(
            "--engine",
            "-e",
            help="Template engine: jinja or handlebars.",
        ),
    ] = "",
    data_file: Annotated[
        str,
        typer.Option(
            "--data",
            "-d",
            help="JSON or YAML file with render data. A list renders every template once per item.",
            metavar="FILE",
        ),
    ] = "",
    assignments: Annotated[
        Optional[list[str]],
        typer.Option(
            "--set",
            help="Set a data value (format: KEY=VALUE, dotted keys nest). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = None,
    exclude: Annotated[
        Optional[list[str]],
        typer.Option(
            "--exclude",
            help="Glob of template paths to skip. Repeatable.",
            metavar="GLOB",
        ),
    ] = None,
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "",
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="List output files without writing them.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render a template directory into OUT."""
    _configure_logging(verbose)
    settings = get_settings()

    config = GeneratorConfig(
        engine=engine or settings.engine,
        out=Path(out) if out else settings.out,
        file_mode=parse_file_mode(file_mode) if file_mode else settings.file_mode,
    )
    try:
        generator = Generator(config)
    except ConfigurationError as e:
        raise typer.BadParameter(str(e), param_hint="--engine") from e

    data = _build_data(data_file, assignments or [])

    try:
        count = asyncio.run(
            _generate(generator, templates, data, exclude or [], dry_run)
        )
    except ScaffoldgenError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug(f"Completed: {count} artifact(s)")


@app.command("list")
def list_templates(
    templates: Annotated[
        Path,
        typer.Argument(help="Templates directory.", metavar="TEMPLATES"),
    ],
) -> None:
    """List the logical paths of the templates that would be rendered."""
    try:
        setter = asyncio.run(load_templates(templates))
    except ScaffoldgenError as e:
        raise typer.BadParameter(str(e), param_hint="TEMPLATES") from e

    for logical_path in setter(None)["templates"]:
        typer.echo(logical_path)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
