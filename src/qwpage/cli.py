"""qwpage CLI Entry Point

Usage:
    qwpage page.html                       # Render to stdout
    qwpage page.html -o out.html           # Render to file
    qwpage page.html --options vars.yaml   # Options from a YAML/JSON file
    qwpage page.html --set title=Hello     # Override a single option
    qwpage page.html --introspect          # Print the introspection record
    qwpage -v                              # Show version
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, List, Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler

from qwpage._version import __version__
from qwpage.composer import PageComposer
from qwpage.config import ComposerConfig
from qwpage.exceptions import QwpageError

console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the qwpage CLI.

    Log levels:
    - Normal: Only warnings/errors shown
    - Verbose (--verbose): INFO level
    - Debug (QWPAGE_DEBUG=1): DEBUG level - every file loaded and outlet resolved
    """
    debug = bool(os.environ.get("QWPAGE_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("qwpage")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def load_options(path: Optional[Path], overrides: List[str]) -> dict[str, Any]:
    """Build the options mapping from a YAML/JSON file plus KEY=VALUE overrides."""
    options: dict[str, Any] = {}
    if path is not None:
        if not path.exists():
            raise typer.BadParameter(f"Options file not found: {path}")
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(data, dict):
            raise typer.BadParameter(f"Options file must hold a mapping: {path}")
        options.update(data)

    for item in overrides:
        if "=" not in item:
            raise typer.BadParameter(f"Expected KEY=VALUE, got: {item}")
        key, value = item.split("=", 1)
        # yaml gives "3" -> 3, "true" -> True, like the options file does
        options[key.strip()] = yaml.safe_load(value) if value else ""

    return options


typer_app = typer.Typer()


@typer_app.command()
def cli(
    page: Optional[Path] = typer.Argument(None, help="Content file to render."),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the page to a file instead of stdout."
    ),
    options_file: Optional[Path] = typer.Option(
        None, "--options", help="YAML or JSON file with template options."
    ),
    overrides: Optional[List[str]] = typer.Option(
        None, "--set", help="Set a single option (KEY=VALUE). Repeatable."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to qwpage.yaml."
    ),
    template: Optional[str] = typer.Option(
        None, "-t", "--template", help="Default template file name."
    ),
    introspect: bool = typer.Option(
        False, "--introspect", help="Print the introspection record (JSON)."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose logging."),
    version: bool = typer.Option(
        False, "-v", "--version", help="Show version and exit."
    ),
) -> None:
    """Compose an HTML page from a content file, its template and components."""
    if version:
        typer.echo(f"qwpage {__version__}")
        raise typer.Exit()

    if page is None:
        typer.secho("Error: Missing content file.", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    setup_logging(verbose)

    config = ComposerConfig.load(config_file or page.parent / "qwpage.yaml")
    if template is not None:
        config.default_template = template
    if introspect:
        config.introspection = True

    options = load_options(options_file, overrides or [])
    composer = PageComposer(config=config)

    try:
        rendered = asyncio.run(composer.render(page, options))
    except QwpageError as exc:
        typer.secho(f"Error: {exc}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        typer.echo(f"Wrote {output}")
    else:
        typer.echo(rendered)


def app() -> None:
    """Entry point for the installed `qwpage` script."""
    typer_app()


if __name__ == "__main__":
    app()
