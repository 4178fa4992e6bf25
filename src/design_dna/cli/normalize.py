"""Token normalization command."""

from pathlib import Path
from typing import Optional

import typer

from ..api import run
from ..exceptions import DesignDNAError
from . import app
from ._common import emit, err_console, resolve_config


@app.command()
def normalize(
    input_file: Path = typer.Argument(
        ..., help="Extraction JSON document", exists=True, dir_okay=False, readable=True
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="TOML config file", exists=True, dir_okay=False
    ),
    min_pages: Optional[int] = typer.Option(
        None, "--min-pages", "-m", min=0, help="Pages required for a token to become a standard"
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: json or table"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Errors only"),
):
    """Deduplicate, normalize and validate design tokens across pages."""
    settings = resolve_config(config, min_pages, output_format, verbose, quiet)
    try:
        result = run(input_file, settings, include_tokens=True, include_components=False)
    except DesignDNAError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    emit(result, settings)
