"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..api import DesignDNAResult
from ..config import NormalizationConfig, load_config
from ..exceptions import DesignDNAError
from ..formatters import get_formatter
from ..logging_config import configure_logging

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    min_pages: Optional[int] = None,
    output_format: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> NormalizationConfig:
    """Build config from CLI options, exiting with code 1 on invalid settings."""
    try:
        settings = load_config(
            config_file=config,
            min_page_threshold=min_pages,
            output_format=output_format,
            verbose=verbose,
            quiet=quiet,
        )
    except DesignDNAError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    configure_logging(settings)
    return settings


def emit(result: DesignDNAResult, settings: NormalizationConfig) -> None:
    get_formatter(settings.output_format).render(result)
