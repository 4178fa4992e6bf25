"""Rich terminal formatter for Design DNA."""

import io
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..api import DesignDNAResult
from ..models import AggregatedComponent, ConfidenceLevel, TokenWithFrequency
from ..normalization.pipeline import NormalizationResult, ValidatedTokens
from .base import BaseFormatter

_LEVEL_STYLE = {
    ConfidenceLevel.HIGH: "[green]high[/green]",
    ConfidenceLevel.MEDIUM: "[yellow]medium[/yellow]",
    ConfidenceLevel.LOW: "[red]low[/red]",
}


def _level_label(level: ConfidenceLevel) -> str:
    return _LEVEL_STYLE[level]


def _standard_mark(result: TokenWithFrequency) -> str:
    return "[green]✓[/green]" if result.is_standard else "[dim]-[/dim]"


class RichFormatter(BaseFormatter):
    """Summary tables for tokens and components."""

    def __init__(self, console: Optional[Console] = None, max_rows: int = 20):
        self.console = console or Console()
        self.max_rows = max_rows

    def render(self, result: DesignDNAResult) -> None:
        self._print(self.console, result)

    def format(self, result: DesignDNAResult) -> str:
        console = Console(file=io.StringIO(), record=True, width=120)
        self._print(console, result)
        return console.export_text()

    def _print(self, console: Console, result: DesignDNAResult) -> None:
        if result.tokens is not None:
            self._print_tokens(console, result.tokens)
        if result.components is not None:
            console.print(self._components_table(result.components))

    def _print_tokens(self, console: Console, tokens: NormalizationResult) -> None:
        meta = tokens.metadata
        console.print(
            f"[bold cyan]Design tokens[/bold cyan] across {meta.total_pages} page(s) "
            f"(standard = {meta.min_page_threshold}+ pages)"
        )

        colors = self._token_table("Colors", tokens.colors, ("Canonical", "Variants"))
        for result in tokens.colors.all[: self.max_rows]:
            cluster = result.token
            self._add_row(colors, result, cluster.canonical, ", ".join(cluster.variants))
        console.print(colors)

        typography = self._token_table("Typography", tokens.typography, ("Family", "Size"))
        for result in tokens.typography.all[: self.max_rows]:
            token = result.token
            size = f"{token.normalized_size.pixels:g}px" if token.normalized_size else token.size
            self._add_row(typography, result, token.family, f"{size} / {token.weight}")
        console.print(typography)

        scale = tokens.spacing_scale
        spacing = self._token_table(
            f"Spacing (base {scale.base_unit}px, coverage {scale.coverage:.0%})",
            tokens.spacing,
            ("Value", "Pixels"),
        )
        for result in tokens.spacing.all[: self.max_rows]:
            token = result.token
            pixels = f"{token.normalized_value.pixels:g}" if token.normalized_value else "?"
            self._add_row(spacing, result, token.value, pixels)
        console.print(spacing)

        for title, group in (
            ("Radii", tokens.radii),
            ("Shadows", tokens.shadows),
            ("Motion", tokens.motion),
        ):
            table = self._token_table(title, group, ("Value", ""))
            for result in group.all[: self.max_rows]:
                self._add_row(table, result, result.token.value, "")
            console.print(table)

    def _token_table(self, title: str, group: ValidatedTokens, columns: Iterable[str]) -> Table:
        table = Table(
            title=f"{title} [dim]({len(group.standards)}/{len(group.all)} standard)[/dim]",
            show_lines=False,
        )
        for column in columns:
            table.add_column(column)
        table.add_column("Pages", justify="right")
        table.add_column("Occurrences", justify="right")
        table.add_column("Confidence", justify="right")
        table.add_column("Level")
        table.add_column("Std", justify="center")
        return table

    def _add_row(self, table: Table, result: TokenWithFrequency, first: str, second: str) -> None:
        table.add_row(
            escape(first),
            escape(second),
            str(result.page_count),
            str(result.occurrence_count),
            f"{result.confidence.value:.2f}",
            _level_label(result.confidence.level),
            _standard_mark(result),
        )

    def _components_table(self, components: Iterable[AggregatedComponent]) -> Table:
        table = Table(title="Components")
        table.add_column("Type", style="bold")
        table.add_column("Pages", justify="right")
        table.add_column("Instances", justify="right")
        table.add_column("Canonical variant")
        table.add_column("Consistency", justify="right")
        table.add_column("Confidence", justify="right")
        table.add_column("Level")

        for component in components:
            variant = component.canonical_variant
            variant_text = "/".join(variant.signature) if variant else "-"
            confidence = component.confidence
            table.add_row(
                component.type,
                str(len(component.page_urls)),
                str(len(component.instances)),
                variant_text,
                f"{confidence.variant_consistency:.0%}" if confidence else "-",
                f"{confidence.value:.2f}" if confidence else "-",
                _level_label(confidence.level) if confidence else "-",
            )
        return table
