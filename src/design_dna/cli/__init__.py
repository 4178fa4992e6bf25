"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="design-dna",
    help="Design DNA - promote recurring styles from crawled pages into design standards",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .normalize import normalize as _normalize  # noqa: F401, E402
from .components import components as _components  # noqa: F401, E402
from .version import version as _version  # noqa: F401, E402


def main() -> None:
    app()
