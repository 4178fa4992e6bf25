"""Output formatters for normalization and aggregation results."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter, to_plain
from .rich_formatter import RichFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "json", "table"

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "json": JsonFormatter,
        "table": RichFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "RichFormatter",
    "to_plain",
    "get_formatter",
]
