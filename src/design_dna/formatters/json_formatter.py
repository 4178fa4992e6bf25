"""JSON formatter: every engine structure as plain, serializable data."""

import dataclasses
import json
from enum import Enum
from typing import Any, Mapping

from ..api import DesignDNAResult
from .base import BaseFormatter


def to_plain(value: Any) -> Any:
    """Recursively convert dataclasses, enums, sets and tuples to JSON types.

    Sets are emitted sorted so output is byte-stable between runs.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset)):
        return sorted(to_plain(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): to_plain(v) for k, v in value.items()}
    return value


class JsonFormatter(BaseFormatter):
    """Render results as JSON."""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def render(self, result: DesignDNAResult) -> None:
        print(self.format(result))

    def format(self, result: DesignDNAResult) -> str:
        return json.dumps(to_plain(result), indent=self.indent)
