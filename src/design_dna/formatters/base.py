"""Base formatter interface for Design DNA output rendering."""

from abc import ABC, abstractmethod

from ..api import DesignDNAResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: DesignDNAResult) -> None:
        """Render a result to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, result: DesignDNAResult) -> str:
        """Return formatted string representation of a result."""
