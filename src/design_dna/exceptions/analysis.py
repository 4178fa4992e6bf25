"""Analysis-related exceptions: contract violations and unreadable input."""

from typing import Any

from .base import DesignDNAError


class AnalysisError(DesignDNAError):
    """Base class for analysis-related errors."""
    pass


class ContractViolationError(AnalysisError):
    """Raised when a caller passes an argument outside its contract.

    Malformed style values never raise; only programming errors such as a
    negative page threshold do.
    """

    def __init__(self, argument: str, value: Any, reason: str):
        super().__init__(
            f"Invalid argument {argument}={value!r}",
            details={"argument": argument, "reason": reason},
        )
        self.argument = argument
        self.value = value
        self.reason = reason


class InputFormatError(AnalysisError):
    """Raised when an extraction document cannot be read or has the wrong shape."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Cannot read extraction input: {source}",
            details={"source": source, "reason": reason},
        )
        self.source = source
        self.reason = reason


def require_non_negative(argument: str, value: float) -> None:
    """Fail fast when a count or threshold is negative."""
    if value < 0:
        raise ContractViolationError(argument, value, "must be non-negative")


def require_positive(argument: str, value: float) -> None:
    """Fail fast when a size or threshold is zero or negative."""
    if value <= 0:
        raise ContractViolationError(argument, value, "must be positive")
