"""Exception hierarchy for Design DNA."""

from .analysis import AnalysisError, ContractViolationError, InputFormatError
from .base import DesignDNAError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "DesignDNAError",
    "AnalysisError",
    "ContractViolationError",
    "InputFormatError",
    "ConfigurationError",
    "InvalidConfigError",
]
