"""Tests for the Design DNA exception hierarchy."""

import pytest

from design_dna.exceptions import (
    AnalysisError,
    ConfigurationError,
    ContractViolationError,
    DesignDNAError,
    InputFormatError,
    InvalidConfigError,
)
from design_dna.exceptions.analysis import require_non_negative, require_positive


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            ContractViolationError("total_pages", -1, "must be non-negative"),
            InputFormatError("site.json", "invalid JSON"),
            InvalidConfigError("min_page_threshold", "x", "not an int"),
        ],
    )
    def test_all_errors_share_base(self, error):
        assert isinstance(error, DesignDNAError)

    def test_analysis_branch(self):
        assert issubclass(ContractViolationError, AnalysisError)
        assert issubclass(InputFormatError, AnalysisError)

    def test_configuration_branch(self):
        assert issubclass(InvalidConfigError, ConfigurationError)


class TestMessages:
    def test_plain_message(self):
        assert str(DesignDNAError("boom")) == "boom"

    def test_details_rendered(self):
        error = ContractViolationError("min_page_threshold", -3, "must be non-negative")
        assert str(error) == (
            "Invalid argument min_page_threshold=-3 "
            "(argument=min_page_threshold, reason=must be non-negative)"
        )
        assert error.argument == "min_page_threshold"
        assert error.value == -3

    def test_input_format_error_keeps_source(self):
        error = InputFormatError("site.json", "invalid JSON")
        assert error.source == "site.json"
        assert "site.json" in str(error)


class TestGuards:
    def test_require_non_negative(self):
        require_non_negative("n", 0)
        with pytest.raises(ContractViolationError):
            require_non_negative("n", -1)

    def test_require_positive(self):
        require_positive("size", 0.5)
        with pytest.raises(ContractViolationError):
            require_positive("size", 0)
