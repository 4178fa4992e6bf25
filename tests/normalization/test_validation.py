"""Tests for cross-page validation."""

import pytest

from design_dna.exceptions import ContractViolationError
from design_dna.models import ConfidenceLevel
from design_dna.normalization.validation import standards_only, validate


class TestValidate:
    """Tests for validation.validate."""

    def test_five_pages_is_standard(self, color_factory, five_pages):
        results = validate([color_factory("#ff0000", five_pages)], 3, 10)
        assert len(results) == 1
        assert results[0].is_standard is True
        assert results[0].page_count == 5

    def test_two_pages_retained_but_not_standard(self, color_factory):
        results = validate([color_factory("#ff0000", ["/p1", "/p2"])], 3, 10)
        assert len(results) == 1
        assert results[0].is_standard is False

    def test_exactly_threshold_is_standard(self, color_factory):
        results = validate([color_factory("#ff0000", ["/p1", "/p2", "/p3"])], 3, 10)
        assert results[0].is_standard is True

    def test_empty_input(self):
        assert validate([], 3, 10) == []

    def test_occurrences_include_same_page_repeats(self, color_factory):
        results = validate([color_factory("#ff0000", ["/p1", "/p1", "/p2"])], 3, 10)
        assert results[0].page_urls == frozenset({"/p1", "/p2"})
        assert results[0].occurrence_count == 3

    def test_sorted_by_page_count_then_occurrences(self, color_factory):
        tokens = [
            color_factory("#000001", ["/p1", "/p2"]),
            color_factory("#000002", ["/p1", "/p2", "/p3", "/p4", "/p5"]),
            color_factory("#000003", ["/p1", "/p2", "/p3"]),
            color_factory("#000004", ["/p1", "/p1", "/p2", "/p2", "/p3"]),
        ]
        results = validate(tokens, 3, 10)
        assert [r.token.value for r in results] == ["#000002", "#000004", "#000003", "#000001"]

    def test_ties_keep_input_order(self, color_factory):
        tokens = [color_factory("#000001", ["/a"]), color_factory("#000002", ["/b"])]
        results = validate(tokens, 3, 10)
        assert [r.token.value for r in results] == ["#000001", "#000002"]

    def test_is_standard_iff_threshold(self, color_factory):
        tokens = [color_factory(f"#00000{n}", [f"/p{i}" for i in range(n)]) for n in range(1, 7)]
        for threshold in range(0, 8):
            for result in validate(tokens, threshold, 6):
                assert result.is_standard == (result.page_count >= threshold)

    def test_confidence_attached(self, color_factory):
        result = validate([color_factory("#ff0000", ["/p1", "/p2"])], 3, 4)[0]
        assert result.confidence.value == pytest.approx(0.5)
        assert result.confidence.level is ConfidenceLevel.LOW

    def test_idempotent(self, color_factory, five_pages):
        tokens = [
            color_factory("#000001", five_pages[:2]),
            color_factory("#000002", five_pages + five_pages),
            color_factory("#000003", five_pages[:3]),
        ]
        first = validate(tokens, 3, 5)
        second = validate(tokens, 3, 5)
        assert first == second
        assert [r.confidence.value for r in first] == [r.confidence.value for r in second]

    def test_negative_threshold_fails_fast(self, color_factory):
        with pytest.raises(ContractViolationError):
            validate([color_factory("#ff0000", ["/p1"])], -1, 10)

    def test_negative_total_pages_fails_fast(self):
        with pytest.raises(ContractViolationError):
            validate([], 3, -1)


def test_standards_only(color_factory, five_pages):
    results = validate(
        [color_factory("#000001", five_pages), color_factory("#000002", ["/p1"])], 3, 5
    )
    assert [r.token.value for r in standards_only(results)] == ["#000001"]
