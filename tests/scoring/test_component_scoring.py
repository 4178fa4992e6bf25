"""Tests for component confidence scoring."""

import pytest

from design_dna.exceptions import ContractViolationError
from design_dna.models import AnalyzedInstance, ComponentVariant, ConfidenceLevel
from design_dna.scoring.components import score_component, variant_consistency


@pytest.fixture
def analyzed(instance_factory):
    """Build AnalyzedInstances from (size, emphasis, shape) signatures."""

    def _make(signatures):
        return [
            AnalyzedInstance(
                instance=instance_factory(),
                variant=ComponentVariant(*signature),
                dimensions=(),
            )
            for signature in signatures
        ]

    return _make


class TestVariantConsistency:
    def test_uniform(self, analyzed):
        variants = analyzed([("medium", "primary", "rounded")] * 10)
        assert variant_consistency(variants) == pytest.approx(0.9)

    def test_fragmented(self, analyzed):
        variants = analyzed([("medium", "primary", "rounded"), ("small", "ghost", "pill")])
        assert variant_consistency(variants) == 0.0

    def test_empty(self):
        assert variant_consistency([]) == 0.0


class TestScoreComponent:
    def test_widespread_uniform_component(self, analyzed):
        variants = analyzed([("medium", "primary", "rounded")] * 45)
        result = score_component(15, 20, variants, 3)
        assert result.value > 0.6
        assert result.level == ConfidenceLevel.HIGH
        assert result.page_count == 15
        assert result.instance_count == 45
        assert result.variant_consistency == pytest.approx(1 - 1 / 45)

    def test_weighted_formula(self, analyzed):
        # coverage 0.5, consistency 0.5, density 4 / (2 * 3)
        variants = analyzed(
            [("medium", "primary", "rounded")] * 2 + [("small", "ghost", "pill")] * 2
        )
        result = score_component(2, 4, variants, 0)
        expected = 0.5 * 0.5 + 0.3 * 0.5 + 0.2 * (4 / 6)
        assert result.value == pytest.approx(expected)
        assert result.level == ConfidenceLevel.MEDIUM

    def test_below_page_threshold_is_low(self, analyzed):
        variants = analyzed([("medium", "primary", "rounded")] * 30)
        result = score_component(2, 2, variants, 3)
        assert result.level == ConfidenceLevel.LOW

    def test_no_instances(self):
        result = score_component(0, 5, [], 3)
        assert result.value == 0.0
        assert result.instance_count == 0

    def test_reasoning(self, analyzed):
        variants = analyzed([("medium", "primary", "rounded")] * 3 + [("large", "primary", "pill")])
        result = score_component(2, 5, variants, 3)
        assert result.reasoning == (
            "Found on 2/5 pages with 4 instances. 2 unique variant(s) (consistency: 50.0%)."
        )

    def test_negative_arguments_raise(self):
        with pytest.raises(ContractViolationError):
            score_component(1, -1, [], 3)
        with pytest.raises(ContractViolationError):
            score_component(1, 1, [], -3)
