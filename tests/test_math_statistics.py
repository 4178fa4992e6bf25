"""Tests for design_dna.math.statistics."""

from design_dna.math.statistics import Statistics


class TestMode:
    def test_empty_is_none(self):
        assert Statistics.mode([]) is None

    def test_most_frequent(self):
        assert Statistics.mode(["8px", "4px", "8px"]) == "8px"

    def test_tie_goes_to_first_seen(self):
        assert Statistics.mode(["b", "a", "a", "b"]) == "b"


class TestGcd:
    def test_gcd_all(self):
        assert Statistics.gcd_all([4, 8, 10, 12]) == 2

    def test_coprime(self):
        assert Statistics.gcd_all([7, 13, 23, 41]) == 1

    def test_empty_is_zero(self):
        assert Statistics.gcd_all([]) == 0


class TestDivisibleFraction:
    def test_partial(self):
        assert Statistics.divisible_fraction([4, 8, 10, 12], 4) == 0.75

    def test_empty(self):
        assert Statistics.divisible_fraction([], 4) == 0.0


def test_unique_in_order():
    assert Statistics.unique_in_order(["b", "a", "b", "c"]) == ["b", "a", "c"]
