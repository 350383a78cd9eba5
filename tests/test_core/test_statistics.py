"""Tests for price series statistics."""

import pytest

from stockscope.core.statistics import mean, population_std


class TestStatistics:
    def test_mean(self):
        assert mean([1.0, 2.0, 3.0]) == 2.0

    def test_mean_empty_raises(self):
        with pytest.raises(ValueError):
            mean([])

    def test_population_std_divides_by_n(self):
        """The classic textbook series has a population std of exactly 2."""
        assert population_std([2, 4, 4, 4, 5, 5, 7, 9]) == 2.0

    def test_population_std_constant_series(self):
        assert population_std([175.5] * 7) == 0.0

    def test_population_std_single_value(self):
        assert population_std([42.0]) == 0.0
