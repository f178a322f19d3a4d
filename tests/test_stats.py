"""Tests for confidence intervals and the t quantile."""

import math

import pytest
from scipy import stats

from perfcompare.stats import (
    SampleAccumulator,
    SampleSummary,
    compute_ci,
    half_width,
    t_inverse_cdf,
)


def _summary(values: list[float]) -> SampleSummary:
    acc = SampleAccumulator()
    acc.add_values(values)
    return acc.snapshot()


class TestTInverseCdf:
    """Tests for t_inverse_cdf."""

    def test_known_quantiles(self):
        """Test against tabulated critical values."""
        assert t_inverse_cdf(9, 0.975) == pytest.approx(2.262, abs=1e-3)
        assert t_inverse_cdf(18, 0.95) == pytest.approx(1.734, abs=1e-3)

    def test_symmetric(self):
        """Test the lower quantile mirrors the upper one."""
        assert t_inverse_cdf(18, 0.01) == pytest.approx(-t_inverse_cdf(18, 0.99))

    @pytest.mark.parametrize("dof", [0, -1, -2, float("nan"), float("inf")])
    def test_bad_dof_is_nan(self, dof):
        """Test that undefined degrees of freedom give NaN."""
        assert math.isnan(t_inverse_cdf(dof, 0.95))

    @pytest.mark.parametrize("probability", [0.0, 1.0, -0.5, 1.5])
    def test_bad_probability_is_nan(self, probability):
        """Test that probabilities outside (0, 1) give NaN."""
        assert math.isnan(t_inverse_cdf(5, probability))


class TestHalfWidth:
    """Tests for half_width and compute_ci."""

    def test_matches_scipy(self, variant_values):
        """Test half-width equals t * s / sqrt(n)."""
        summary = _summary(variant_values)
        expected = stats.t.ppf(0.975, 9) * summary.std / math.sqrt(10)
        assert half_width(summary, 0.95) == pytest.approx(expected)

    def test_increases_with_confidence(self, variant_values):
        """Test that more confidence gives a wider interval."""
        summary = _summary(variant_values)
        widths = [half_width(summary, c) for c in (0.5, 0.8, 0.9, 0.95, 0.99, 0.999)]
        assert all(w >= 0 for w in widths)
        assert all(a < b for a, b in zip(widths, widths[1:]))

    @pytest.mark.parametrize("values", [[], [3.0]])
    def test_insufficient_data_is_nan(self, values):
        """Test that fewer than two values give NaN without raising."""
        summary = _summary(values)
        assert math.isnan(half_width(summary, 0.95))

    def test_single_value_interval(self):
        """Test that a single-value interval is undefined."""
        ci = compute_ci(_summary([3.0]), 0.95)
        assert ci.count == 1
        assert ci.mean == 3.0
        assert not ci.is_defined
        assert math.isnan(ci.lower)
        assert math.isnan(ci.upper)
        assert not ci.contains(3.0)

    def test_interval_bounds(self, control_values):
        """Test bounds are symmetric around the mean."""
        summary = _summary(control_values)
        ci = compute_ci(summary, 0.9)
        assert ci.is_defined
        assert ci.confidence == 0.9
        assert ci.mean == pytest.approx(summary.mean)
        assert ci.lower == pytest.approx(summary.mean - ci.half_width)
        assert ci.upper == pytest.approx(summary.mean + ci.half_width)
        assert ci.contains(summary.mean)

    def test_zero_variance(self):
        """Test identical values give a zero-width interval."""
        ci = compute_ci(_summary([2.0, 2.0, 2.0]), 0.95)
        assert ci.half_width == 0.0
        assert ci.lower == ci.upper == 2.0
