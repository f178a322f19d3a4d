"""Confidence intervals for a sample mean."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .accumulator import SampleSummary
from .distribution import t_inverse_cdf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConfidenceInterval:
    """Symmetric confidence interval around a sample mean."""

    mean: float
    half_width: float
    lower: float
    upper: float
    confidence: float
    count: int

    @property
    def is_defined(self) -> bool:
        """Whether the sample had enough data for a finite interval."""
        return not math.isnan(self.half_width)

    def contains(self, value: float) -> bool:
        """Check if value lies within [lower, upper]."""
        return self.lower <= value <= self.upper


def half_width(summary: SampleSummary, confidence: float) -> float:
    """
    Half-width of the two-sided t confidence interval for the mean.

    Uses the critical value at 1 - (1 - confidence) / 2 with N - 1 degrees
    of freedom. Confidence is not validated; values outside (0, 1) give NaN.

    Args:
        summary: Sample snapshot
        confidence: Confidence level, e.g. 0.95

    Returns:
        crit * std / sqrt(N), or NaN with fewer than two observations
    """
    n = summary.count
    if n <= 1:
        logger.debug(f"Insufficient data for confidence interval (n={n})")
        return float("nan")

    crit = t_inverse_cdf(n - 1, 1.0 - (1.0 - confidence) / 2)
    return crit * summary.std / math.sqrt(n)


def compute_ci(summary: SampleSummary, confidence: float) -> ConfidenceInterval:
    """
    Compute the confidence interval for a sample's mean.

    Args:
        summary: Sample snapshot
        confidence: Confidence level, e.g. 0.95

    Returns:
        ConfidenceInterval; bounds are NaN when the interval is undefined
    """
    hw = half_width(summary, confidence)
    return ConfidenceInterval(
        mean=summary.mean,
        half_width=hw,
        lower=summary.mean - hw,
        upper=summary.mean + hw,
        confidence=confidence,
        count=summary.count,
    )
