"""
One-tailed two-sample hypothesis tests with pooled variance.

Both tests use the null hypothesis that the variant and control
population means are equal. A True verdict rejects the null in favour of
the stated direction. A False verdict does not show the means are equal;
it only means the data failed to demonstrate that direction at the
requested confidence.

The pooled t-test assumes independent samples of nearly equal size,
roughly normal distributions and similar variances. None of these are
checked.

Unlike the confidence interval, the tests treat ``confidence`` as
one-tailed: 0.95 means alpha = 0.05 in a single tail.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .accumulator import SampleSummary
from .distribution import t_inverse_cdf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PooledTTest:
    """Test statistic of a pooled-variance two-sample t-test."""

    t_statistic: float
    dof: float
    sd_pooled: float

    def left_tail_critical(self, confidence: float) -> float:
        """Reject-below threshold at alpha = 1 - confidence."""
        return t_inverse_cdf(self.dof, 1.0 - confidence)

    def right_tail_critical(self, confidence: float) -> float:
        """Reject-above threshold at alpha = 1 - confidence."""
        return t_inverse_cdf(self.dof, confidence)


def pooled_t_test(variant: SampleSummary, control: SampleSummary) -> PooledTTest:
    """
    Compute the pooled-variance t-statistic for variant minus control.

    NaN and infinities propagate instead of raising, so samples with fewer
    than two observations produce a NaN statistic.

    Args:
        variant: Variant sample snapshot
        control: Control sample snapshot

    Returns:
        PooledTTest with the statistic, degrees of freedom and pooled SD
    """
    n_v = np.float64(variant.count)
    n_c = np.float64(control.count)
    dof = n_v + n_c - 2

    with np.errstate(divide="ignore", invalid="ignore"):
        sd_pooled = np.sqrt(
            ((n_v - 1) * np.float64(variant.std) ** 2 + (n_c - 1) * np.float64(control.std) ** 2)
            / dof
        )
        t_statistic = (np.float64(variant.mean) - np.float64(control.mean)) / (
            np.sqrt(1.0 / n_v + 1.0 / n_c) * sd_pooled
        )

    if math.isnan(t_statistic):
        logger.debug(
            f"t-statistic undefined (n_variant={variant.count}, n_control={control.count})"
        )

    return PooledTTest(
        t_statistic=float(t_statistic),
        dof=float(dof),
        sd_pooled=float(sd_pooled),
    )


def is_variant_less(variant: SampleSummary, control: SampleSummary, confidence: float) -> bool:
    """
    Test whether the variant mean is credibly less than the control mean.

    Args:
        variant: Variant sample snapshot
        control: Control sample snapshot
        confidence: One-tailed confidence level, e.g. 0.95

    Returns:
        True if the null hypothesis is rejected for variant < control
    """
    test = pooled_t_test(variant, control)
    return bool(test.t_statistic < test.left_tail_critical(confidence))


def is_variant_greater(variant: SampleSummary, control: SampleSummary, confidence: float) -> bool:
    """
    Test whether the variant mean is credibly greater than the control mean.

    Args:
        variant: Variant sample snapshot
        control: Control sample snapshot
        confidence: One-tailed confidence level, e.g. 0.95

    Returns:
        True if the null hypothesis is rejected for variant > control
    """
    test = pooled_t_test(variant, control)
    return bool(test.t_statistic > test.right_tail_critical(confidence))
