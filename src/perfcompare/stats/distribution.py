"""Student's t-distribution quantiles."""

from __future__ import annotations

import logging
import math

from scipy import stats

logger = logging.getLogger(__name__)


def t_inverse_cdf(dof: float, probability: float) -> float:
    """
    Inverse CDF (quantile) of Student's t-distribution.

    Args:
        dof: Degrees of freedom
        probability: Cumulative probability in (0, 1)

    Returns:
        The quantile, or NaN when it is undefined for the arguments
        (non-positive or non-finite dof, probability outside (0, 1))
    """
    if not (dof > 0 and math.isfinite(dof)) or not (0.0 < probability < 1.0):
        logger.debug(f"t quantile undefined for dof={dof}, p={probability}")
        return float("nan")
    return float(stats.t.ppf(probability, dof))
