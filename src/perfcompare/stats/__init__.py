"""Statistical primitives for comparing two samples."""

from .accumulator import SampleAccumulator, SampleSummary
from .confidence import ConfidenceInterval, compute_ci, half_width
from .distribution import t_inverse_cdf
from .hypothesis import PooledTTest, is_variant_greater, is_variant_less, pooled_t_test

__all__ = [
    "ConfidenceInterval",
    "PooledTTest",
    "SampleAccumulator",
    "SampleSummary",
    "compute_ci",
    "half_width",
    "is_variant_greater",
    "is_variant_less",
    "pooled_t_test",
    "t_inverse_cdf",
]
