"""Online accumulation of descriptive statistics for one sample."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_NAN = float("nan")


@dataclass(frozen=True)
class SampleSummary:
    """Point-in-time snapshot of a sample's aggregate statistics."""

    count: int
    mean: float
    std: float
    min: float
    max: float
    sum: float

    @property
    def variance(self) -> float:
        """Sample variance (N-1 denominator)."""
        return self.std * self.std


class SampleAccumulator:
    """
    Append-only accumulator for a stream of measurements.

    Uses Welford's update so mean and variance stay numerically stable
    for large N without retaining individual values. Every update and
    read is O(1).

    Not thread-safe: producers and readers sharing one accumulator must
    synchronise externally.
    """

    def __init__(self) -> None:
        self._count = 0
        self._mean = 0.0
        self._m2 = 0.0
        self._sum = 0.0
        self._min = _NAN
        self._max = _NAN

    @property
    def count(self) -> int:
        """Number of values added so far."""
        return self._count

    def add_value(self, value: float) -> None:
        """
        Add one measurement.

        Non-finite values are accepted and propagate into the aggregates.

        Args:
            value: Measurement to add
        """
        value = float(value)
        if not math.isfinite(value):
            logger.debug(f"Adding non-finite value {value}; aggregates will be contaminated")

        self._count += 1
        delta = value - self._mean
        self._mean += delta / self._count
        self._m2 += delta * (value - self._mean)
        self._sum += value

        if self._count == 1:
            self._min = value
            self._max = value
        else:
            # min()/max() silently drop NaN depending on argument order
            self._min = value if math.isnan(value) or value < self._min else self._min
            self._max = value if math.isnan(value) or value > self._max else self._max

    def add_values(self, values: Iterable[float]) -> None:
        """Add every value in order."""
        for value in values:
            self.add_value(value)

    def snapshot(self) -> SampleSummary:
        """
        Take an immutable copy of the current aggregates.

        Returns:
            SampleSummary with NaN for statistics the sample cannot support yet
        """
        n = self._count
        if n == 0:
            return SampleSummary(count=0, mean=_NAN, std=_NAN, min=_NAN, max=_NAN, sum=0.0)

        std = math.sqrt(self._m2 / (n - 1)) if n > 1 else _NAN

        return SampleSummary(
            count=n,
            mean=self._mean,
            std=std,
            min=self._min,
            max=self._max,
            sum=self._sum,
        )
