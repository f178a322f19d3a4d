"""
Control versus variant comparison of benchmark measurements.

Estimates whether a variant's true mean differs from the control's using
t-based confidence intervals and one-tailed pooled-variance t-tests. Every
operation works from one snapshot of each sample taken when it starts.

Instances are not thread-safe. Callers that feed values from several
threads must synchronise access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from perfcompare.config import AnalysisConfig
from perfcompare.reporters import format_confidence_report, print_confidence_report
from perfcompare.stats import (
    ConfidenceInterval,
    PooledTTest,
    SampleAccumulator,
    SampleSummary,
    compute_ci,
    half_width,
    is_variant_greater,
    is_variant_less,
    pooled_t_test,
)

if TYPE_CHECKING:
    from rich.console import Console

logger = logging.getLogger(__name__)


class PerfTestAnalysis:
    """
    Compares a variant sample against a control sample.

    Samples only grow: there is no way to remove or reset values.
    """

    def __init__(
        self,
        variant_values: Iterable[float] | None = None,
        control_values: Iterable[float] | None = None,
        config: AnalysisConfig | None = None,
    ) -> None:
        """
        Initialize analysis, optionally bulk-loading both samples.

        Args:
            variant_values: Initial variant measurements, added in order
            control_values: Initial control measurements, added after the variant's
            config: Analysis defaults (uses AnalysisConfig() if not provided)
        """
        self.config = config or AnalysisConfig()
        self._variant = SampleAccumulator()
        self._control = SampleAccumulator()

        if variant_values is not None:
            self._variant.add_values(variant_values)
        if control_values is not None:
            self._control.add_values(control_values)

        if self._variant.count or self._control.count:
            logger.debug(
                f"Loaded {self._variant.count} variant and {self._control.count} control values"
            )

    def _confidence(self, confidence: float | None) -> float:
        return self.config.confidence_level if confidence is None else confidence

    def add_value_variant(self, value: float) -> None:
        """Add one variant measurement."""
        self._variant.add_value(value)

    def add_value_control(self, value: float) -> None:
        """Add one control measurement."""
        self._control.add_value(value)

    def summary_variant(self) -> SampleSummary:
        """Snapshot of the variant sample."""
        return self._variant.snapshot()

    def summary_control(self) -> SampleSummary:
        """Snapshot of the control sample."""
        return self._control.snapshot()

    @staticmethod
    def confidence_interval(summary: SampleSummary, confidence: float) -> float:
        """Half-width of the confidence interval for any sample snapshot."""
        return half_width(summary, confidence)

    def confidence_interval_variant(self, confidence: float | None = None) -> ConfidenceInterval:
        """Confidence interval for the variant mean."""
        return compute_ci(self._variant.snapshot(), self._confidence(confidence))

    def confidence_interval_control(self, confidence: float | None = None) -> ConfidenceInterval:
        """Confidence interval for the control mean."""
        return compute_ci(self._control.snapshot(), self._confidence(confidence))

    def format_confidence_report(self, confidence: float | None = None) -> str:
        """
        Format the comparison table and range plot.

        Args:
            confidence: Confidence level (defaults to config.confidence_level)

        Returns:
            Report text
        """
        confidence = self._confidence(confidence)
        variant = self._variant.snapshot()
        control = self._control.snapshot()
        return format_confidence_report(
            variant,
            control,
            compute_ci(variant, confidence),
            compute_ci(control, confidence),
        )

    def compute_confidence_report(
        self,
        confidence: float | None = None,
        console: Console | None = None,
    ) -> None:
        """
        Print the comparison table and range plot.

        Args:
            confidence: Confidence level (defaults to config.confidence_level)
            console: Rich console (creates new one if not provided)
        """
        confidence = self._confidence(confidence)
        variant = self._variant.snapshot()
        control = self._control.snapshot()
        print_confidence_report(
            variant,
            control,
            compute_ci(variant, confidence),
            compute_ci(control, confidence),
            console=console,
        )

    def t_test(self) -> PooledTTest:
        """Pooled-variance t-statistic for variant minus control."""
        return pooled_t_test(self._variant.snapshot(), self._control.snapshot())

    def is_variant_less(self, confidence: float | None = None) -> bool:
        """
        One-tailed test of variant mean < control mean.

        False means the data did not demonstrate the direction, not that
        the means are equal.

        Args:
            confidence: One-tailed confidence level (defaults to config.confidence_level)

        Returns:
            True if the null hypothesis of equal means is rejected
        """
        return is_variant_less(
            self._variant.snapshot(), self._control.snapshot(), self._confidence(confidence)
        )

    def is_variant_greater(self, confidence: float | None = None) -> bool:
        """
        One-tailed test of variant mean > control mean.

        False means the data did not demonstrate the direction, not that
        the means are equal.

        Args:
            confidence: One-tailed confidence level (defaults to config.confidence_level)

        Returns:
            True if the null hypothesis of equal means is rejected
        """
        return is_variant_greater(
            self._variant.snapshot(), self._control.snapshot(), self._confidence(confidence)
        )
