"""Fixed-width console report comparing two samples."""

from __future__ import annotations

import logging

import numpy as np
from rich.console import Console

from perfcompare.stats import ConfidenceInterval, SampleSummary

logger = logging.getLogger(__name__)

PLOT_STEPS = 50

HEADER = "Experiment |   Min   |   Lower |    Mean |   Upper |   Max   |   StDev |   Conf  |"
SEPARATOR = "-----------+---------+---------+---------+---------+---------|---------|---------|"
BORDER = "           +" + "----+" * 10


def _format_row(label: str, summary: SampleSummary, ci: ConfidenceInterval) -> str:
    """Format one table row: Min, Lower, Mean, Upper, Max, StDev, Conf."""
    fields = [
        f"{summary.min: 8.2f}",
        f"{ci.lower: 8.2f}",
        f"{summary.mean: 8.2f}",
        f"{ci.upper: 8.2f}",
        f"{summary.max: 8.2f}",
        f"{summary.std: 8.4f}",
        f"{ci.confidence: 8.4f}",
    ]
    return f"{label:<11}|" + "".join(f"{field} |" for field in fields)


def plot_char(loc: float, summary: SampleSummary, ci: ConfidenceInterval) -> str:
    """
    Character for one plot position.

    Returns:
        " " outside [min, max], "." outside the confidence bounds,
        "/" below the mean, "\\" at or above the mean
    """
    if not (summary.min <= loc <= summary.max):
        return " "
    if not (ci.lower <= loc <= ci.upper):
        return "."
    return "/" if loc < summary.mean else "\\"


def _plot_scale(variant: SampleSummary, control: SampleSummary) -> tuple[float, float]:
    """Origin and step width of the shared axis; NaN extremes are ignored."""
    lo = float(np.fmin(variant.min, control.min))
    hi = float(np.fmax(variant.max, control.max))
    return lo, (hi - lo) / PLOT_STEPS


def plot_positions(variant: SampleSummary, control: SampleSummary) -> np.ndarray:
    """Evenly spaced positions spanning both samples' combined range."""
    lo, step = _plot_scale(variant, control)
    return lo + np.arange(PLOT_STEPS) * step


def plot_line(positions: np.ndarray, summary: SampleSummary, ci: ConfidenceInterval) -> str:
    """Render one sample's range as PLOT_STEPS characters."""
    return "".join(plot_char(float(loc), summary, ci) for loc in positions)


def format_confidence_report(
    variant: SampleSummary,
    control: SampleSummary,
    variant_ci: ConfidenceInterval,
    control_ci: ConfidenceInterval,
) -> str:
    """
    Format the confidence report table and range plot.

    Both intervals are expected at the same confidence level.

    Args:
        variant: Variant sample snapshot
        control: Control sample snapshot
        variant_ci: Variant confidence interval
        control_ci: Control confidence interval

    Returns:
        Multi-line report text
    """
    lo, step = _plot_scale(variant, control)
    positions = plot_positions(variant, control)

    upper_ticks = "    ".join(f"{lo + i * step: 5.2f}" for i in range(0, PLOT_STEPS + 1, 10))
    lower_ticks = "    ".join(f"{lo + i * step: 5.2f}" for i in range(5, PLOT_STEPS, 10))

    lines = [
        "",
        HEADER,
        SEPARATOR,
        _format_row("VARIANT", variant, variant_ci),
        _format_row("CONTROL", control, control_ci),
        "",
        " " * 8 + upper_ticks,
        BORDER,
        "Variant: " + plot_line(positions, variant, variant_ci),
        "Control: " + plot_line(positions, control, control_ci),
        BORDER,
        " " * 13 + lower_ticks,
        "",
    ]
    return "\n".join(lines)


def print_confidence_report(
    variant: SampleSummary,
    control: SampleSummary,
    variant_ci: ConfidenceInterval,
    control_ci: ConfidenceInterval,
    console: Console | None = None,
) -> None:
    """
    Print the confidence report to console.

    Args:
        variant: Variant sample snapshot
        control: Control sample snapshot
        variant_ci: Variant confidence interval
        control_ci: Control confidence interval
        console: Rich console (creates new one if not provided)
    """
    if console is None:
        console = Console()

    logger.info(
        f"Rendering confidence report at {variant_ci.confidence} "
        f"(n_variant={variant.count}, n_control={control.count})"
    )
    report = format_confidence_report(variant, control, variant_ci, control_ci)
    console.print(report, markup=False, highlight=False, emoji=False, soft_wrap=True)
