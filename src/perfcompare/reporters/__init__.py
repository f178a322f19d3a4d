"""Report output."""

from .console import format_confidence_report, plot_char, print_confidence_report

__all__ = [
    "format_confidence_report",
    "plot_char",
    "print_confidence_report",
]
