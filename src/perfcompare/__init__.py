"""perfcompare - statistical comparison of control and variant benchmark samples."""

from .analysis import PerfTestAnalysis
from .config import AnalysisConfig
from .stats import ConfidenceInterval, PooledTTest, SampleAccumulator, SampleSummary

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "ConfidenceInterval",
    "PerfTestAnalysis",
    "PooledTTest",
    "SampleAccumulator",
    "SampleSummary",
]
