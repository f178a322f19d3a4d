"""Configuration models."""

from .base import AnalysisConfig

__all__ = ["AnalysisConfig"]
