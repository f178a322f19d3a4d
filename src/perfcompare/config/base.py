"""Configuration models for sample comparison."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalysisConfig(BaseModel):
    """Defaults applied when an operation is called without a confidence level."""

    confidence_level: float = Field(
        default=0.95,
        gt=0.0,
        lt=1.0,
        description="Confidence level for intervals and one-tailed tests",
    )
