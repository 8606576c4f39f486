"""Utility modules."""

from .status_pipeline import StageSummary, summarize_pipeline, width_class

__all__ = ["StageSummary", "summarize_pipeline", "width_class"]
