"""Application services."""

from .climate_analysis_service import ClimateAnalysisService

__all__ = [
    "ClimateAnalysisService",
]
