"""Swell quality scoring for surf forecasts."""

from swellcast.best_window import SurfWindow, find_best_window, get_best_surf_window
from swellcast.models import (
    DEFAULT_BREAK_PROFILE,
    BreakProfile,
    BreakType,
    Confidence,
    ForecastSample,
    Location,
    QualityLabel,
    SwellQualityScore,
    TidePhase,
    TidePoint,
    TideType,
)
from swellcast.scoring import compute_swell_quality

__all__ = [
    "DEFAULT_BREAK_PROFILE",
    "BreakProfile",
    "BreakType",
    "Confidence",
    "ForecastSample",
    "Location",
    "QualityLabel",
    "SwellQualityScore",
    "SurfWindow",
    "TidePhase",
    "TidePoint",
    "TideType",
    "compute_swell_quality",
    "find_best_window",
    "get_best_surf_window",
]
