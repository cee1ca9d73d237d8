"""
Module for picking the best contiguous surf window within a day.
"""
import logging
from datetime import date as date_type
from datetime import datetime, timedelta
from typing import List, Optional, Sequence, Tuple, Union
from dataclasses import dataclass

from swellcast.models import (
    BreakProfile,
    ForecastSample,
    Location,
    QualityLabel,
    SwellQualityScore,
    TidePoint,
)
from swellcast.scoring import compute_swell_quality
from swellcast.sunrise_sunset import filter_daylight

# Window sizes in samples, largest first
WINDOW_SIZES = (3, 2)
MIN_WINDOW_MEAN = 30
SAMPLE_SPAN = timedelta(hours=1)

LIMITED_DAYLIGHT = "Limited daylight data"
NO_GOOD_WINDOW = "No good window today"


@dataclass
class SurfWindow:
    """Represents the winning run of consecutive samples."""
    start: datetime
    end: datetime
    mean_score: float
    best_label: QualityLabel
    scores: Tuple[SwellQualityScore, ...]

    @property
    def duration_minutes(self) -> float:
        """Calculate duration of window in minutes."""
        return (self.end - self.start).total_seconds() / 60

    def __str__(self) -> str:
        return (f"Best window: {self.start.strftime('%H:%M')}–{self.end.strftime('%H:%M')} "
                f"({self.best_label.value} conditions)")


def _best_run(scored: List[Tuple[ForecastSample, SwellQualityScore]]):
    best_mean = -1.0
    best_run: List[Tuple[ForecastSample, SwellQualityScore]] = []

    for size in WINDOW_SIZES:
        if len(scored) < size:
            continue
        for i in range(len(scored) - size + 1):
            run = scored[i:i + size]
            mean = sum(score.score for _, score in run) / size
            # Strictly higher only, so an earlier or longer window keeps ties
            if mean > best_mean:
                best_mean = mean
                best_run = run

    return best_mean, best_run


def find_best_window(
    samples: Sequence[ForecastSample],
    profile: Optional[BreakProfile],
    location: Location,
    tide_points: Optional[Sequence[TidePoint]] = None,
    date: Optional[Union[date_type, datetime]] = None
) -> Tuple[Optional[SurfWindow], str]:
    """
    Find the run of 2-3 consecutive daylight samples with the highest mean score.

    Args:
        samples: One day of forecast samples, in time order
        profile: Break profile; None uses the default beach profile
        location: Spot coordinates and timezone
        tide_points: Tide sequence covering the day; may be empty or None
        date: Day whose sunrise/sunset bound the search; defaults to each
              sample's own day

    Returns:
        Tuple of (window, message). The window is None when there is too
        little daylight data or nothing scores well enough, and the message
        says which.
    """
    daylight = filter_daylight(samples, location.latitude, location.longitude,
                               location.timezone, date=date)
    if len(daylight) < 2:
        logging.info(f"Only {len(daylight)} daylight samples for {location.name or 'spot'}")
        return None, LIMITED_DAYLIGHT

    scored = [
        (sample, compute_swell_quality(sample, profile, location, tide_points,
                                       skip_daylight_check=True))
        for sample in daylight
    ]

    best_mean, best_run = _best_run(scored)
    if best_mean < MIN_WINDOW_MEAN:
        return None, NO_GOOD_WINDOW

    tz = location.zone
    run_scores = tuple(score for _, score in best_run)
    # max() keeps the first of equal scores
    top = max(run_scores, key=lambda s: s.score)
    window = SurfWindow(
        start=best_run[0][0].forecast_hour_utc.astimezone(tz),
        end=(best_run[-1][0].forecast_hour_utc + SAMPLE_SPAN).astimezone(tz),
        mean_score=best_mean,
        best_label=top.label,
        scores=run_scores,
    )
    return window, str(window)


def get_best_surf_window(
    samples: Sequence[ForecastSample],
    profile: Optional[BreakProfile],
    location: Location,
    tide_points: Optional[Sequence[TidePoint]] = None,
    date: Optional[Union[date_type, datetime]] = None
) -> str:
    """Describe the best surf window of the day as display text."""
    _, message = find_best_window(samples, profile, location, tide_points, date)
    return message
