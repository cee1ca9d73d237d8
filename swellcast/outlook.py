"""Per-day summary of a multi-day forecast."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timezone, tzinfo
from typing import Dict, List, Optional, Sequence

from swellcast.best_window import get_best_surf_window
from swellcast.models import BreakProfile, ForecastSample, Location, SwellQualityScore, TidePoint
from swellcast.scoring import compute_swell_quality

# Local hours preferred for the representative sample of a day
REPRESENTATIVE_HOURS = range(8, 11)


@dataclass
class DayOutlook:
    date: date
    score: SwellQualityScore
    best_window: str
    samples: List[ForecastSample]


def representative_sample(samples: Sequence[ForecastSample], tz: tzinfo = timezone.utc) -> ForecastSample:
    """First mid-morning (08-10 local) sample of the day, else the first sample."""
    for sample in samples:
        if sample.forecast_hour_utc.astimezone(tz).hour in REPRESENTATIVE_HOURS:
            return sample
    return samples[0]


def daily_outlook(
    samples: Sequence[ForecastSample],
    profile: Optional[BreakProfile],
    location: Location,
    tide_points: Optional[Sequence[TidePoint]] = None,
    days: int = 7,
    spot_id: str = ""
) -> List[DayOutlook]:
    """
    Score each forecast day from its representative sample.

    Args:
        samples: Forecast samples spanning one or more days
        profile: Break profile; None uses the default beach profile
        location: Spot coordinates and timezone
        tide_points: Tide sequence covering the forecast; may be empty or None
        days: Maximum number of days to return
        spot_id: Identifier echoed on each score

    Returns:
        List of DayOutlook in first-seen order of the location's local days
    """
    tz = location.zone
    by_day: Dict[date, List[ForecastSample]] = defaultdict(list)
    for sample in samples:
        by_day[sample.forecast_hour_utc.astimezone(tz).date()].append(sample)

    outlook = []
    for day, day_samples in list(by_day.items())[:days]:
        rep = representative_sample(day_samples, tz)
        outlook.append(DayOutlook(
            date=day,
            score=compute_swell_quality(rep, profile, location, tide_points, spot_id=spot_id),
            best_window=get_best_surf_window(day_samples, profile, location, tide_points, date=day),
            samples=day_samples,
        ))
    return outlook
