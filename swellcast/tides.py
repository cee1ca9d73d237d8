"""
Module for resolving the tide phase at a moment from a sequence of tide extrema.
"""
import math
from datetime import date as date_type
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence
from dataclasses import dataclass

from swellcast.models import TideDirection, TidePhase, TidePoint, TideType, ensure_utc

# Distance from an extremum within which the tide counts as high or low
SLACK_WINDOW = timedelta(minutes=45)

# M2 constituent used for synthetic tides
M2_PERIOD_HOURS = 12.42
SYNTHETIC_AMPLITUDE_M = 1.5
SYNTHETIC_HOURS = 48


@dataclass(frozen=True)
class TideState:
    """Tide phase at a moment, with direction when it is known."""
    phase: TidePhase = TidePhase.MID
    direction: TideDirection = TideDirection.UNKNOWN

    def describe(self) -> str:
        if self.phase == TidePhase.MID and self.direction != TideDirection.UNKNOWN:
            return f"{self.phase.value}, {self.direction.value}"
        return self.phase.value


def extract_extrema(tide_points: Optional[Iterable[TidePoint]]) -> List[TidePoint]:
    """Return the HIGH/LOW events in time order."""
    if not tide_points:
        return []
    return sorted((p for p in tide_points if p.is_extremum), key=lambda p: p.time)


def resolve_tide_phase(
    target: datetime,
    tide_points: Optional[Sequence[TidePoint]] = None
) -> TideState:
    """
    Determine the tide phase at the target time.

    The extrema bracketing the target give the direction (HIGH then LOW is
    falling, LOW then HIGH is rising). The phase is high or low within
    45 minutes of the nearer extremum, mid otherwise.

    Args:
        target: Moment to resolve
        tide_points: Tide sequence covering the target; may be empty or None

    Returns:
        TideState. Mid with no direction when the target is not bracketed.
    """
    extrema = extract_extrema(tide_points)
    moment = ensure_utc(target)

    for before, after in zip(extrema, extrema[1:]):
        if not before.time <= moment <= after.time:
            continue

        direction = TideDirection.UNKNOWN
        if before.type == TideType.HIGH and after.type == TideType.LOW:
            direction = TideDirection.FALLING
        elif before.type == TideType.LOW and after.type == TideType.HIGH:
            direction = TideDirection.RISING

        to_before = moment - before.time
        to_after = after.time - moment
        nearest = before if to_before < to_after else after
        if min(to_before, to_after) <= SLACK_WINDOW:
            phase = TidePhase.HIGH if nearest.type == TideType.HIGH else TidePhase.LOW
            return TideState(phase=phase, direction=direction)
        return TideState(phase=TidePhase.MID, direction=direction)

    return TideState()


def tide_points_from_predictions(predictions: Iterable[Dict[str, Any]]) -> List[TidePoint]:
    """
    Convert NOAA CO-OPS prediction records into TidePoints.

    Records look like {"t": "2025-01-01 04:12", "v": "1.234", "type": "H"}.
    Times without an offset are taken as UTC (request with time_zone=gmt).
    """
    points = []
    for record in predictions:
        raw_time = str(record["t"])
        if raw_time.endswith("Z"):
            raw_time = raw_time[:-1] + "+00:00"
        kind = record.get("type")
        points.append(TidePoint(
            time=datetime.fromisoformat(raw_time),
            height_m=float(record["v"]),
            type=TideType.HIGH if kind == "H" else TideType.LOW if kind == "L" else None,
        ))
    return points


def generate_synthetic_tides(
    date: date_type,
    offset_hours: float = 0.0
) -> List[TidePoint]:
    """
    Approximate 48 hourly tide points from a single M2 constituent.

    For spots with no tide station. Heights are shifted to stay non-negative;
    hours that are a local maximum or minimum beyond 85% of the amplitude
    are marked HIGH or LOW.

    Args:
        date: First UTC day to generate
        offset_hours: Phase shift of the constituent in hours

    Returns:
        List of TidePoints starting at midnight UTC
    """
    base = datetime(date.year, date.month, date.day, tzinfo=timezone.utc)

    def height_at(hours: float) -> float:
        return SYNTHETIC_AMPLITUDE_M * math.cos(2 * math.pi * hours / M2_PERIOD_HOURS)

    points = []
    for hour in range(SYNTHETIC_HOURS):
        hours_from_start = hour + offset_hours
        height = height_at(hours_from_start)
        prev_height = height_at(hours_from_start - 0.5)
        next_height = height_at(hours_from_start + 0.5)

        kind = None
        if height > prev_height and height > next_height and height > SYNTHETIC_AMPLITUDE_M * 0.85:
            kind = TideType.HIGH
        elif height < prev_height and height < next_height and height < -SYNTHETIC_AMPLITUDE_M * 0.85:
            kind = TideType.LOW

        points.append(TidePoint(
            time=base + timedelta(hours=hour),
            height_m=round(height + SYNTHETIC_AMPLITUDE_M, 2),
            type=kind,
        ))
    return points
