"""Multi-factor swell quality scoring for a single forecast sample."""

import math
from typing import List, Optional, Sequence, Tuple

from swellcast.bearings import bearing_difference, compass_to_degrees, degrees_to_compass_label
from swellcast.models import (
    BreakProfile,
    BreakType,
    Confidence,
    ForecastSample,
    Location,
    QualityLabel,
    SwellQualityScore,
    TidePhase,
    TidePoint,
    resolve_break_profile,
)
from swellcast.sunrise_sunset import is_daylight
from swellcast.tides import resolve_tide_phase

# Factor weights, summing to 100
WAVE_HEIGHT_WEIGHT = 25
SWELL_PERIOD_WEIGHT = 25
WIND_DIRECTION_WEIGHT = 20
SWELL_DIRECTION_WEIGHT = 20
TIDE_PHASE_WEIGHT = 10

# Optimal wave height band (metres) per break type
HEIGHT_BANDS = {
    BreakType.BEACH: (0.8, 2.5),
    BreakType.POINT: (0.8, 2.5),
    BreakType.REEF: (1.0, 4.0),
}
FLAT_HEIGHT_M = 0.3

# Label thresholds, inclusive lower bounds, checked in order
LABEL_THRESHOLDS = (
    (80, QualityLabel.EPIC),
    (55, QualityLabel.GOOD),
    (35, QualityLabel.FAIR),
)

OUTSIDE_DAYLIGHT = "Outside daylight hours"

Factor = Tuple[float, str]


def label_for_score(score: int) -> QualityLabel:
    for threshold, label in LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return QualityLabel.POOR


def confidence_for(wave_height_m: float, wave_period_s: float) -> Confidence:
    """Forecast reliability from raw height and period, independent of the score."""
    if wave_period_s >= 10 and wave_height_m >= 0.5:
        return Confidence.HIGH
    if wave_period_s >= 7 and wave_height_m >= 0.3:
        return Confidence.MEDIUM
    return Confidence.LOW


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_wave_height(height: float, break_type: BreakType) -> Factor:
    optimal_min, optimal_max = HEIGHT_BANDS[BreakType(break_type)]
    if optimal_min <= height <= optimal_max:
        return WAVE_HEIGHT_WEIGHT, f"Wave height {height:.1f}m - in ideal range for this break."
    if FLAT_HEIGHT_M < height < optimal_min:
        return WAVE_HEIGHT_WEIGHT * 0.5, f"Wave height {height:.1f}m - a bit small but surfable."
    if optimal_max < height <= optimal_max * 1.5:
        return WAVE_HEIGHT_WEIGHT * 0.6, f"Wave height {height:.1f}m - overhead, experienced surfers only."
    if height <= FLAT_HEIGHT_M:
        return 0.0, f"Wave height {height:.1f}m - too flat to surf."
    return WAVE_HEIGHT_WEIGHT * 0.2, f"Wave height {height:.1f}m - dangerously large."


def score_swell_period(period: float) -> Factor:
    if period >= 14:
        return SWELL_PERIOD_WEIGHT, f"Long period {period:.0f}s - excellent ground swell energy."
    if period >= 10:
        return SWELL_PERIOD_WEIGHT * 0.75, f"Good swell period {period:.0f}s - clean, organised waves."
    if period >= 7:
        return SWELL_PERIOD_WEIGHT * 0.4, f"Short period {period:.0f}s - choppy, wind-swell conditions."
    return 0.0, f"Very short period {period:.0f}s - messy and close-out conditions."


def score_wind(sample: ForecastSample, profile: BreakProfile) -> Factor:
    offshore_deg = (compass_to_degrees(profile.facing_direction) + 180) % 360
    diff = bearing_difference(sample.wind_direction_deg, offshore_deg)
    compass = degrees_to_compass_label(sample.wind_direction_deg)
    speed = f"{sample.wind_speed_kmh:.0f} km/h"

    if diff <= 45:
        return WIND_DIRECTION_WEIGHT, f"Offshore {compass} wind at {speed} - perfect conditions."
    if diff <= 90:
        return (WIND_DIRECTION_WEIGHT * 0.5,
                f"Cross-shore {compass} wind at {speed} - acceptable but not ideal.")
    if diff <= 135:
        return (WIND_DIRECTION_WEIGHT * 0.2,
                f"Mostly onshore {compass} wind at {speed} - expect messy, choppy conditions.")
    return 0.0, f"Strong onshore {compass} wind at {speed} - conditions blown out."


def score_swell_direction(sample: ForecastSample, profile: BreakProfile) -> Factor:
    target = compass_to_degrees(profile.optimal_swell_direction.split("-")[0].strip())
    diff = bearing_difference(sample.swell_direction_deg, target)
    compass = degrees_to_compass_label(sample.swell_direction_deg)

    if diff <= 30:
        return SWELL_DIRECTION_WEIGHT, f"Swell from {compass} - perfectly aligned with break."
    if diff <= 60:
        return SWELL_DIRECTION_WEIGHT * 0.65, f"Swell direction {compass} - good angle for this break."
    if diff <= 90:
        return (SWELL_DIRECTION_WEIGHT * 0.3,
                f"Swell direction {compass} marginal - may not fully wrap into the break.")
    return 0.0, f"Swell direction {compass} - wrong angle, poor shape expected."


def score_tide(
    sample: ForecastSample,
    profile: BreakProfile,
    tide_points: Optional[Sequence[TidePoint]]
) -> Factor:
    state = resolve_tide_phase(sample.forecast_hour_utc, tide_points)
    optimal = TidePhase(profile.optimal_tide_phase)
    if optimal == TidePhase.ANY or state.phase == optimal:
        return TIDE_PHASE_WEIGHT, f"Tide ({state.describe()}) - matches optimal."
    return TIDE_PHASE_WEIGHT * 0.3, f"Tide ({state.describe()}) - optimal is {optimal.value}."


def compute_swell_quality(
    sample: ForecastSample,
    profile: Optional[BreakProfile],
    location: Location,
    tide_points: Optional[Sequence[TidePoint]] = None,
    *,
    skip_daylight_check: bool = False,
    spot_id: str = ""
) -> SwellQualityScore:
    """
    Score one forecast sample for a surf break.

    Five weighted factors contribute: wave height (25), swell period (25),
    wind direction relative to offshore (20), swell direction alignment (20)
    and tide phase (10). Samples outside daylight score zero unless the
    caller has already filtered them.

    Args:
        sample: Forecast reading to score
        profile: Break profile; None uses the default beach profile
        location: Spot coordinates and timezone
        tide_points: Tide sequence around the sample; may be empty or None
        skip_daylight_check: Set when samples were already filtered to daylight
        spot_id: Identifier echoed on the result

    Returns:
        SwellQualityScore with one reason per factor in fixed order
    """
    if not skip_daylight_check and not is_daylight(
            sample.forecast_hour_utc, location.latitude, location.longitude, location.timezone):
        return SwellQualityScore(
            forecast_hour_utc=sample.forecast_hour_utc,
            score=0,
            label=QualityLabel.POOR,
            confidence=Confidence.LOW,
            reasons=(OUTSIDE_DAYLIGHT,),
            spot_id=spot_id,
        )

    profile = resolve_break_profile(profile)
    factors: List[Factor] = [
        score_wave_height(sample.wave_height_m, profile.break_type),
        score_swell_period(sample.wave_period_s),
        score_wind(sample, profile),
        score_swell_direction(sample, profile),
        score_tide(sample, profile, tide_points),
    ]

    total = sum(points for points, _ in factors)
    score = max(0, min(100, _round_half_up(total)))

    return SwellQualityScore(
        forecast_hour_utc=sample.forecast_hour_utc,
        score=score,
        label=label_for_score(score),
        confidence=confidence_for(sample.wave_height_m, sample.wave_period_s),
        reasons=tuple(reason for _, reason in factors),
        spot_id=spot_id,
    )
