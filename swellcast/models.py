"""Data records consumed and produced by the scoring engine."""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple
from zoneinfo import ZoneInfo


class BreakType(str, Enum):
    BEACH = "beach"
    REEF = "reef"
    POINT = "point"


class TidePhase(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"
    ANY = "any"


class TideType(str, Enum):
    HIGH = "HIGH"
    LOW = "LOW"


class TideDirection(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    UNKNOWN = ""


class QualityLabel(str, Enum):
    EPIC = "EPIC"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"


class Confidence(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def nautical_timezone(longitude: float) -> tzinfo:
    """Whole-hour offset of the 15-degree nautical zone containing a longitude."""
    return timezone(timedelta(hours=round(longitude / 15)))


def zone_for(name: Optional[str], longitude: float) -> tzinfo:
    """The named IANA zone, or the nautical zone of the longitude when unnamed."""
    if name:
        return ZoneInfo(name)
    return nautical_timezone(longitude)


@dataclass(frozen=True)
class ForecastSample:
    """One hourly marine + atmospheric reading.

    Heights are metres, speeds km/h, bearings degrees the quantity comes
    from.
    """
    forecast_hour_utc: datetime
    wave_height_m: float
    wave_period_s: float
    swell_direction_deg: float
    wind_direction_deg: float
    wind_speed_kmh: float = 0.0
    swell_height_m: float = 0.0
    wind_gust_kmh: float = 0.0
    air_temp_c: float = 0.0
    precipitation_mm: float = 0.0
    cloud_cover_pct: float = 0.0
    pressure_hpa: float = 0.0
    model_name: str = "open-meteo"

    def __post_init__(self):
        object.__setattr__(self, "forecast_hour_utc", ensure_utc(self.forecast_hour_utc))


@dataclass(frozen=True)
class BreakProfile:
    """Static metadata describing how a spot responds to swell, wind and tide."""
    break_type: BreakType = BreakType.BEACH
    facing_direction: str = "W"
    optimal_swell_direction: str = "W-NW"
    optimal_tide_phase: TidePhase = TidePhase.MID
    # Descriptive only; offshore is derived from facing_direction.
    optimal_wind_direction: str = "E"

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'BreakProfile':
        """
        Build a profile from spot metadata.

        Accepts snake_case or camelCase keys. Missing keys take the default
        profile's value.

        Args:
            data: Mapping of profile fields, or None

        Returns:
            BreakProfile instance
        """
        if not data:
            return DEFAULT_BREAK_PROFILE

        def pick(snake: str, camel: str, default: Any) -> Any:
            value = data.get(snake, data.get(camel))
            return default if value in (None, "") else value

        default = DEFAULT_BREAK_PROFILE
        return cls(
            break_type=BreakType(str(pick("break_type", "breakType", default.break_type.value)).lower()),
            facing_direction=str(pick("facing_direction", "facingDirection", default.facing_direction)),
            optimal_swell_direction=str(pick("optimal_swell_direction", "optimalSwellDirection",
                                             default.optimal_swell_direction)),
            optimal_tide_phase=TidePhase(str(pick("optimal_tide_phase", "optimalTidePhase",
                                                  default.optimal_tide_phase.value)).lower()),
            optimal_wind_direction=str(pick("optimal_wind_direction", "optimalWindDirection",
                                            default.optimal_wind_direction)),
        )


DEFAULT_BREAK_PROFILE = BreakProfile(
    break_type=BreakType.BEACH,
    facing_direction="W",
    optimal_swell_direction="W-NW",
    optimal_tide_phase=TidePhase.MID,
    optimal_wind_direction="E",
)


def resolve_break_profile(profile: Optional[BreakProfile]) -> BreakProfile:
    """Return the profile, or the default beach profile when none is set."""
    if profile is None:
        logging.debug("No break profile supplied, using default %s", DEFAULT_BREAK_PROFILE)
        return DEFAULT_BREAK_PROFILE
    return profile


@dataclass(frozen=True)
class TidePoint:
    time: datetime
    height_m: float
    type: Optional[TideType] = None

    def __post_init__(self):
        object.__setattr__(self, "time", ensure_utc(self.time))

    @property
    def is_extremum(self) -> bool:
        return self.type is not None


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    timezone: Optional[str] = None
    name: str = ""

    @property
    def zone(self) -> tzinfo:
        return zone_for(self.timezone, self.longitude)


@dataclass(frozen=True)
class SwellQualityScore:
    forecast_hour_utc: datetime
    score: int
    label: QualityLabel
    confidence: Confidence
    reasons: Tuple[str, ...] = field(default_factory=tuple)
    spot_id: str = ""

    def with_spot_id(self, spot_id: str) -> 'SwellQualityScore':
        """Return a copy tagged with the caller's spot id."""
        return replace(self, spot_id=spot_id)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spotId": self.spot_id,
            "forecastHourUtc": self.forecast_hour_utc.isoformat().replace("+00:00", "Z"),
            "score": self.score,
            "label": self.label.value,
            "confidence": self.confidence.value,
            "reasons": list(self.reasons),
        }
