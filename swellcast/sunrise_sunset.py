"""Module for computing sunrise and sunset times and filtering samples to daylight."""

from datetime import date as date_type
from datetime import datetime, time, timedelta
from typing import Iterable, List, Optional, Union
from dataclasses import dataclass

from astral import Observer
from astral.sun import elevation, noon, sunrise, sunset

from swellcast.models import ForecastSample, ensure_utc, nautical_timezone, zone_for


@dataclass
class SunTimes:
    sunrise: Optional[datetime]
    sunset: Optional[datetime]

    @property
    def day_length(self) -> timedelta:
        if self.sunrise is None or self.sunset is None:
            return timedelta(0)
        return self.sunset - self.sunrise

    def contains(self, moment: datetime) -> bool:
        """True when the moment lies between sunrise and sunset, inclusive."""
        if self.sunrise is None or self.sunset is None:
            return False
        return self.sunrise <= moment <= self.sunset


def solar_day(moment: datetime, longitude: float) -> date_type:
    """
    The day whose sunrise-sunset span a moment belongs to.

    Days are counted in the nautical zone of the longitude, where midnight
    falls in darkness and sunrise and sunset share a date.
    """
    return ensure_utc(moment).astimezone(nautical_timezone(longitude)).date()


def get_sun_times(
    date: Union[date_type, datetime],
    latitude: float,
    longitude: float,
    timezone: Optional[str] = None
) -> SunTimes:
    """
    Get sunrise and sunset times for a location on a local calendar day.

    Args:
        date: The day to compute for; datetimes are converted to the local day
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        timezone: IANA zone name that defines the calendar day and the zone
                  of the returned times. None uses the longitude's nautical
                  zone (UTC offset of longitude / 15 hours, rounded).

    Returns:
        SunTimes with timezone-aware sunrise and sunset around that day's
        solar noon. During polar day the whole day is returned; during polar
        night both are None.
    """
    tz = zone_for(timezone, longitude)
    if isinstance(date, datetime):
        day = ensure_utc(date).astimezone(tz).date()
    else:
        day = date
    # Sunrise and sunset of the same solar day, whatever zone they are shown in
    solar_tz = nautical_timezone(longitude)
    observer = Observer(latitude=latitude, longitude=longitude)

    try:
        return SunTimes(
            sunrise=sunrise(observer, date=day, tzinfo=solar_tz).astimezone(tz),
            sunset=sunset(observer, date=day, tzinfo=solar_tz).astimezone(tz),
        )
    except ValueError:
        # Sun never crosses the horizon; decide between polar day and night
        solar_noon = noon(observer, date=day, tzinfo=solar_tz)
        if elevation(observer, solar_noon) > 0:
            return SunTimes(
                sunrise=datetime.combine(day, time.min, tzinfo=solar_tz).astimezone(tz),
                sunset=datetime.combine(day, time.max.replace(microsecond=0), tzinfo=solar_tz).astimezone(tz),
            )
        return SunTimes(sunrise=None, sunset=None)


def is_daylight(
    timestamp: datetime,
    latitude: float,
    longitude: float,
    timezone: Optional[str] = None
) -> bool:
    """Check whether a timestamp falls between sunrise and sunset of its own day."""
    moment = ensure_utc(timestamp)
    day = solar_day(moment, longitude)
    return get_sun_times(day, latitude, longitude, timezone).contains(moment)


def filter_daylight(
    samples: Iterable[ForecastSample],
    latitude: float,
    longitude: float,
    timezone: Optional[str] = None,
    date: Optional[Union[date_type, datetime]] = None
) -> List[ForecastSample]:
    """
    Keep only the samples that fall in daylight, preserving order.

    Args:
        samples: Forecast samples to filter
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        timezone: IANA zone name that defines the calendar day; None uses
                  the longitude's nautical zone
        date: When given, every sample is tested against this day's sun
              times instead of its own

    Returns:
        List of daylight samples
    """
    if date is not None:
        fixed = get_sun_times(date, latitude, longitude, timezone)
        return [s for s in samples if fixed.contains(s.forecast_hour_utc)]

    by_day = {}
    daylight = []
    for sample in samples:
        day = solar_day(sample.forecast_hour_utc, longitude)
        if day not in by_day:
            by_day[day] = get_sun_times(day, latitude, longitude, timezone)
        if by_day[day].contains(sample.forecast_hour_utc):
            daylight.append(sample)
    return daylight
