"""Forecast payload parsing into ForecastSample records."""

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from swellcast.models import ForecastSample

# Open-Meteo hourly field -> ForecastSample attribute
ATMOSPHERIC_FIELDS = {
    "temperature_2m": "air_temp_c",
    "precipitation": "precipitation_mm",
    "cloudcover": "cloud_cover_pct",
    "pressure_msl": "pressure_hpa",
    "windspeed_10m": "wind_speed_kmh",
    "winddirection_10m": "wind_direction_deg",
    "windgusts_10m": "wind_gust_kmh",
}
MARINE_FIELDS = {
    "wave_height": "wave_height_m",
    "wave_period": "wave_period_s",
    "swell_wave_height": "swell_height_m",
    "swell_wave_direction": "swell_direction_deg",
}
SAMPLE_COLUMNS = list(ATMOSPHERIC_FIELDS.values()) + list(MARINE_FIELDS.values())


def _hourly_block(payload: Optional[Dict[str, Any]], name: str) -> Optional[Dict[str, Any]]:
    hourly = (payload or {}).get("hourly")
    if hourly is None:
        logging.error(f"Could not find 'hourly' in the {name} response.")
        return None
    if not isinstance(hourly, dict):
        logging.error(f"'hourly' in the {name} response is not an object.")
        return None
    return hourly


def _column(hourly: Dict[str, Any], key: str, length: int) -> pd.Series:
    values = hourly.get(key)
    if not isinstance(values, list):
        logging.warning(f"Missing hourly field '{key}', defaulting to 0.")
        values = []
    values = (values + [None] * length)[:length]
    return pd.to_numeric(pd.Series(values, dtype="object"), errors="coerce").fillna(0.0).astype(float)


def merge_hourly_forecast(
    atmospheric: Optional[Dict[str, Any]],
    marine: Optional[Dict[str, Any]]
) -> pd.DataFrame:
    """
    Merge Open-Meteo atmospheric and marine responses into one frame.

    Rows follow the atmospheric time axis. Missing or non-numeric values
    become 0.0.

    Args:
        atmospheric: Parsed JSON from the forecast endpoint
        marine: Parsed JSON from the marine endpoint

    Returns:
        pd.DataFrame with a UTC 'forecast_hour_utc' column and one column per
        sample field, or an empty DataFrame if the payloads are unusable.
    """
    atm_hourly = _hourly_block(atmospheric, "atmospheric")
    marine_hourly = _hourly_block(marine, "marine")
    if atm_hourly is None or marine_hourly is None:
        return pd.DataFrame(columns=["forecast_hour_utc"] + SAMPLE_COLUMNS)

    times = atm_hourly.get("time") or []
    if not times:
        logging.warning("Atmospheric response contained an empty 'time' list.")
        return pd.DataFrame(columns=["forecast_hour_utc"] + SAMPLE_COLUMNS)

    try:
        df = pd.DataFrame({"forecast_hour_utc": pd.to_datetime(times, utc=True)})
    except (ValueError, TypeError) as e:
        logging.error(f"Could not convert forecast times to datetime: {e}")
        return pd.DataFrame(columns=["forecast_hour_utc"] + SAMPLE_COLUMNS)

    for key, column in ATMOSPHERIC_FIELDS.items():
        df[column] = _column(atm_hourly, key, len(df))
    for key, column in MARINE_FIELDS.items():
        df[column] = _column(marine_hourly, key, len(df))

    logging.info(f"Merged {len(df)} hourly forecast rows.")
    return df


def samples_from_frame(df: pd.DataFrame, model_name: str = "open-meteo") -> List[ForecastSample]:
    """Convert a merged forecast frame into ForecastSample records."""
    samples = []
    for row in df.itertuples(index=False):
        samples.append(ForecastSample(
            forecast_hour_utc=row.forecast_hour_utc.to_pydatetime(),
            wave_height_m=row.wave_height_m,
            wave_period_s=row.wave_period_s,
            swell_direction_deg=row.swell_direction_deg,
            wind_direction_deg=row.wind_direction_deg,
            wind_speed_kmh=row.wind_speed_kmh,
            swell_height_m=row.swell_height_m,
            wind_gust_kmh=row.wind_gust_kmh,
            air_temp_c=row.air_temp_c,
            precipitation_mm=row.precipitation_mm,
            cloud_cover_pct=row.cloud_cover_pct,
            pressure_hpa=row.pressure_hpa,
            model_name=model_name,
        ))
    return samples
