import sys
import os
from datetime import datetime, timezone

import pytest

# Add the project root directory (which contains the 'swellcast' package) to the Python path
# This allows pytest to find the package when running tests from the root directory
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from swellcast.models import BreakProfile, BreakType, ForecastSample, Location, TidePhase  # noqa: E402


@pytest.fixture
def lisbon():
    """Guincho, just west of Lisbon."""
    return Location(latitude=38.7325, longitude=-9.4725, timezone="Europe/Lisbon", name="Guincho")


@pytest.fixture
def beach_profile():
    return BreakProfile(
        break_type=BreakType.BEACH,
        facing_direction="W",
        optimal_swell_direction="W-NW",
        optimal_tide_phase=TidePhase.MID,
        optimal_wind_direction="E",
    )


@pytest.fixture
def midday():
    """Midsummer early afternoon in Lisbon, well inside daylight."""
    return datetime(2024, 6, 21, 13, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_sample(midday):
    """Factory for samples with full-credit conditions for a west-facing beach."""
    def _make(**overrides):
        values = dict(
            forecast_hour_utc=midday,
            wave_height_m=1.5,
            wave_period_s=14.0,
            swell_direction_deg=270.0,
            wind_direction_deg=90.0,
            wind_speed_kmh=12.0,
        )
        values.update(overrides)
        return ForecastSample(**values)
    return _make
