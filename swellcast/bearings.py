"""Compass label and bearing helpers."""

import math
from enum import Enum
from typing import Optional


class Compass(Enum):
    """16-point compass rose, valued in degrees."""
    N = 0.0
    NNE = 22.5
    NE = 45.0
    ENE = 67.5
    E = 90.0
    ESE = 112.5
    SE = 135.0
    SSE = 157.5
    S = 180.0
    SSW = 202.5
    SW = 225.0
    WSW = 247.5
    W = 270.0
    WNW = 292.5
    NW = 315.0
    NNW = 337.5


COARSE_LABELS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def normalize_bearing(deg: float) -> float:
    """Wrap a bearing into [0, 360). NaN becomes 0."""
    if deg is None or math.isnan(deg):
        return 0.0
    return deg % 360.0


def compass_to_degrees(label: Optional[str]) -> float:
    """
    Convert a 16-point compass label to degrees.

    Unknown or empty labels resolve to North (0 degrees).
    """
    if not label:
        return 0.0
    try:
        return Compass[label.strip().upper()].value
    except KeyError:
        return 0.0


def bearing_difference(a: float, b: float) -> float:
    """Smallest unsigned angle between two bearings, in [0, 180]."""
    diff = abs(normalize_bearing(a) - normalize_bearing(b)) % 360.0
    return min(diff, 360.0 - diff)


def degrees_to_compass_label(deg: float) -> str:
    """Nearest of the 8 coarse compass labels for a bearing."""
    idx = int(math.floor(normalize_bearing(deg) / 45.0 + 0.5)) % 8
    return COARSE_LABELS[idx]
