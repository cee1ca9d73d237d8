"""Configuration management for the swell scoring service."""

import os
from typing import Any, Dict

import yaml

from swellcast.models import BreakProfile, Location

DEFAULT_CONFIG_PATH = "config.yaml"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file; SWELLCAST_CONFIG overrides the default

    Returns:
        Parsed configuration mapping
    """
    if config_path == DEFAULT_CONFIG_PATH:
        config_path = os.getenv("SWELLCAST_CONFIG", config_path)

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(
            f"Configuration file not found at {config_path}")
    except yaml.YAMLError as e:
        raise ValueError(
            f"Error parsing configuration file {config_path}: {e}")

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")
    return config


def location_from_config(config: Dict[str, Any]) -> Location:
    location = config['location']
    return Location(
        latitude=float(location['lat']),
        longitude=float(location['lon']),
        timezone=location.get('timezone'),
        name=location.get('name', ''),
    )


def break_profile_from_config(config: Dict[str, Any]) -> BreakProfile:
    """Break profile from the config, falling back to the default beach profile."""
    return BreakProfile.from_dict(config.get('break_profile'))
