#!/usr/bin/env python3
"""
Swell quality scorer.
Scores a saved Open-Meteo forecast for the configured spot and prints JSON.
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from swellcast.best_window import get_best_surf_window
from swellcast.config import DEFAULT_CONFIG_PATH, break_profile_from_config, load_config, location_from_config
from swellcast.models import TidePoint
from swellcast.outlook import daily_outlook
from swellcast.scoring import compute_swell_quality
from swellcast.tides import generate_synthetic_tides, tide_points_from_predictions
from swellcast.weather import merge_hourly_forecast, samples_from_frame

# Load environment variables
load_dotenv()

logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(levelname)s - %(message)s')


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("forecast", help="JSON file with 'atmospheric' and 'marine' responses")
    parser.add_argument("--tides", help="JSON file with NOAA-style 'predictions'")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML configuration file")
    parser.add_argument("--date", type=date.fromisoformat, help="Day for the best window (YYYY-MM-DD)")
    parser.add_argument("--spot-id", default="", help="Identifier echoed on each score")
    return parser.parse_args(argv)


def load_tides(path: Optional[str], config: Dict[str, Any], day: date) -> List[TidePoint]:
    if path:
        with open(path, 'r') as f:
            return tide_points_from_predictions(json.load(f).get("predictions", []))
    tides_config = config.get('tides') or {}
    if tides_config.get('synthetic'):
        logging.info("No tide file given, generating synthetic tides.")
        return generate_synthetic_tides(day, float(tides_config.get('offset_hours', 0)))
    return []


def run(args: argparse.Namespace) -> Dict[str, Any]:
    config = load_config(args.config)
    location = location_from_config(config)
    profile = break_profile_from_config(config)

    with open(args.forecast, 'r') as f:
        payload = json.load(f)
    samples = samples_from_frame(merge_hourly_forecast(payload.get("atmospheric"), payload.get("marine")))
    if not samples:
        raise ValueError(f"No forecast samples in {args.forecast}")

    tz = location.zone
    day = args.date or samples[0].forecast_hour_utc.astimezone(tz).date()
    tide_points = load_tides(args.tides, config, day)
    day_samples = [s for s in samples if s.forecast_hour_utc.astimezone(tz).date() == day]

    return {
        "spot": location.name,
        "generatedAt": datetime.now().astimezone().isoformat(),
        "scores": [
            compute_swell_quality(s, profile, location, tide_points, spot_id=args.spot_id).to_dict()
            for s in day_samples
        ],
        "bestWindow": get_best_surf_window(day_samples, profile, location, tide_points, date=day),
        "outlook": [
            {
                "date": d.date.isoformat(),
                "score": d.score.to_dict(),
                "bestWindow": d.best_window,
            }
            for d in daily_outlook(samples, profile, location, tide_points, spot_id=args.spot_id)
        ],
    }


def main(argv: Optional[List[str]] = None):
    """Main function to score a forecast file and print the result."""
    try:
        args = parse_args(argv)
        print(json.dumps(run(args), indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
