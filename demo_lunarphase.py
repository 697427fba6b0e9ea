#!/usr/bin/env python3
import os
from datetime import datetime, timezone
import logging

import dotenv

dotenv.load_dotenv(override=True)

import log_config
from lunarphase import Hemisphere, moon_snapshot

logger = logging.getLogger(__name__)


def parse_moon_date(value):
    """Parse an ISO 8601 date or datetime, treating naive values as UTC"""
    if not value:
        return None
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def main():
    log_config.setup_logging()

    # Use environment variables or fall back to the northern hemisphere, now
    hemisphere = os.getenv('hemisphere', Hemisphere.NORTHERN.value)
    try:
        moment = parse_moon_date(os.getenv('moon_date'))
    except ValueError:
        logger.warning(f"Invalid moon_date '{os.getenv('moon_date')}', using the current time")
        moment = None

    try:
        snapshot = moon_snapshot(moment, {'hemisphere': hemisphere})
    except ValueError as e:
        logger.error(f"Error calculating moon phase: {e}")
        return 1

    print("\nMoon:")
    print(f"Phase: {snapshot.phase.value} {snapshot.emoji}")
    print(f"Age: {snapshot.age:.2f} days ({snapshot.age_percent * 100:.1f}% of the synodic month)")
    print(f"Lunation: {snapshot.lunation_number}")
    print(f"Distance: {snapshot.distance:.2f} Earth radii")
    print(f"Waxing: {snapshot.is_waxing}")
    print(f"Julian day: {snapshot.julian_day:.5f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
