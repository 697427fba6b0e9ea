"""
Moon age, distance, lunation and phase from Julian day arithmetic
"""

from datetime import date as date_type
from typing import Any, Callable, Mapping, Optional, Union
import math
import logging

from . import julian_day
from .constants import (
    ANOMALISTIC_MONTH,
    ANOMALY_AMPLITUDE,
    EVECTION_AMPLITUDE,
    FIRST_QUARTER_AGE_LIMIT,
    FULL_MOON_AGE_LIMIT,
    LAST_QUARTER_AGE_LIMIT,
    LUNATION_BASE_JULIAN_DAY,
    MEAN_DISTANCE,
    NEW_MOON_AGE_LIMIT,
    NEW_MOON_REFERENCE_JULIAN_DAY,
    PERIGEE_REFERENCE_JULIAN_DAY,
    SYNODIC_MONTH,
    VARIATION_AMPLITUDE,
    WANING_CRESCENT_AGE_LIMIT,
    WANING_GIBBOUS_AGE_LIMIT,
    WAXING_AGE_LIMIT,
    WAXING_CRESCENT_AGE_LIMIT,
    WAXING_GIBBOUS_AGE_LIMIT,
)
from .emoji import emoji_for_lunar_phase
from .math_utils import normalize, round_half_up
from .models import LunarPhase, MoonOptions, MoonSnapshot, resolve_options

logger = logging.getLogger(__name__)

Clock = Callable[[], date_type]
Options = Optional[Union[MoonOptions, Mapping[str, Any]]]

# Ascending upper bounds; anything past the last one wraps back to NEW
PHASE_AGE_LIMITS = (
    (NEW_MOON_AGE_LIMIT, LunarPhase.NEW),
    (WAXING_CRESCENT_AGE_LIMIT, LunarPhase.WAXING_CRESCENT),
    (FIRST_QUARTER_AGE_LIMIT, LunarPhase.FIRST_QUARTER),
    (WAXING_GIBBOUS_AGE_LIMIT, LunarPhase.WAXING_GIBBOUS),
    (FULL_MOON_AGE_LIMIT, LunarPhase.FULL),
    (WANING_GIBBOUS_AGE_LIMIT, LunarPhase.WANING_GIBBOUS),
    (LAST_QUARTER_AGE_LIMIT, LunarPhase.LAST_QUARTER),
    (WANING_CRESCENT_AGE_LIMIT, LunarPhase.WANING_CRESCENT),
)


def _julian_day(date, clock: Clock) -> float:
    """Julian day of date, reading the clock once when no date is given"""
    if date is None:
        date = clock()
    return julian_day.from_date(date)


def _age_percent(jd: float) -> float:
    return normalize((jd - NEW_MOON_REFERENCE_JULIAN_DAY) / SYNODIC_MONTH)


def _age(jd: float) -> float:
    return _age_percent(jd) * SYNODIC_MONTH


def _lunation_number(jd: float) -> int:
    return round_half_up((jd - LUNATION_BASE_JULIAN_DAY) / SYNODIC_MONTH) + 1


def _distance(jd: float) -> float:
    radians = _age_percent(jd) * 2 * math.pi
    anomaly = 2 * math.pi * normalize((jd - PERIGEE_REFERENCE_JULIAN_DAY) / ANOMALISTIC_MONTH)

    return (
        MEAN_DISTANCE
        - ANOMALY_AMPLITUDE * math.cos(anomaly)
        - EVECTION_AMPLITUDE * math.cos(2 * radians - anomaly)
        - VARIATION_AMPLITUDE * math.cos(2 * radians)
    )


def phase_for_age(age: float) -> LunarPhase:
    """Classify a lunar age in days into one of the eight phases."""
    for limit, phase in PHASE_AGE_LIMITS:
        if age < limit:
            return phase
    return LunarPhase.NEW


def lunar_age(date=None, clock: Clock = julian_day.utc_now) -> float:
    """
    Moon's age, or Earth days since the last new moon.

    Args:
        date (date | datetime, optional): Date used for calculation. Defaults to now.
        clock (callable, optional): Source of "now" when date is omitted.

    Returns:
        float: Age of the moon in [0, SYNODIC_MONTH)
    """
    return _age(_julian_day(date, clock))


def lunar_age_percent(date=None, clock: Clock = julian_day.utc_now) -> float:
    """
    Fraction of the way through the synodic month.

    Returns:
        float: 0 at new moon, about 0.5 at full moon, always below 1
    """
    return _age_percent(_julian_day(date, clock))


def lunation_number(date=None, clock: Clock = julian_day.utc_now) -> int:
    """
    Brown Lunation Number (BLN), per Ernest William Brown's lunar theory,
    defining Lunation 1 as the first new moon of 1923 at approximately
    02:41 UTC, January 17, 1923.

    Halves round up, so the count steps by one at each new moon.
    """
    return _lunation_number(_julian_day(date, clock))


def lunar_distance(date=None, clock: Clock = julian_day.utc_now) -> float:
    """
    Distance to the moon in Earth radii, with perigee near 56 and apogee
    near 63.8.

    Combines the synodic phase angle with the anomalistic month through a
    three-term cosine approximation.
    """
    return _distance(_julian_day(date, clock))


def lunar_phase(date=None, clock: Clock = julian_day.utc_now) -> LunarPhase:
    """Phase of the moon on the given date."""
    return phase_for_age(lunar_age(date, clock))


def lunar_phase_emoji(date=None, options: Options = None, clock: Clock = julian_day.utc_now) -> str:
    """
    Emoji of the lunar phase on the given date.

    Args:
        date (date | datetime, optional): Date used for calculation. Defaults to now.
        options (MoonOptions | dict, optional): Hemisphere selection, Northern by default.
        clock (callable, optional): Source of "now" when date is omitted.

    Returns:
        str: Emoji for the phase
    """
    return emoji_for_lunar_phase(lunar_phase(date, clock), options)


def is_waxing(date=None, clock: Clock = julian_day.utc_now) -> bool:
    """Whether the moon is growing. The midpoint of the month counts as waxing."""
    return lunar_age(date, clock) <= WAXING_AGE_LIMIT


def is_waning(date=None, clock: Clock = julian_day.utc_now) -> bool:
    """Whether the moon is shrinking."""
    return lunar_age(date, clock) > WAXING_AGE_LIMIT


def moon_snapshot(date=None, options: Options = None, clock: Clock = julian_day.utc_now) -> MoonSnapshot:
    """
    Every lunar quantity for a single instant.

    The clock is read at most once, so all fields describe the same moment.

    Args:
        date (date | datetime, optional): Date used for calculation. Defaults to now.
        options (MoonOptions | dict, optional): Hemisphere selection for the emoji.
        clock (callable, optional): Source of "now" when date is omitted.

    Returns:
        MoonSnapshot: Julian day, age, age percent, lunation number,
        distance, phase, emoji and waxing/waning flags
    """
    options = resolve_options(options)
    jd = _julian_day(date, clock)
    age = _age(jd)
    phase = phase_for_age(age)

    snapshot = MoonSnapshot(
        julian_day=jd,
        age=age,
        age_percent=_age_percent(jd),
        lunation_number=_lunation_number(jd),
        distance=_distance(jd),
        phase=phase,
        emoji=emoji_for_lunar_phase(phase, options),
        is_waxing=age <= WAXING_AGE_LIMIT,
        is_waning=age > WAXING_AGE_LIMIT,
    )
    logger.debug(f"Moon snapshot: {snapshot}")
    return snapshot
