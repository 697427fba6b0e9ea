"""
Conversion from calendar dates to Julian Day Numbers
"""

from datetime import date as date_type, datetime, timedelta, timezone
import math
import logging

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400


def utc_now() -> datetime:
    """Default clock: the current instant as an aware UTC datetime"""
    return datetime.now(tz=timezone.utc)


def utc_offset_days(value) -> float:
    """
    Offset of value from UTC, in days.

    Naive datetimes are taken to already be UTC and a bare date is midnight
    UTC, so both give 0.
    """
    if isinstance(value, datetime):
        offset = value.utcoffset()
        if offset is not None:
            return offset / timedelta(days=1)
        return 0.0
    if isinstance(value, date_type):
        return 0.0
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def from_date(value) -> float:
    """
    Julian Day Number of a calendar date.

    Uses the Gregorian calendar algorithm from Meeus, Astronomical Algorithms
    (ch. 7) on the value's own wall-clock fields, then removes its UTC offset.
    The day fraction counts from UTC midnight, so whole Julian days fall on
    UTC noon. Python dates are proleptic Gregorian, so the Gregorian
    correction is applied to every year, including those before 1582.

    Args:
        value (date | datetime): A valid calendar date or instant. Invalid
            dates cannot be built by the datetime constructors, so no checks
            are made here. Aware datetimes anywhere in datetime's range are
            accepted, including those whose UTC equivalent falls outside it.

    Returns:
        float: Julian Day Number, increasing monotonically with the date
    """
    offset_days = utc_offset_days(value)

    year = value.year
    month = value.month
    if month <= 2:
        year -= 1
        month += 12

    century = year // 100
    gregorian_correction = 2 - century + century // 4

    seconds = 0.0
    if isinstance(value, datetime):
        seconds = (
            value.hour * 3600
            + value.minute * 60
            + value.second
            + value.microsecond / 1_000_000
        )
    day = value.day + seconds / SECONDS_PER_DAY

    julian_day = (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + gregorian_correction
        - 1524.5
    ) - offset_days
    logger.debug(f"Julian day for {value.isoformat()}: {julian_day}")
    return julian_day
