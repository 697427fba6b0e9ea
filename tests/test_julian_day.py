import pytest
from datetime import date, datetime, timedelta, timezone
from freezegun import freeze_time
from lunarphase.julian_day import from_date, utc_now, utc_offset_days


def test_j2000_epoch():
    """Noon UTC on 1 January 2000 is Julian day 2451545.0"""
    assert from_date(datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)) == pytest.approx(2451545.0, abs=1e-9)


def test_unix_epoch():
    assert from_date(datetime(1970, 1, 1, tzinfo=timezone.utc)) == pytest.approx(2440587.5, abs=1e-9)


def test_brown_lunation_day():
    """Midnight UTC on 17 January 1923"""
    assert from_date(datetime(1923, 1, 17, tzinfo=timezone.utc)) == pytest.approx(2423436.5, abs=1e-9)


def test_day_fraction():
    """Hours, minutes, seconds and microseconds all contribute to the fraction"""
    base = from_date(datetime(2020, 6, 1, tzinfo=timezone.utc))
    later = from_date(datetime(2020, 6, 1, 6, 30, 15, 500000, tzinfo=timezone.utc))
    expected = (6 * 3600 + 30 * 60 + 15.5) / 86400
    assert later - base == pytest.approx(expected, abs=1e-6)


def test_plain_date_is_midnight_utc():
    assert from_date(date(2000, 1, 1)) == pytest.approx(2451544.5, abs=1e-9)


def test_naive_datetime_is_utc():
    naive = datetime(2015, 3, 20, 9, 46)
    aware = datetime(2015, 3, 20, 9, 46, tzinfo=timezone.utc)
    assert from_date(naive) == from_date(aware)


def test_aware_datetime_converted_to_utc():
    """13:00 at UTC+1 is the same instant as noon UTC"""
    plus_one = timezone(timedelta(hours=1))
    assert from_date(datetime(2000, 1, 1, 13, 0, tzinfo=plus_one)) == pytest.approx(2451545.0, abs=1e-6)


def test_leap_day():
    feb_28 = from_date(datetime(2024, 2, 28, tzinfo=timezone.utc))
    mar_1 = from_date(datetime(2024, 3, 1, tzinfo=timezone.utc))
    assert mar_1 - feb_28 == pytest.approx(2.0, abs=1e-9)


def test_monotonic_across_calendar_boundaries():
    """Consecutive days differ by exactly one across months and years"""
    start = datetime(1899, 12, 25, tzinfo=timezone.utc)
    previous = from_date(start)
    for offset in range(1, 800):
        current = from_date(start + timedelta(days=offset))
        assert current - previous == pytest.approx(1.0, abs=1e-9)
        previous = current


def test_matches_elapsed_days():
    """Julian day differences match datetime arithmetic"""
    first = datetime(1582, 10, 15, tzinfo=timezone.utc)
    second = datetime(2100, 7, 4, 18, 0, tzinfo=timezone.utc)
    elapsed = (second - first) / timedelta(days=1)
    assert from_date(second) - from_date(first) == pytest.approx(elapsed, abs=1e-6)


def test_rejects_non_dates():
    with pytest.raises(TypeError, match="Expected a date or datetime"):
        from_date("2000-01-01")


def test_offset_instant_matches_utc():
    tokyo = timezone(timedelta(hours=9))
    moment = datetime(2021, 5, 26, 20, 14, tzinfo=tokyo)
    assert from_date(moment) == pytest.approx(from_date(datetime(2021, 5, 26, 11, 14, tzinfo=timezone.utc)), abs=1e-6)


def test_matches_unix_time_formula():
    """Milliseconds since the Unix epoch / 86400000 + 2440587.5"""
    moment = datetime(2021, 5, 26, 11, 14, tzinfo=timezone.utc)
    unix_days = (moment - datetime(1970, 1, 1, tzinfo=timezone.utc)) / timedelta(days=1)
    assert from_date(moment) == pytest.approx(unix_days + 2440587.5, abs=1e-8)


def test_aware_datetimes_at_range_ends():
    """Offsets that would push the UTC instant outside datetime's range still convert"""
    first = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
    last = datetime(9999, 12, 31, 23, tzinfo=timezone(timedelta(hours=-5)))

    assert from_date(first) == pytest.approx(from_date(datetime(1, 1, 1)) - 1 / 24, abs=1e-6)
    assert from_date(last) == pytest.approx(from_date(datetime(9999, 12, 31, 23)) + 5 / 24, abs=1e-6)


@pytest.mark.parametrize("value, expected", [
    (datetime(2000, 1, 1), 0.0),
    (date(2000, 1, 1), 0.0),
    (datetime(2000, 1, 1, tzinfo=timezone.utc), 0.0),
    (datetime(2000, 1, 1, tzinfo=timezone(timedelta(hours=6))), 0.25),
    (datetime(2000, 1, 1, tzinfo=timezone(timedelta(hours=-12))), -0.5),
])
def test_utc_offset_days(value, expected):
    assert utc_offset_days(value) == expected


@freeze_time("2023-12-23 12:00:00")
def test_utc_now_is_aware():
    now = utc_now()
    assert now.utcoffset() == timedelta(0)
    assert from_date(now) == pytest.approx(from_date(datetime(2023, 12, 23, 12, 0, tzinfo=timezone.utc)), abs=1e-9)
