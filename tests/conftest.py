import pytest
from datetime import datetime, timedelta, timezone
import logging

logger = logging.getLogger(__name__)


@pytest.fixture
def new_moon_2000():
    """New moon of 6 January 2000, 18:14 UTC"""
    return datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc)


@pytest.fixture
def quarter_moons_2000():
    """Principal phases of January 2000 (UTC)"""
    return {
        'first_quarter': datetime(2000, 1, 14, 13, 34, tzinfo=timezone.utc),
        'full': datetime(2000, 1, 21, 4, 40, tzinfo=timezone.utc),
        'last_quarter': datetime(2000, 1, 28, 7, 57, tzinfo=timezone.utc),
    }


@pytest.fixture
def date_sweep():
    """Every 7 hours across three years, starting 2022-01-01 UTC"""
    start = datetime(2022, 1, 1, tzinfo=timezone.utc)
    return [start + timedelta(hours=7 * i) for i in range(3 * 365 * 24 // 7)]
