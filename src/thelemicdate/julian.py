"""Julian Day from a Gregorian UTC calendar instant (Meeus, Astronomical Algorithms ch. 7)."""

import math
from datetime import datetime

from pytz import utc

JD_J2000 = 2451545.0


def julian_day(year: int, month: int, decimal_day: float) -> float:
    """Continuous Julian Day for a Gregorian date with fractional day.

    12:00 UTC lands on a whole number, 0:00 UTC on a half.
    """
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12
    a = math.floor(y / 100)
    b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + decimal_day + b - 1524.5


def decimal_day(dt: datetime) -> float:
    """Day of month plus the elapsed fraction of that day."""
    seconds = dt.second + dt.microsecond / 1e6
    return dt.day + dt.hour / 24.0 + dt.minute / 1440.0 + seconds / 86400.0


def julian_day_from_datetime(dt: datetime) -> float:
    """Julian Day of an aware datetime. Converted to UTC before the day is split."""
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    utc_dt = dt.astimezone(utc)
    return julian_day(utc_dt.year, utc_dt.month, decimal_day(utc_dt))


def centuries_since_j2000(jd: float) -> float:
    """Julian centuries T from J2000.0."""
    return (jd - JD_J2000) / 36525.0
