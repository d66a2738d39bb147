from datetime import datetime

import pytest
from pytz import utc

from thelemicdate.errors import (
    AmbiguousTimeError,
    InvalidDateError,
    InvalidTimeError,
    InvalidTimezoneError,
    NonExistentTimeError,
)
from thelemicdate.localtime import resolve, resolve_explicit, resolve_now
from thelemicdate.models import ExplicitInput, NowInput


def test_explicit_utc():
    instant = resolve_explicit(2000, 1, 1, 12, 0, "Etc/UTC")
    assert instant.utc == datetime(2000, 1, 1, 12, 0, tzinfo=utc)
    assert instant.timezone_id == "Etc/UTC"


def test_explicit_applies_offset():
    instant = resolve_explicit(2024, 1, 15, 7, 0, "America/New_York")
    assert instant.utc == datetime(2024, 1, 15, 12, 0, tzinfo=utc)
    assert (instant.local.year, instant.local.month, instant.local.day, instant.local.hour) == (2024, 1, 15, 7)


def test_explicit_summer_offset():
    instant = resolve_explicit(2024, 7, 15, 7, 0, "America/New_York")
    assert instant.utc == datetime(2024, 7, 15, 11, 0, tzinfo=utc)


def test_spring_forward_gap_is_rejected():
    with pytest.raises(NonExistentTimeError) as exc_info:
        resolve_explicit(2024, 3, 10, 2, 30, "America/New_York")
    assert isinstance(exc_info.value, InvalidTimeError)


def test_fall_back_hour_is_ambiguous():
    with pytest.raises(AmbiguousTimeError):
        resolve_explicit(2024, 11, 3, 1, 30, "America/New_York")


@pytest.mark.parametrize("y, m, d", [(2023, 2, 29), (2024, 13, 1), (2024, 4, 31), (2024, 0, 1)])
def test_invalid_dates(y, m, d):
    with pytest.raises(InvalidDateError):
        resolve_explicit(y, m, d, 0, 0, "Etc/UTC")


@pytest.mark.parametrize("h, mi", [(24, 0), (12, 60), (-1, 0)])
def test_invalid_times(h, mi):
    with pytest.raises(InvalidTimeError):
        resolve_explicit(2024, 1, 1, h, mi, "Etc/UTC")


def test_unknown_timezone():
    with pytest.raises(InvalidTimezoneError):
        resolve_explicit(2024, 1, 1, 0, 0, "Mars/Olympus_Mons")
    with pytest.raises(InvalidTimezoneError):
        resolve_now("Mars/Olympus_Mons")


def test_now_keeps_local_view():
    pinned = datetime(2026, 10, 17, 3, 0, tzinfo=utc)
    instant = resolve_now("America/Los_Angeles", pinned)
    assert instant.utc == pinned
    assert (instant.local.month, instant.local.day, instant.local.hour) == (10, 16, 20)


def test_now_reads_clock():
    before = datetime.now(utc)
    instant = resolve_now("Europe/London")
    after = datetime.now(utc)
    assert before <= instant.utc <= after


def test_now_rejects_naive_clock():
    with pytest.raises(ValueError):
        resolve_now("Etc/UTC", datetime(2026, 1, 1))


def test_resolve_dispatch():
    pinned = datetime(2026, 1, 1, tzinfo=utc)
    assert resolve(NowInput(now=pinned), "Etc/UTC").utc == pinned
    assert resolve(ExplicitInput(2026, 1, 1, 0, 0), "Etc/UTC").utc == pinned


@pytest.mark.parametrize(
    "y, m, d, h, mi, zone",
    [
        (9999, 12, 31, 23, 0, "America/Los_Angeles"),
        (1, 1, 1, 0, 0, "Asia/Tokyo"),
    ],
)
def test_local_date_outside_utc_range(y, m, d, h, mi, zone):
    with pytest.raises(InvalidDateError, match="out of range"):
        resolve_explicit(y, m, d, h, mi, zone)
