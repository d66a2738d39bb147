"""Time resolution — attach a timezone to a calendar input and pin it to one UTC instant."""

import logging
from datetime import date, datetime, time

import pytz
from pytz import timezone, utc

from thelemicdate.errors import (
    AmbiguousTimeError,
    InvalidDateError,
    InvalidTimeError,
    InvalidTimezoneError,
    NonExistentTimeError,
)
from thelemicdate.models import CalendarInput, ExplicitInput, NowInput, ResolvedInstant

logger = logging.getLogger(__name__)


def _zone(timezone_id: str) -> pytz.BaseTzInfo:
    try:
        return timezone(timezone_id)
    except pytz.UnknownTimeZoneError as exc:
        raise InvalidTimezoneError(f"Invalid timezone: {timezone_id}") from exc


def resolve_now(timezone_id: str, now: datetime | None = None) -> ResolvedInstant:
    """Current instant seen from the given timezone.

    Args:
        timezone_id: IANA timezone name.
        now: Aware datetime to use instead of the system clock.
    """
    local_tz = _zone(timezone_id)
    if now is None:
        utc_dt = datetime.now(utc)
    elif now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    else:
        utc_dt = now.astimezone(utc)
    local_dt = utc_dt.astimezone(local_tz)
    return ResolvedInstant(local=local_dt, utc=utc_dt, timezone_id=timezone_id)


def resolve_explicit(
    year: int, month: int, day: int, hour: int, minute: int, timezone_id: str
) -> ResolvedInstant:
    """Local wall-clock time at a timezone, resolved to exactly one UTC instant.

    Raises:
        InvalidDateError: year/month/day is not a calendar date.
        InvalidTimeError: hour/minute is not a clock time.
        NonExistentTimeError: The wall time is skipped by a spring-forward transition.
        AmbiguousTimeError: The wall time occurs twice in a fall-back transition.
        InvalidTimezoneError: Unknown timezone id.
    """
    try:
        d = date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Invalid date: {year}-{month}-{day}") from exc
    try:
        t = time(hour, minute)
    except (ValueError, OverflowError) as exc:
        raise InvalidTimeError(f"Invalid time: {hour}:{minute}") from exc

    local_tz = _zone(timezone_id)
    naive = datetime.combine(d, t)
    try:
        local_dt = local_tz.localize(naive, is_dst=None)
    except pytz.AmbiguousTimeError as exc:
        raise AmbiguousTimeError(f"Ambiguous local time: {naive} in {timezone_id}") from exc
    except pytz.NonExistentTimeError as exc:
        raise NonExistentTimeError(f"Non-existent local time: {naive} in {timezone_id}") from exc
    except OverflowError as exc:
        raise InvalidDateError(f"Date out of range in {timezone_id}: {naive}") from exc

    try:
        utc_dt = local_dt.astimezone(utc)
    except OverflowError as exc:
        # Valid local date whose UTC instant falls outside years 1–9999
        raise InvalidDateError(f"Date out of range in UTC: {naive} {timezone_id}") from exc

    logger.debug("resolved %s %s -> %s", naive, timezone_id, utc_dt)
    return ResolvedInstant(local=local_dt, utc=utc_dt, timezone_id=timezone_id)


def resolve(calendar_input: CalendarInput, timezone_id: str) -> ResolvedInstant:
    """Dispatch on the input variant."""
    if isinstance(calendar_input, NowInput):
        return resolve_now(timezone_id, calendar_input.now)
    if isinstance(calendar_input, ExplicitInput):
        return resolve_explicit(
            calendar_input.year,
            calendar_input.month,
            calendar_input.day,
            calendar_input.hour,
            calendar_input.minute,
            timezone_id,
        )
    raise TypeError(f"Unsupported calendar input: {calendar_input!r}")
