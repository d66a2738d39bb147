"""Computation layer — geocoding, time resolution, Julian Day, ephemeris, and era mapping."""

import logging
from datetime import datetime

import httpx

from thelemicdate import era, localtime
from thelemicdate.config import Settings
from thelemicdate.ephemeris import Body, geocentric_ecliptic_longitude, make_ephemeris
from thelemicdate.formatter import format_thelemic_date
from thelemicdate.geocode import resolve_location
from thelemicdate.julian import julian_day_from_datetime
from thelemicdate.models import (
    CalendarInput,
    ExplicitInput,
    GeoResult,
    NowInput,
    ResolvedInstant,
    ThelemicDate,
)
from thelemicdate.zodiac import placement

logger = logging.getLogger(__name__)


def compute_thelemic_date(
    geo: GeoResult,
    instant: ResolvedInstant,
    *,
    equinox_boundary: bool,
    settings: Settings | None = None,
) -> ThelemicDate:
    """Derive sun/moon placements, weekday, and era year for a resolved instant.

    Args:
        geo: Geocoding result the instant was resolved against.
        instant: Absolute instant with its local wall-clock view.
        equinox_boundary: Whether the era year turns over on March 20 (explicit
            dates) or on January 1 (the current date).
        settings: Selects the ephemeris backend. Defaults if None.

    Returns:
        ThelemicDate ready for formatting.
    """
    settings = settings or Settings()
    ephemeris = make_ephemeris(settings.ephemeris, settings.ephemeris_dir)

    jd = julian_day_from_datetime(instant.utc)
    sun_long = geocentric_ecliptic_longitude(Body.SUN, jd, ephemeris)
    moon_long = geocentric_ecliptic_longitude(Body.MOON, jd, ephemeris)
    logger.debug("jd=%.6f sun=%.6f rad moon=%.6f rad (%s)", jd, sun_long, moon_long, ephemeris.name)

    local = instant.local
    year, weekday = era.map_date(
        local.year,
        local.month,
        local.day,
        local.weekday(),
        equinox_boundary=equinox_boundary,
    )

    return ThelemicDate(
        sun=placement(sun_long),
        moon=placement(moon_long),
        weekday=weekday,
        year=year,
        geo=geo,
        instant=instant,
        julian_day=jd,
    )


def now(
    location: str,
    *,
    settings: Settings | None = None,
    clock: datetime | None = None,
    client: httpx.Client | None = None,
) -> ThelemicDate:
    """Thelemic date for the current instant at a location.

    The era year is counted from January 1 on this path (no equinox boundary).

    Args:
        location: Free-text place name.
        settings: Geocoder and ephemeris settings. Defaults if None.
        clock: Aware datetime used instead of the system clock.
        client: httpx client for the geocoding request.
    """
    geo = resolve_location(location, settings, client)
    instant = localtime.resolve_now(geo.timezone_id, clock)
    return compute_thelemic_date(geo, instant, equinox_boundary=False, settings=settings)


def in_day(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    location: str,
    *,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> ThelemicDate:
    """Thelemic date for a local wall-clock time at a location.

    Raises:
        GeocodingError: Location lookup failed.
        InvalidDateError, InvalidTimeError, AmbiguousTimeError: The local time
            does not name exactly one instant.
    """
    geo = resolve_location(location, settings, client)
    instant = localtime.resolve_explicit(year, month, day, hour, minute, geo.timezone_id)
    return compute_thelemic_date(geo, instant, equinox_boundary=True, settings=settings)


def run(
    calendar_input: CalendarInput,
    location: str,
    *,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> str:
    """Top-level entry point: takes a CalendarInput and a location, returns the formatted line."""
    if isinstance(calendar_input, ExplicitInput):
        date = in_day(
            calendar_input.year,
            calendar_input.month,
            calendar_input.day,
            calendar_input.hour,
            calendar_input.minute,
            location,
            settings=settings,
            client=client,
        )
    elif isinstance(calendar_input, NowInput):
        date = now(location, settings=settings, clock=calendar_input.now, client=client)
    else:
        raise TypeError(f"Unsupported calendar input: {calendar_input!r}")
    return format_thelemic_date(date)
