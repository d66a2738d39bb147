"""Data model definitions — explicit boundaries between input, compute, and format layers."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GeoResult:
    """Result of geocoding + timezone lookup. Input to time resolution."""

    latitude: float  # Latitude (decimal degrees)
    longitude: float  # Longitude (decimal degrees)
    timezone_id: str  # IANA timezone name ("America/Los_Angeles")
    display_name: str = ""  # Normalized place name returned by geocoder (for logs)


@dataclass(frozen=True)
class NowInput:
    """Compute for the current instant. `now` pins the clock (aware datetime)."""

    now: datetime | None = None


@dataclass(frozen=True)
class ExplicitInput:
    """Local wall-clock date/time at the location. Not yet validated."""

    year: int
    month: int
    day: int
    hour: int
    minute: int


CalendarInput = NowInput | ExplicitInput


@dataclass(frozen=True)
class ResolvedInstant:
    """A single absolute instant, with the local wall-clock view it came from."""

    local: datetime  # Aware datetime in the location's timezone
    utc: datetime  # Same instant, tzinfo=utc
    timezone_id: str


@dataclass(frozen=True)
class ZodiacPlacement:
    """Sign and whole degree within the sign for an ecliptic longitude."""

    sign: str  # "Aries" … "Pisces"
    degree: int  # 0–29
    symbol: str  # "♈" … "♓"
    sign_index: int  # 0 (Aries) – 11 (Pisces)


@dataclass(frozen=True)
class ThelemicYear:
    """Year of the era, split into 22-year cycles."""

    total_years: int  # Years elapsed since the 1904 epoch
    cycle_i: int  # Completed 22-year cycles
    cycle_ii: int  # Year within the current cycle
    label: str  # Upper numeral + lower numeral ("Vxii")


@dataclass(frozen=True)
class ThelemicDate:
    """Fully computed state. The sole input to the formatter."""

    sun: ZodiacPlacement
    moon: ZodiacPlacement
    weekday: str  # Latin day name ("Solis")
    year: ThelemicYear
    geo: GeoResult
    instant: ResolvedInstant
    julian_day: float
