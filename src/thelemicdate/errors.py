"""Exception hierarchy. Every error is terminal for the invocation."""


class ThelemicDateError(Exception):
    """Base error."""


class ConfigurationError(ThelemicDateError):
    """Malformed setting in the environment."""


class GeocodingError(ThelemicDateError):
    """Geocoder call failure."""


class LocationNotFoundError(GeocodingError):
    """The geocoding provider returned no match for the location string."""


class GeocodingTransportError(GeocodingError):
    """Network, HTTP status, or payload failure talking to the geocoder."""


class TimezoneLookupError(GeocodingError):
    """No timezone polygon contains the resolved coordinates."""


class InvalidTimezoneError(ThelemicDateError):
    """Timezone identifier unknown to the tz database."""


class InvalidDateError(ThelemicDateError):
    """Year/month/day is not a Gregorian calendar date."""


class InvalidTimeError(ThelemicDateError):
    """Hour/minute is not a 24-hour clock time."""


class NonExistentTimeError(InvalidTimeError):
    """Local time falls in a spring-forward gap."""


class AmbiguousTimeError(ThelemicDateError):
    """Local time falls in a repeated fall-back hour."""


class NumericParseError(ThelemicDateError):
    """A command-line date field is not an integer."""


class NumeralRangeError(ThelemicDateError, ValueError):
    """Table index outside the numeral, sign, or weekday table."""
