"""Ecliptic longitude → zodiac sign and whole degree within the sign."""

import math

from thelemicdate.errors import NumeralRangeError
from thelemicdate.models import ZodiacPlacement

SIGNS: tuple[tuple[str, str], ...] = (
    ("Aries", "♈"),
    ("Taurus", "♉"),
    ("Gemini", "♊"),
    ("Cancer", "♋"),
    ("Leo", "♌"),
    ("Virgo", "♍"),
    ("Libra", "♎"),
    ("Scorpio", "♏"),
    ("Sagittarius", "♐"),
    ("Capricorn", "♑"),
    ("Aquarius", "♒"),
    ("Pisces", "♓"),
)


def sign_at(index: int) -> tuple[str, str]:
    """(name, glyph) for a sign index 0–11."""
    if not 0 <= index < len(SIGNS):
        raise NumeralRangeError(f"Sign index out of range: {index}")
    return SIGNS[index]


def normalized_degrees(longitude: float) -> float:
    """Radians to degrees in [0, 360)."""
    return math.degrees(longitude) % 360.0


def placement(longitude: float) -> ZodiacPlacement:
    """Map an ecliptic longitude in radians onto the twelve 30° signs."""
    degrees = normalized_degrees(longitude)
    # % 360.0 can round a tiny negative up to exactly 360.0
    index = int(degrees // 30.0) % 12
    name, symbol = sign_at(index)
    return ZodiacPlacement(
        sign=name,
        degree=int(degrees % 30.0),
        symbol=symbol,
        sign_index=index,
    )
