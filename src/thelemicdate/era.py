"""Gregorian year and weekday → year of the Thelemic era and Latin day name.

The era starts in 1904. Years are written as two numerals: completed 22-year
cycles in upper case, then the year within the cycle in lower case, so 2026
after the equinox is "Vxii".
"""

from thelemicdate.errors import NumeralRangeError
from thelemicdate.models import ThelemicYear

EPOCH_YEAR = 1904
CYCLE = 22
# New year approximated as the March equinox
EQUINOX_MONTH = 3
EQUINOX_DAY = 20

NUMERALS: tuple[str, ...] = (
    "0", "i", "ii", "iii", "iv",
    "v", "vi", "vii", "viii", "ix",
    "x", "xi", "xii", "xiii", "xiv",
    "xv", "xvi", "xvii", "xviii", "xix",
    "xx", "xxi", "xxii",
)  # fmt: skip

DAYS_OF_WEEK: tuple[str, ...] = (
    "Lunae",  # Monday
    "Martis",
    "Mercurii",
    "Jovis",
    "Veneris",
    "Saturnii",
    "Solis",  # Sunday
)


def numeral(index: int) -> str:
    """Lower-case numeral for 0–22."""
    if not 0 <= index < len(NUMERALS):
        raise NumeralRangeError(
            f"Year numeral out of range: {index} (supported era years are "
            f"{EPOCH_YEAR}–{EPOCH_YEAR + CYCLE * len(NUMERALS) - 1})"
        )
    return NUMERALS[index]


def years_since_epoch(year: int, month: int, day: int, *, equinox_boundary: bool) -> int:
    """Whole era years elapsed at a Gregorian date.

    With `equinox_boundary` the era year turns over on March 20; without it,
    on January 1. Explicit dates use the boundary; the current date does not.
    """
    if equinox_boundary and (month, day) < (EQUINOX_MONTH, EQUINOX_DAY):
        return year - EPOCH_YEAR - 1
    return year - EPOCH_YEAR


def thelemic_year(total_years: int) -> ThelemicYear:
    cycle_i = total_years // CYCLE
    cycle_ii = total_years - cycle_i * CYCLE
    label = numeral(cycle_i).upper() + numeral(cycle_ii)
    return ThelemicYear(total_years=total_years, cycle_i=cycle_i, cycle_ii=cycle_ii, label=label)


def weekday_name(weekday: int) -> str:
    """Latin day name for an ISO weekday, Monday=0."""
    if not 0 <= weekday < len(DAYS_OF_WEEK):
        raise NumeralRangeError(f"Weekday out of range: {weekday}")
    return DAYS_OF_WEEK[weekday]


def map_date(
    year: int, month: int, day: int, weekday: int, *, equinox_boundary: bool = True
) -> tuple[ThelemicYear, str]:
    """Year label and day name for a local calendar date."""
    total = years_since_epoch(year, month, day, equinox_boundary=equinox_boundary)
    return thelemic_year(total), weekday_name(weekday)
