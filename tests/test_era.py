from datetime import date, timedelta

import pytest

from thelemicdate.era import (
    DAYS_OF_WEEK,
    NUMERALS,
    map_date,
    numeral,
    thelemic_year,
    weekday_name,
    years_since_epoch,
)
from thelemicdate.errors import NumeralRangeError


def test_numeral_table():
    assert len(NUMERALS) == 23
    assert numeral(0) == "0"
    assert numeral(4) == "iv"
    assert numeral(22) == "xxii"


@pytest.mark.parametrize("index", [-1, 23, 1000])
def test_numeral_out_of_range(index):
    with pytest.raises(NumeralRangeError):
        numeral(index)


@pytest.mark.parametrize(
    "total, label",
    [
        (0, "00"),
        (1, "0i"),
        (21, "0xxi"),
        (22, "I0"),
        (88, "IV0"),
        (122, "Vxii"),
        (505, "XXIIxxi"),
    ],
)
def test_year_labels(total, label):
    assert thelemic_year(total).label == label


def test_cycles_cover_supported_window():
    for total in range(0, 22 * 23):
        year = thelemic_year(total)
        assert 0 <= year.cycle_i <= 22
        assert 0 <= year.cycle_ii <= 21
        assert year.cycle_i * 22 + year.cycle_ii == total


@pytest.mark.parametrize("total", [-1, 22 * 23])
def test_year_outside_window_raises(total):
    with pytest.raises(NumeralRangeError):
        thelemic_year(total)


@pytest.mark.parametrize(
    "y, m, d, boundary, expected",
    [
        (1904, 3, 20, True, 0),
        (1905, 3, 19, True, 0),
        (1905, 3, 20, True, 1),
        (1905, 1, 1, True, 0),
        (1905, 12, 31, True, 1),
        (1905, 1, 1, False, 1),
        (1905, 3, 19, False, 1),
        (2026, 10, 17, False, 122),
    ],
)
def test_years_since_epoch(y, m, d, boundary, expected):
    assert years_since_epoch(y, m, d, equinox_boundary=boundary) == expected


def test_weekdays_are_a_bijection():
    names = [weekday_name(i) for i in range(7)]
    assert len(set(names)) == 7
    assert tuple(names) == DAYS_OF_WEEK
    # 2024-01-01 was a Monday
    start = date(2024, 1, 1)
    for offset, name in enumerate(names):
        assert weekday_name((start + timedelta(days=offset)).weekday()) == name
    assert weekday_name(date(2024, 1, 7).weekday()) == "Solis"


@pytest.mark.parametrize("weekday", [-1, 7])
def test_weekday_out_of_range(weekday):
    with pytest.raises(NumeralRangeError):
        weekday_name(weekday)


def test_map_date():
    year, day_name = map_date(1904, 3, 20, date(1904, 3, 20).weekday())
    assert year.label == "00"
    assert day_name == "Solis"


def test_map_date_before_epoch_raises():
    with pytest.raises(NumeralRangeError):
        map_date(1903, 6, 1, 0)
