"""The one output line."""

from thelemicdate.models import ThelemicDate

TEMPLATE = "☉ in {sun_degree}º {sun_sign} : ☽ in {moon_degree}º {moon_sign} : dies {weekday} : Anno {year} æræ legis"


def format_thelemic_date(date: ThelemicDate) -> str:
    return TEMPLATE.format(
        sun_degree=date.sun.degree,
        sun_sign=date.sun.sign,
        moon_degree=date.moon.degree,
        moon_sign=date.moon.sign,
        weekday=date.weekday,
        year=date.year.label,
    )
