"""Geocentric ecliptic longitude of the Sun and Moon.

Two backends:

- ``MeeusEphemeris`` (default): closed-form series from Meeus, *Astronomical
  Algorithms* (2nd ed.). Sun from ch. 25 low-precision (geometric longitude,
  ~0.01°), Moon from ch. 47 Table 47.A longitude terms (~0.003°). The Julian
  Day is taken as JDE; ignoring ΔT costs the Moon < 0.02° in the modern era.
- ``SkyfieldEphemeris``: JPL DE421 through skyfield, apparent longitude in
  the ecliptic of date. Needs the ~17MB kernel, downloaded on first use.

Both return radians in [0, 2π).
"""

import enum
import functools
import logging
import math
from pathlib import Path

from skyfield.api import Loader
from skyfield.framelib import ecliptic_frame

from thelemicdate.errors import ConfigurationError
from thelemicdate.julian import centuries_since_j2000

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


class Body(enum.Enum):
    SUN = "sun"
    MOON = "moon"


def _wrap_deg(x: float) -> float:
    return x % 360.0


# Table 47.A: multiples of D, M, M', F and the sine coefficient of Σl
# in units of 0.000001 degree.
_MOON_LONGITUDE_TERMS: tuple[tuple[int, int, int, int, int], ...] = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2048),
    (2, 0, 1, -2, -1773),
    (2, 0, 0, 2, -1595),
    (4, -1, -1, 0, 1215),
    (0, 0, 2, 2, -1110),
    (3, 0, -1, 0, -892),
    (2, 1, 1, 0, -810),
    (4, -1, -2, 0, 759),
    (0, 2, -1, 0, -713),
    (2, 2, -1, 0, -700),
    (2, 1, -2, 0, 691),
    (2, -1, 0, -2, 596),
    (4, 0, 1, 0, 549),
    (0, 0, 4, 0, 537),
    (4, -1, 0, 0, 520),
    (1, 0, -2, 0, -487),
    (2, 1, 0, -2, -399),
    (0, 0, 2, -2, -381),
    (1, 1, 1, 0, 351),
    (3, 0, -2, 0, -340),
    (4, 0, -3, 0, 330),
    (2, -1, 2, 0, 327),
    (0, 2, 1, 0, -323),
    (1, 1, -1, 0, 299),
    (2, 0, 3, 0, 294),
)


def sun_longitude_deg(jd: float) -> float:
    """Geometric longitude of the Sun, mean equinox of date (Meeus 25.2–25.4)."""
    T = centuries_since_j2000(jd)
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T * T
    M = math.radians(357.52911 + 35999.05029 * T - 0.0001537 * T * T)
    C = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M)
        + 0.000289 * math.sin(3.0 * M)
    )
    return _wrap_deg(L0 + C)


def moon_longitude_deg(jd: float) -> float:
    """Geocentric longitude of the Moon, mean equinox of date (Meeus ch. 47)."""
    T = centuries_since_j2000(jd)
    T2, T3, T4 = T * T, T * T * T, T * T * T * T

    Lp = _wrap_deg(218.3164477 + 481267.88123421 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0)
    D = _wrap_deg(297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0)
    M = _wrap_deg(357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0)
    Mp = _wrap_deg(134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0)
    F = _wrap_deg(93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0)
    A1 = _wrap_deg(119.75 + 131.849 * T)
    A2 = _wrap_deg(53.09 + 479264.290 * T)
    # Earth orbit eccentricity factor on terms containing M
    E = 1.0 - 0.002516 * T - 0.0000074 * T2

    d, m, mp, f = (math.radians(x) for x in (D, M, Mp, F))
    sum_l = 0.0
    for cd, cm, cmp, cf, coeff in _MOON_LONGITUDE_TERMS:
        term = coeff * math.sin(cd * d + cm * m + cmp * mp + cf * f)
        if abs(cm) == 1:
            term *= E
        elif abs(cm) == 2:
            term *= E * E
        sum_l += term

    sum_l += (
        3958.0 * math.sin(math.radians(A1))
        + 1962.0 * math.sin(math.radians(Lp - F))
        + 318.0 * math.sin(math.radians(A2))
    )
    return _wrap_deg(Lp + sum_l / 1_000_000.0)


class MeeusEphemeris:
    """Series ephemeris. Pure functions of the Julian Day, no data files."""

    name = "meeus"

    def longitude(self, body: Body, jd: float) -> float:
        if body is Body.SUN:
            return math.radians(sun_longitude_deg(jd))
        if body is Body.MOON:
            return math.radians(moon_longitude_deg(jd))
        raise ValueError(f"Unsupported body: {body!r}")


class SkyfieldEphemeris:
    """JPL DE421 through skyfield. The kernel is opened once, on first use."""

    name = "de421"

    def __init__(self, directory: Path, filename: str = "de421.bsp"):
        self.directory = Path(directory)
        self.filename = filename
        self._loader: Loader | None = None
        self._eph = None

    def _load(self):
        if self._eph is None:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._loader = Loader(str(self.directory))
            logger.debug("opening %s in %s", self.filename, self.directory)
            self._eph = self._loader(self.filename)
        return self._loader, self._eph

    def longitude(self, body: Body, jd: float) -> float:
        loader, eph = self._load()
        ts = loader.timescale()
        t = ts.ut1_jd(jd)
        astrometric = eph["earth"].at(t).observe(eph[body.value])
        _, lon, _ = astrometric.apparent().frame_latlon(ecliptic_frame)
        return lon.radians % TWO_PI


_default = MeeusEphemeris()


@functools.lru_cache(maxsize=None)
def make_ephemeris(name: str = "meeus", directory: Path | None = None):
    """Backend by name ("meeus" or "de421"), one instance per (name, directory).

    Raises:
        ConfigurationError: Unknown backend, or "de421" without a kernel directory.
    """
    if name == "meeus":
        return _default
    if name == "de421":
        if directory is None:
            raise ConfigurationError("de421 ephemeris needs a kernel directory")
        return SkyfieldEphemeris(directory)
    raise ConfigurationError(f"Unknown ephemeris backend: {name!r}")


def geocentric_ecliptic_longitude(body: Body, jd: float, ephemeris=None) -> float:
    """Ecliptic longitude of `body` seen from Earth's centre at Julian Day `jd`, in radians."""
    return (ephemeris or _default).longitude(body, jd)
