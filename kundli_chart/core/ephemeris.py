"""
ephemeris.py  -  Time scale, reference frame and body longitudes
================================================================
Simplified Vedic ephemeris.

Time scale:
  * day number   : continuous day count, zero at 2000-01-01 12:00 UT
  * Julian Date  : 1720995.0-based calendar conversion with Delta-T,
                   rounded to 7 decimals so results are reproducible
  * Delta-T      : piecewise polynomial, modeled for 1986-2050 only

Reference frame:
  * ayanamsa     : quadratic-in-year Lahiri-style model
  * obliquity    : linear-in-century mean obliquity, centuries from JD 0

Bodies:
  * Sun, Mars, Mercury, Jupiter, Venus, Saturn : mean-element linear model
  * Moon                                       : truncated Meeus Ch. 47 series
  * Rahu                                       : mean node regression
  * Ketu                                       : always Rahu + 180

Accuracy: the mean-element planets drift by degrees away from the epoch.
This is a chart-drawing approximation, not an ephemeris.
"""

import logging
import math
from enum import Enum
from types import MappingProxyType
from typing import Tuple

logger = logging.getLogger(__name__)

# ── Constants ──────────────────────────────────────────────────
DEG = math.pi / 180.0
RAD = 180.0 / math.pi
J2000 = 2451545.0
NODE_EPOCH = 2415020.5          # 1900 Jan 0.5, epoch of the node model
DAY_NUMBER_OFFSET = 730550.5
JULIAN_DAY_BASE = 1720995.0
GREGORIAN_REFORM = 15821004     # yyyymmdd after the Jan/Feb shift
GREGORIAN_REFORM_DAYS = 588829  # dd + 31*(mm + 12*yy) on 1582-10-15
DAYS_PER_CENTURY = 36525.0


class Body(Enum):
    """The ten chart points, in fixed chart order."""

    ASCENDANT = (0, "As", "Ascendant")
    SUN       = (1, "Su", "Sun")
    MOON      = (2, "Mo", "Moon")
    MARS      = (3, "Ma", "Mars")
    MERCURY   = (4, "Me", "Mercury")
    JUPITER   = (5, "Ju", "Jupiter")
    VENUS     = (6, "Ve", "Venus")
    SATURN    = (7, "Sa", "Saturn")
    RAHU      = (8, "Ra", "Rahu")
    KETU      = (9, "Ke", "Ketu")

    def __init__(self, index: int, symbol: str, label: str):
        self.index = index
        self.symbol = symbol
        self.label = label

    @classmethod
    def from_symbol(cls, symbol: str) -> "Body":
        for body in cls:
            if body.symbol == symbol:
                return body
        raise ValueError(f"Unknown body symbol: {symbol!r}")


BODIES: Tuple[Body, ...] = tuple(Body)

# Mean longitude at the day-number epoch (deg) and daily motion (deg/day)
MEAN_ELEMENTS = MappingProxyType({
    Body.SUN:     (280.46457, 0.98564736),
    Body.MARS:    (355.4533,  0.524071),
    Body.MERCURY: (252.251,   4.09233),
    Body.JUPITER: (34.4044,   0.08309),
    Body.VENUS:   (181.9798,  1.60214),
    Body.SATURN:  (49.9443,   0.03346),
})

# Leading terms of Meeus Table 47.A: (coefficient, D, M, M', F)
MOON_LONGITUDE_TERMS = (
    ( 6288774, 0, 0,  1, 0),
    ( 1274027, 2, 0, -1, 0),
    (  658314, 2, 0,  0, 0),
    (  213618, 0, 0,  2, 0),
    ( -185116, 0, 1,  0, 0),
    ( -114332, 0, 0,  0, 2),
)


def mod360(x: float) -> float:
    """Normalize angle to [0, 360)."""
    a = math.fmod(x, 360.0)
    if a < 0.0:
        a += 360.0
    # -1e-17 + 360 rounds to 360.0
    return a if a < 360.0 else 0.0


def _r(x):
    """Degrees to radians."""
    return x * DEG


def _round7(value: float) -> float:
    scaled = value * 10_000_000
    whole = math.floor(scaled)
    if scaled - whole > 0.5:
        whole += 1
    return whole / 10_000_000


# ── Time scale ─────────────────────────────────────────────────

def calc_day_number(year: int, month: int, day: int,
                    hour: int, minute: int, timezone_offset: float) -> float:
    """
    Days since 2000-01-01 12:00 UT for a civil date and local time.

    January and February count as months 13 and 14 of the previous year.
    Dates after 1582-10-04 carry the Gregorian leap correction.
    """
    yy, mm = year, month
    if mm < 3:
        yy -= 1
        mm += 12

    if yy * 10000 + mm * 100 + day > GREGORIAN_REFORM:
        a = math.floor(0.01 * yy)
        b = 2 - a + math.floor(0.25 * a)
    else:
        b = 0

    c = math.floor(365.25 * yy)
    d = math.floor(30.6001 * (mm + 1))
    return (b + c + d - DAY_NUMBER_OFFSET + day
            + ((hour - timezone_offset) + minute / 60.0) / 24.0)


def calc_julian_date(year: int, month: int, day: int,
                     hour: int, minute: int, timezone_offset: float) -> float:
    """
    Julian Date (with Delta-T folded into the day fraction), 7 decimals.
    """
    if month > 2:
        jy, jm = year, month + 1
    else:
        jy, jm = year - 1, month + 13

    j = math.floor(365.25 * jy) + math.floor(30.6001 * jm) + day + JULIAN_DAY_BASE
    if day + 31 * (month + 12 * year) >= GREGORIAN_REFORM_DAYS:
        a = math.floor(0.01 * jy)
        j += 2 - a + math.floor(0.25 * a)

    # Julian days start at noon
    df = (hour - timezone_offset) / 24.0 - 0.5
    if df < 0.0:
        df += 1.0
        j -= 1

    fc = df + (minute + calc_delta_t(year) / 60.0) / 60.0 / 24.0
    return _round7(j + fc)


def delta_t_in_range(year: int) -> bool:
    """True when calc_delta_t has a polynomial for this year."""
    y = year + 0.5 / 12
    return 1986 < y <= 2050


def calc_delta_t(year: int) -> float:
    """
    Delta-T in seconds (Espenak & Meeus polynomials).
    Returns 0 outside 1986-2050; see delta_t_in_range().
    """
    y = year + 0.5 / 12
    if 2005 < y <= 2050:
        t = y - 2000
        c = -0.000012932 * (y - 1955) ** 2
        return 62.92 + 0.32217 * t + 0.005589 * t * t + c
    if 1986 < y <= 2005:
        t = y - 2000
        return (3.86 + 0.3345 * t - 0.060374 * t ** 2 + 0.0017275 * t ** 3
                + 0.000651814 * t ** 4 + 0.00002373599 * t ** 5)
    return 0.0


# ── Reference frame ────────────────────────────────────────────

def calc_ayanamsa(year: int, month: int, day: int) -> float:
    """
    Ayanamsa in degrees.

    The quadratic is in thousands of years; two-digit years are scaled by
    10 instead, so always pass the full year.
    """
    d = 10 if year < 100 else 1000
    c = year / d
    a = -6.92416 + 16.90709 * c - 0.757371 * c * c
    b = (month + day / 30.0) * 1.1574074 / d
    return a + b


def calc_ecliptic_obliquity(julian_date: float) -> float:
    """
    Mean obliquity of the ecliptic (degrees). Meeus Eq. 22.2, linear term.

    T counts Julian centuries from JD 0, not from J2000, so the value at the
    J2000 epoch is about 22.5665°. Ascendant signs depend on this value.
    """
    T = julian_date / DAYS_PER_CENTURY
    return 23.0 + 26.0 / 60.0 + 21.448 / 3600.0 - (46.815 * T) / 3600.0


# ── Bodies ─────────────────────────────────────────────────────

def calc_planet_position(body: Body, day_number: float) -> float:
    """Tropical mean longitude of a mean-element body (degrees)."""
    try:
        L0, rate = MEAN_ELEMENTS[body]
    except KeyError:
        raise ValueError(f"No mean elements for {body.label}. "
                         f"Supported: {[b.label for b in MEAN_ELEMENTS]}") from None
    return mod360(L0 + rate * day_number)


def calc_moon_position(julian_date: float) -> float:
    """Tropical Moon longitude (degrees). Truncated Meeus Ch. 47."""
    T = (julian_date - J2000) / DAYS_PER_CENTURY
    T2, T3, T4 = T * T, T ** 3, T ** 4

    Lp = mod360(218.3164591 + 481267.88134236 * T - 0.0013268 * T2
                + T3 / 538841.0 - T4 / 65194000.0)
    D  = mod360(297.8502042 + 445267.1115168 * T - 0.00163 * T2
                + T3 / 545868.0 - T4 / 113065000.0)
    M  = mod360(357.5291092 + 35999.0502909 * T - 0.0001536 * T2
                + T3 / 24490000.0)
    Mp = mod360(134.9634114 + 477198.8676313 * T + 0.008997 * T2
                + T3 / 69699.0 - T4 / 14712000.0)
    F  = mod360(93.2720993 + 483202.0175273 * T - 0.0034029 * T2
                - T3 / 3526000.0 + T4 / 863310000.0)

    A1 = mod360(119.75 + 131.849 * T)      # Venus
    A2 = mod360(53.09 + 479264.29 * T)     # Jupiter

    sigma = sum(coef * math.sin(_r(d * D + m * M + mp * Mp + f * F))
                for coef, d, m, mp, f in MOON_LONGITUDE_TERMS)
    sigma += (3958.0 * math.sin(_r(A1))
              + 1962.0 * math.sin(_r(Lp - F))
              + 318.0 * math.sin(_r(A2)))

    return mod360(Lp + sigma / 1_000_000.0)


def calc_moon_ascending_node(julian_date: float) -> float:
    """Tropical mean ascending node, Rahu (degrees)."""
    T = (julian_date - NODE_EPOCH) / DAYS_PER_CENTURY
    return mod360(259.183275 - 1800.0 * T - 134.142008 * T + 0.002078 * T * T)


def ketu_longitude(rahu_longitude: float) -> float:
    return mod360(rahu_longitude + 180.0)
