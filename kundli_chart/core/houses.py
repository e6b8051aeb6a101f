"""
houses.py
=========
Local sidereal time, Ascendant (Lagna) and whole-sign houses.

House 1 is the whole sign holding the Ascendant; the remaining houses follow
in zodiacal order. A body occupies the house whose sign matches its own.

Source: Meeus Ch. 12–14; Holden, J.H. (1994). "A History of Horoscopic Astrology"
"""

import math
from typing import TYPE_CHECKING, Sequence, Tuple

from .ephemeris import DAYS_PER_CENTURY, DEG, RAD, mod360

if TYPE_CHECKING:
    from ..tools.chart import BodyPosition


# ---------------------------------------------------------------------------
# Local Sidereal Time
# ---------------------------------------------------------------------------

def calc_sidereal_time(day_number: float, longitude_deg: float) -> float:
    """
    Local Mean Sidereal Time in degrees [0, 360).
    day_number: days since 2000-01-01 12:00 UT
    longitude_deg: geographic longitude, positive East
    Source: Meeus Ch. 12, Eq. 12.4
    """
    T = day_number / DAYS_PER_CENTURY
    theta = (280.46061837
             + 360.98564736629 * day_number
             + 0.000387933 * T * T
             - T * T * T / 38710000.0
             + longitude_deg)
    return mod360(theta)


# ---------------------------------------------------------------------------
# Ascendant (Lagna)
# ---------------------------------------------------------------------------

def calc_ascendant(lst: float, latitude_deg: float, obliquity: float) -> float:
    """
    Tropical Ascendant in degrees, not normalized.

    lst: Local Sidereal Time in degrees
    At |latitude| = 90° tan() diverges; the pole is outside the supported range.
    """
    ramc = lst * DEG
    e = obliquity * DEG
    phi = latitude_deg * DEG

    y = math.cos(ramc)
    x = -math.sin(ramc) * math.cos(e) - math.tan(phi) * math.sin(e)
    return math.atan2(y, x) * RAD


# ---------------------------------------------------------------------------
# Whole-sign houses
# ---------------------------------------------------------------------------

def house_signs(ascendant_sign: int) -> Tuple[int, ...]:
    """Sign number (1–12) of houses 1–12, starting at the Ascendant's sign."""
    if not 1 <= ascendant_sign <= 12:
        raise ValueError(f"Sign number out of range: {ascendant_sign}")
    return tuple((ascendant_sign + i - 1) % 12 + 1 for i in range(12))


def house_of(sign_number: int, ascendant_sign: int) -> int:
    """1-based house number of a sign, counted from the Ascendant's sign."""
    return (sign_number - ascendant_sign) % 12 + 1


def house_occupants(signs: Tuple[int, ...],
                    positions: Sequence["BodyPosition"]) -> Tuple[Tuple[str, ...], ...]:
    """Symbols of the bodies in each house, in chart order."""
    return tuple(
        tuple(pos.symbol for pos in positions if pos.sign_number == sign)
        for sign in signs
    )
