"""
zodiac.py
=========
Sign and nakshatra classification of sidereal longitudes.

Signs:
  12 bands of 30°. Band n covers (30(n-1), 30n]; the first band also
  holds 0°, so 30° is still Aries and a full 360° turn is Pisces.

Nakshatras:
  27 lunar mansions of 13°20', each split into 4 padas of 3°20'.
  Lords follow the Vimshottari order, repeated three times.
"""

import math
from typing import NamedTuple, Tuple

from .ephemeris import mod360

SIGNS: Tuple[str, ...] = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)

SIGN_LORDS: Tuple[str, ...] = (
    "Mars", "Venus", "Mercury", "Moon", "Sun", "Mercury",
    "Venus", "Mars", "Jupiter", "Saturn", "Saturn", "Jupiter",
)

NAKSHATRAS: Tuple[str, ...] = (
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
    "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
    "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishtha",
    "Shatabhisha", "Purva Bhadrapada", "Uttara Bhadrapada", "Revati",
)

VIMSHOTTARI_ORDER: Tuple[str, ...] = (
    "Ketu", "Venus", "Sun", "Moon", "Mars",
    "Rahu", "Jupiter", "Saturn", "Mercury",
)

NAKSHATRA_LORDS: Tuple[str, ...] = tuple(
    VIMSHOTTARI_ORDER[i % len(VIMSHOTTARI_ORDER)] for i in range(len(NAKSHATRAS))
)

SIGN_SPAN = 30.0
NAKSHATRA_SPAN = 360.0 / 27
PADA_SPAN = NAKSHATRA_SPAN / 4


class Nakshatra(NamedTuple):
    index: int      # 0–26
    name: str
    lord: str
    pada: int       # 1–4


def calc_zodiac(degree: float) -> int:
    """Sign number 1–12 for an ecliptic longitude in degrees."""
    d = mod360(degree)
    if d == 0.0 and degree > 0.0:
        d = 360.0
    if d <= SIGN_SPAN:
        return 1
    return min(int(math.ceil(d / SIGN_SPAN)), 12)


def sign_name(sign_number: int) -> str:
    if not 1 <= sign_number <= 12:
        raise ValueError(f"Sign number out of range: {sign_number}")
    return SIGNS[sign_number - 1]


def sign_lord(sign_number: int) -> str:
    if not 1 <= sign_number <= 12:
        raise ValueError(f"Sign number out of range: {sign_number}")
    return SIGN_LORDS[sign_number - 1]


def calc_nakshatra(degree: float) -> Nakshatra:
    """Nakshatra, lord and pada (clamped to 1..4) for a longitude in degrees."""
    d = mod360(degree)
    index = int(d / NAKSHATRA_SPAN) % 27
    position = d - index * NAKSHATRA_SPAN
    pada = int(position / PADA_SPAN) + 1
    pada = max(1, min(pada, 4))
    return Nakshatra(index, NAKSHATRAS[index], NAKSHATRA_LORDS[index], pada)
