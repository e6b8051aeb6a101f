"""
divisional_charts.py
====================
Divisional (Varga) sign mapping.

A divisional chart stretches the zodiac N times and reads the sign of the
stretched longitude.

Charts implemented:
  D1  — Rasi (natal chart, identity)
  D9  — Navamsa (each sign split into 9 × 3°20')

Stretching by 9 reproduces the classical navamsa start signs
(fire → Aries, earth → Capricorn, air → Libra, water → Cancer).

Source: Parashara BPHS
"""

from dataclasses import dataclass
from typing import Dict, Iterable

from .ephemeris import mod360
from .zodiac import calc_zodiac, sign_name


@dataclass(frozen=True)
class DivisionalPosition:
    division: str           # e.g. "D9"
    sign_number: int        # 1–12
    sign_name: str
    degree_in_sign: float


def rasi_sign(sidereal_longitude: float) -> int:
    """D1 sign number 1–12."""
    return calc_zodiac(sidereal_longitude)


def navamsa_sign(sidereal_longitude: float) -> int:
    """D9 sign number 1–12."""
    return calc_zodiac(mod360(sidereal_longitude * 9))


def d1(sidereal_longitude: float) -> DivisionalPosition:
    sign = rasi_sign(sidereal_longitude)
    return DivisionalPosition("D1", sign, sign_name(sign),
                              round(mod360(sidereal_longitude) % 30, 4))


def d9(sidereal_longitude: float) -> DivisionalPosition:
    stretched = mod360(sidereal_longitude * 9)
    sign = calc_zodiac(stretched)
    return DivisionalPosition("D9", sign, sign_name(sign), round(stretched % 30, 4))


DIVISIONAL_FUNCTIONS = {
    "D1": d1,
    "D9": d9,
}


def compute_divisional_chart(positions: Iterable, division: str) -> Dict[str, DivisionalPosition]:
    """
    Compute a divisional chart for every chart point.

    Args:
        positions: BodyPosition records (anything with ``symbol`` and ``longitude``)
        division: "D1" or "D9"

    Returns:
        dict of {body_symbol: DivisionalPosition}
    """
    if division not in DIVISIONAL_FUNCTIONS:
        raise ValueError(f"Unknown divisional chart: {division}. "
                         f"Supported: {list(DIVISIONAL_FUNCTIONS.keys())}")

    fn = DIVISIONAL_FUNCTIONS[division]
    return {pos.symbol: fn(pos.longitude) for pos in positions}
