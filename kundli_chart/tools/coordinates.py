"""
coordinates.py
==============
Latitude / longitude string parsing and degree formatting.

Accepted forms:
    "28N36"  → 28.6      (degrees, hemisphere letter, minutes)
    "77E12"  → 77.2
    "12S0"   → -12.0     (S and W are negative)
    "45.6"   → 45.6      (plain decimal degrees)
    "abc"    → 0.0       (anything unparseable)

Parsing never raises; bad input degrades to 0.
"""

import re

_LEADING_INT = re.compile(r"^[+-]?\d+")
_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_int(text: str):
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else None


def _leading_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text.strip())
    return float(match.group()) if match else 0.0


def _parse_coordinate(text: str, positive: str, negative: str) -> float:
    compact = re.sub(r"\s+", "", text or "").upper()

    for letter, sign in ((positive, 1.0), (negative, -1.0)):
        if letter in compact:
            parts = compact.split(letter)
            degrees = _leading_int(parts[0])
            if degrees is None:
                return 0.0
            minutes = _leading_int(parts[1]) or 0
            return sign * (degrees + minutes / 60.0)

    return _leading_float(text or "")


def parse_latitude(text: str) -> float:
    """Latitude in signed decimal degrees (North positive)."""
    return _parse_coordinate(text, "N", "S")


def parse_longitude(text: str) -> float:
    """Longitude in signed decimal degrees (East positive)."""
    return _parse_coordinate(text, "E", "W")


def format_dms(degrees: float) -> str:
    """Format decimal degrees as D°M'S\" string."""
    d = int(degrees)
    m_float = (degrees - d) * 60
    m = int(m_float)
    s = round((m_float - m) * 60, 1)
    return f"{d}°{m}'{s}\""
