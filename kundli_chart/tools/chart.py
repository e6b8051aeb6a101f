"""
chart.py
========
Birth chart generator.

Chains the ephemeris, zodiac, divisional and house modules into one pure
function of the birth data:

    BirthInput → TimeFrame → 10 × BodyPosition → whole-sign houses → Chart

Usage:
    from kundli_chart.tools.chart import generate_chart

    chart = generate_chart(
        year=2000, month=1, day=1,
        hour=12, minute=0,
        timezone_offset=0.0,
        latitude=28.6,          # Delhi
        longitude=77.2,
    )
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Tuple

from ..config import get_settings
from ..core.divisional_charts import navamsa_sign
from ..core.ephemeris import (
    Body, BODIES, mod360, ketu_longitude,
    calc_day_number, calc_julian_date, calc_delta_t, delta_t_in_range,
    calc_ayanamsa, calc_ecliptic_obliquity,
    calc_planet_position, calc_moon_position, calc_moon_ascending_node,
)
from ..core.houses import calc_sidereal_time, calc_ascendant, house_signs, house_occupants
from ..core.zodiac import calc_zodiac, calc_nakshatra, sign_name
from .coordinates import format_dms

logger = logging.getLogger(__name__)


class InvalidBirthDataError(ValueError):
    """Birth data outside the range the chart can be computed for."""


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BirthInput:
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    timezone_offset: float = 0.0    # hours ahead of UTC (5.5 for IST, -5 for EST)
    latitude: float = 0.0           # positive = North
    longitude: float = 0.0          # positive = East
    name: str = ""

    def __post_init__(self):
        try:
            date(self.year, self.month, self.day)
        except ValueError as e:
            raise InvalidBirthDataError(f"Invalid birth date: {e}") from e
        if not 0 <= self.hour <= 23:
            raise InvalidBirthDataError(f"Hour must be 0–23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidBirthDataError(f"Minute must be 0–59, got {self.minute}")
        if not -14.0 <= self.timezone_offset <= 14.0:
            raise InvalidBirthDataError(
                f"Timezone offset must be within ±14 h, got {self.timezone_offset}")
        # tan(latitude) diverges at the poles
        if not -90.0 < self.latitude < 90.0:
            raise InvalidBirthDataError(
                f"Latitude must be strictly between -90 and 90, got {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise InvalidBirthDataError(
                f"Longitude must be within -180..180, got {self.longitude}")


@dataclass(frozen=True)
class TimeFrame:
    day_number: float
    julian_date: float
    delta_t: float              # seconds
    delta_t_modeled: bool
    sidereal_time: float        # degrees
    obliquity: float            # degrees
    ayanamsa: float             # degrees


@dataclass(frozen=True)
class BodyPosition:
    body: Body
    longitude: float            # sidereal, [0, 360)
    sign: str
    degree: float               # within sign, [0, 30)
    sign_number: int            # 1–12
    navamsa_sign_number: int    # 1–12
    nakshatra: str
    nakshatra_lord: str
    nakshatra_pada: int         # 1–4

    @property
    def symbol(self) -> str:
        return self.body.symbol

    @property
    def index(self) -> int:
        return self.body.index

    def degree_formatted(self) -> str:
        return format_dms(self.degree)


@dataclass(frozen=True)
class Chart:
    birth: BirthInput
    time_frame: TimeFrame
    positions: Tuple[BodyPosition, ...]           # indexed by Body.index
    house_signs: Tuple[int, ...]                  # house i → sign number
    houses: Tuple[Tuple[str, ...], ...]           # house i → body symbols

    def position(self, body: Body) -> BodyPosition:
        return self.positions[body.index]

    @property
    def ascendant(self) -> BodyPosition:
        return self.positions[Body.ASCENDANT.index]

    def house_of(self, body: Body) -> int:
        """1-based house number holding the body."""
        return self.house_signs.index(self.position(body).sign_number) + 1


# ---------------------------------------------------------------------------
# Pipeline stages
# ---------------------------------------------------------------------------

def compute_time_frame(birth: BirthInput) -> TimeFrame:
    civil = (birth.year, birth.month, birth.day,
             birth.hour, birth.minute, birth.timezone_offset)
    day_number = calc_day_number(*civil)
    julian_date = calc_julian_date(*civil)

    modeled = delta_t_in_range(birth.year)
    if not modeled and get_settings().WARN_UNMODELED_DELTA_T:
        logger.warning("Delta-T is not modeled for %d; using 0 s", birth.year)

    frame = TimeFrame(
        day_number=day_number,
        julian_date=julian_date,
        delta_t=calc_delta_t(birth.year),
        delta_t_modeled=modeled,
        sidereal_time=calc_sidereal_time(day_number, birth.longitude),
        obliquity=calc_ecliptic_obliquity(julian_date),
        ayanamsa=calc_ayanamsa(birth.year, birth.month, birth.day),
    )
    logger.debug("Time frame for %s: %s", birth.name or "chart", frame)
    return frame


def classify_longitude(body: Body, sidereal_longitude: float) -> BodyPosition:
    """Sign, navamsa and nakshatra for an already sidereal longitude."""
    lon = mod360(sidereal_longitude)
    sign_number = calc_zodiac(lon)
    nakshatra = calc_nakshatra(lon)
    return BodyPosition(
        body=body,
        longitude=lon,
        sign=sign_name(sign_number),
        degree=lon % 30,
        sign_number=sign_number,
        navamsa_sign_number=navamsa_sign(lon),
        nakshatra=nakshatra.name,
        nakshatra_lord=nakshatra.lord,
        nakshatra_pada=nakshatra.pada,
    )


def compute_body_position(body: Body, raw_longitude: float, ayanamsa: float) -> BodyPosition:
    """Apply the ayanamsa to a tropical longitude and classify it."""
    return classify_longitude(body, mod360(raw_longitude - ayanamsa))


def _tropical_longitudes(birth: BirthInput, frame: TimeFrame) -> dict:
    lst = frame.sidereal_time
    longitudes = {
        Body.ASCENDANT: calc_ascendant(lst, birth.latitude, frame.obliquity),
        Body.MOON: calc_moon_position(frame.julian_date),
        Body.RAHU: calc_moon_ascending_node(frame.julian_date),
    }
    for body in (Body.SUN, Body.MARS, Body.MERCURY, Body.JUPITER, Body.VENUS, Body.SATURN):
        longitudes[body] = calc_planet_position(body, frame.day_number)
    return longitudes


def calculate_chart(birth: BirthInput) -> Chart:
    """
    Compute the full chart for one birth.

    Pure and deterministic: the same BirthInput always yields an equal Chart.
    """
    frame = compute_time_frame(birth)
    tropical = _tropical_longitudes(birth, frame)

    by_body = {
        body: compute_body_position(body, tropical[body], frame.ayanamsa)
        for body in BODIES if body is not Body.KETU
    }
    # Ketu mirrors the finished Rahu longitude, never its own model
    by_body[Body.KETU] = classify_longitude(
        Body.KETU, ketu_longitude(by_body[Body.RAHU].longitude))

    positions = tuple(by_body[body] for body in BODIES)
    signs = house_signs(positions[Body.ASCENDANT.index].sign_number)
    logger.debug("Ascendant %.4f° (%s)", positions[0].longitude, positions[0].sign)

    return Chart(
        birth=birth,
        time_frame=frame,
        positions=positions,
        house_signs=signs,
        houses=house_occupants(signs, positions),
    )


def generate_chart(
    year: int, month: int, day: int,
    hour: int = 0, minute: int = 0,
    timezone_offset: float = 0.0,
    latitude: float = 0.0,
    longitude: float = 0.0,
    name: str = "",
) -> Chart:
    """
    Generate a birth chart from keyword birth data.

    Args:
        year, month, day: Birth date (Gregorian, full year)
        hour, minute: Birth time in LOCAL time
        timezone_offset: Hours ahead of UTC (e.g. 5.5 for India, -5 for EST)
        latitude: Geographic latitude in degrees (positive = North)
        longitude: Geographic longitude in degrees (positive = East)
        name: Display label, not used in the computation

    Raises:
        InvalidBirthDataError: if the birth data is out of range
    """
    birth = BirthInput(year, month, day, hour, minute,
                       timezone_offset, latitude, longitude, name)
    return calculate_chart(birth)


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def _position_dict(chart: Chart, pos: BodyPosition) -> dict:
    return {
        "symbol": pos.symbol,
        "index": pos.index,
        "sidereal_longitude": round(pos.longitude, 4),
        "sign": pos.sign,
        "sign_number": pos.sign_number,
        "degree_in_sign": round(pos.degree, 4),
        "degree_formatted": pos.degree_formatted(),
        "navamsa_sign_number": pos.navamsa_sign_number,
        "navamsa_sign": sign_name(pos.navamsa_sign_number),
        "nakshatra": pos.nakshatra,
        "nakshatra_lord": pos.nakshatra_lord,
        "nakshatra_pada": pos.nakshatra_pada,
        "house": chart.house_of(pos.body),
    }


def chart_to_dict(chart: Chart) -> dict:
    """JSON-ready representation of a chart."""
    birth, frame = chart.birth, chart.time_frame
    return {
        "meta": {
            "input": {
                "name": birth.name,
                "date": f"{birth.year:04d}-{birth.month:02d}-{birth.day:02d}",
                "time": f"{birth.hour:02d}:{birth.minute:02d}",
                "timezone_offset": birth.timezone_offset,
                "latitude": birth.latitude,
                "longitude": birth.longitude,
            },
            "day_number": round(frame.day_number, 6),
            "julian_day": frame.julian_date,
            "delta_t_seconds": round(frame.delta_t, 4),
            "delta_t_modeled": frame.delta_t_modeled,
            "sidereal_time": round(frame.sidereal_time, 6),
            "obliquity": round(frame.obliquity, 6),
            "ayanamsa": round(frame.ayanamsa, 6),
        },
        "lagna": _position_dict(chart, chart.ascendant),
        "planets": {
            pos.body.label: _position_dict(chart, pos)
            for pos in chart.positions if pos.body is not Body.ASCENDANT
        },
        "house_signs": list(chart.house_signs),
        "houses": [
            {
                "house": i + 1,
                "sign_number": sign,
                "sign": sign_name(sign),
                "occupants": list(chart.houses[i]),
            }
            for i, sign in enumerate(chart.house_signs)
        ],
    }
