# Kundli Chart - Core modules
from .ephemeris import (
    Body, BODIES, mod360,
    calc_day_number, calc_julian_date, calc_delta_t, delta_t_in_range,
    calc_ayanamsa, calc_ecliptic_obliquity,
    calc_planet_position, calc_moon_position, calc_moon_ascending_node,
)
from .houses import calc_sidereal_time, calc_ascendant, house_signs, house_occupants
from .zodiac import calc_zodiac, calc_nakshatra, Nakshatra, SIGNS, NAKSHATRAS
from .divisional_charts import navamsa_sign, compute_divisional_chart

__all__ = [
    "Body", "BODIES", "mod360",
    "calc_day_number", "calc_julian_date", "calc_delta_t", "delta_t_in_range",
    "calc_ayanamsa", "calc_ecliptic_obliquity",
    "calc_planet_position", "calc_moon_position", "calc_moon_ascending_node",
    "calc_sidereal_time", "calc_ascendant", "house_signs", "house_occupants",
    "calc_zodiac", "calc_nakshatra", "Nakshatra", "SIGNS", "NAKSHATRAS",
    "navamsa_sign", "compute_divisional_chart",
]
