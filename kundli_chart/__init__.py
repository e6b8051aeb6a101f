"""
Kundli Chart
============
A Vedic birth chart calculation engine.

Quick start:
    from kundli_chart import generate_chart

    chart = generate_chart(
        year=2000, month=1, day=1,
        hour=12, minute=0,
        timezone_offset=0.0,
        latitude=28.6,
        longitude=77.2,
    )
    chart.ascendant.sign       # "Gemini"
    chart.houses[0]            # ("As",)
"""

from .core.ephemeris import Body
from .tools.chart import (
    BirthInput, TimeFrame, BodyPosition, Chart, InvalidBirthDataError,
    calculate_chart, generate_chart, chart_to_dict,
)
from .tools.coordinates import parse_latitude, parse_longitude

__version__ = "1.0.0"
__all__ = [
    "Body", "BirthInput", "TimeFrame", "BodyPosition", "Chart", "InvalidBirthDataError",
    "calculate_chart", "generate_chart", "chart_to_dict",
    "parse_latitude", "parse_longitude",
]
