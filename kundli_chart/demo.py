"""
demo.py
=======
Demonstration of the Kundli Chart engine.
Run: python -m kundli_chart.demo

Generates a birth chart for a sample birth and prints a formatted report.
"""

import logging

from kundli_chart import generate_chart, parse_latitude, parse_longitude
from kundli_chart.config import configure_logging
from kundli_chart.core.zodiac import sign_name

logger = logging.getLogger(__name__)


def print_section(title: str):
    print(f"\n{'─'*60}")
    print(f"  {title}")
    print(f"{'─'*60}")


def format_position_table(chart) -> str:
    lines = [f"{'Body':<11} {'Sign':<13} {'Degree':<13} {'Navamsa':<13} "
             f"{'Nakshatra':<18} {'Lord':<8} {'Pada':<5} {'House':<5}"]
    lines.append("─" * 90)
    for pos in chart.positions:
        lines.append(
            f"{pos.body.label:<11} {pos.sign:<13} {pos.degree_formatted():<13} "
            f"{sign_name(pos.navamsa_sign_number):<13} {pos.nakshatra:<18} "
            f"{pos.nakshatra_lord:<8} {pos.nakshatra_pada:<5} H{chart.house_of(pos.body)}"
        )
    return "\n".join(lines)


def run_demo():
    configure_logging()

    print("=" * 60)
    print("   KUNDLI CHART — SAMPLE BIRTH CHART")
    print("=" * 60)

    # ── Sample birth data ──
    params = {
        "name": "Sample",
        "year": 2000, "month": 1, "day": 1,
        "hour": 12, "minute": 0,
        "timezone_offset": 0.0,
        "latitude": parse_latitude("28N36"),     # Delhi
        "longitude": parse_longitude("77E12"),
    }
    logger.info("Generating demo chart for %s", params["name"])

    print(f"\n  Birth Date  : {params['year']}-{params['month']:02d}-{params['day']:02d}")
    print(f"  Birth Time  : {params['hour']:02d}:{params['minute']:02d} (UTC{params['timezone_offset']:+.1f})")
    print(f"  Location    : Delhi, India ({params['latitude']:.2f}°N, {params['longitude']:.2f}°E)")

    chart = generate_chart(**params)
    frame = chart.time_frame

    print_section("LAGNA (ASCENDANT)")
    lagna = chart.ascendant
    print(f"  Sign        : {lagna.sign}")
    print(f"  Degree      : {lagna.degree_formatted()}")
    print(f"  Nakshatra   : {lagna.nakshatra} (Pada {lagna.nakshatra_pada}, lord {lagna.nakshatra_lord})")

    print_section("RASI CHART — POSITIONS")
    print(format_position_table(chart))

    print_section("HOUSES (WHOLE SIGN)")
    print(f"  {'House':<8} {'Sign':<14} {'Occupants'}")
    print(f"  {'─'*8} {'─'*14} {'─'*20}")
    for i, sign in enumerate(chart.house_signs):
        occupants = ", ".join(chart.houses[i]) or "—"
        print(f"  H{i + 1:<7} {sign_name(sign):<14} {occupants}")

    print_section("TECHNICAL METADATA")
    print(f"  Day number    : {frame.day_number:.6f}")
    print(f"  Julian Day    : {frame.julian_date:.7f}")
    modeled = "" if frame.delta_t_modeled else "  (not modeled)"
    print(f"  Delta-T       : {frame.delta_t:.2f} s{modeled}")
    print(f"  Ayanamsa      : {frame.ayanamsa:.6f}°")
    print(f"  Obliquity     : {frame.obliquity:.6f}°")
    print(f"  LST (degrees) : {frame.sidereal_time:.6f}°")
    print()


if __name__ == "__main__":
    run_demo()
