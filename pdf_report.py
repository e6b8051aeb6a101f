"""
pdf_report.py
=============
Generates a printable birth chart PDF report from a serialized chart
(``kundli_chart.chart_to_dict``).
Uses ReportLab for PDF generation.

Install: pip install reportlab
"""

import io
import logging
from datetime import datetime

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, HRFlowable,
)

from kundli_chart.config import get_settings

logger = logging.getLogger(__name__)

# ── Color palette ──────────────────────────────────────────────
VOID      = HexColor("#0B0B0F")
GOLD      = HexColor("#C9A96E")
SURFACE   = HexColor("#1E1C28")
MUTED     = HexColor("#6E6A7C")
WHITE     = HexColor("#FFFFFF")
ROW_ALT   = HexColor("#FAFAFA")
GRID      = HexColor("#DDDDDD")

_TABLE_BASE = [
    ("FONTSIZE",      (0,0), (-1,-1), 8.5),
    ("GRID",          (0,0), (-1,-1), 0.3, GRID),
    ("TOPPADDING",    (0,0), (-1,-1), 5),
    ("BOTTOMPADDING", (0,0), (-1,-1), 5),
    ("LEFTPADDING",   (0,0), (-1,-1), 6),
]

_HEADER_ROW = [
    ("FONTNAME",       (0,0), (-1,0),  "Helvetica-Bold"),
    ("FONTNAME",       (0,1), (-1,-1), "Helvetica"),
    ("BACKGROUND",     (0,0), (-1,0),  SURFACE),
    ("TEXTCOLOR",      (0,0), (-1,0),  GOLD),
    ("ROWBACKGROUNDS", (0,1), (-1,-1), [ROW_ALT, WHITE]),
]


def generate_pdf_report(chart: dict, name: str = "Native") -> bytes:
    """
    Generate a birth chart PDF report.
    Returns PDF as bytes.
    """
    settings = get_settings()
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=2*cm, leftMargin=2*cm,
        topMargin=2*cm, bottomMargin=2*cm,
        title=f"Kundli Report - {name}",
        author=settings.PDF_AUTHOR,
    )

    styles = getSampleStyleSheet()
    story = []

    # ── Custom styles ──────────────────────────────────────────
    title_style = ParagraphStyle(
        "Title", parent=styles["Normal"],
        fontSize=26, fontName="Helvetica",
        textColor=VOID, alignment=TA_CENTER,
        spaceAfter=6,
    )
    subtitle_style = ParagraphStyle(
        "Subtitle", parent=styles["Normal"],
        fontSize=11, fontName="Helvetica",
        textColor=MUTED, alignment=TA_CENTER,
        spaceAfter=20,
    )
    disclaimer_style = ParagraphStyle(
        "Disclaimer", parent=styles["Normal"],
        fontSize=7, fontName="Helvetica-Oblique",
        textColor=MUTED, alignment=TA_CENTER,
        spaceBefore=20,
    )

    def gold_bar(text):
        return Table(
            [[Paragraph(text, ParagraphStyle("GoldBar", parent=styles["Normal"],
                fontSize=11, fontName="Helvetica-Bold",
                textColor=WHITE, alignment=TA_LEFT))]],
            colWidths=[17*cm],
            style=TableStyle([
                ("BACKGROUND",    (0,0), (-1,-1), VOID),
                ("TOPPADDING",    (0,0), (-1,-1), 8),
                ("BOTTOMPADDING", (0,0), (-1,-1), 8),
                ("LEFTPADDING",   (0,0), (-1,-1), 12),
                ("RIGHTPADDING",  (0,0), (-1,-1), 12),
            ])
        )

    # ── HEADER ────────────────────────────────────────────────
    story.append(Paragraph("KUNDLI", title_style))
    story.append(Paragraph("Vedic Birth Chart · Sidereal Zodiac · Whole Sign Houses", subtitle_style))
    story.append(HRFlowable(width="100%", thickness=0.5, color=GOLD))
    story.append(Spacer(1, 0.4*cm))

    # ── BIRTH DETAILS ─────────────────────────────────────────
    story.append(gold_bar("BIRTH DETAILS"))
    story.append(Spacer(1, 0.3*cm))

    meta = chart.get("meta", {})
    birth = meta.get("input", {})
    lagna = chart.get("lagna", {})
    details_data = [
        ["Name", name, "Date", birth.get("date", "—")],
        ["Lagna (Ascendant)", f"{lagna.get('sign', '—')} {lagna.get('degree_formatted', '')}",
         "Time", birth.get("time", "—")],
        ["Lagna Nakshatra", f"{lagna.get('nakshatra', '—')} (Pada {lagna.get('nakshatra_pada', '—')})",
         "Timezone", f"UTC{birth.get('timezone_offset', 0):+.1f}"],
        ["Ayanamsa", f"{meta.get('ayanamsa', 0):.4f}°",
         "Latitude", str(birth.get("latitude", "—"))],
        ["Julian Day", str(meta.get("julian_day", "—")),
         "Longitude", str(birth.get("longitude", "—"))],
    ]

    det_table = Table(details_data, colWidths=[4*cm, 5*cm, 3.5*cm, 4.5*cm])
    det_table.setStyle(TableStyle(_TABLE_BASE + [
        ("FONTNAME",       (0,0), (-1,-1), "Helvetica"),
        ("FONTNAME",       (0,0), (0,-1),  "Helvetica-Bold"),
        ("FONTNAME",       (2,0), (2,-1),  "Helvetica-Bold"),
        ("TEXTCOLOR",      (0,0), (0,-1),  MUTED),
        ("TEXTCOLOR",      (2,0), (2,-1),  MUTED),
        ("ROWBACKGROUNDS", (0,0), (-1,-1), [ROW_ALT, WHITE]),
    ]))
    story.append(det_table)
    story.append(Spacer(1, 0.5*cm))

    # ── POSITIONS ─────────────────────────────────────────────
    story.append(gold_bar("PLANETARY POSITIONS  (Sidereal)"))
    story.append(Spacer(1, 0.3*cm))

    position_header = [["Body", "Sign", "Degree", "Navamsa", "Nakshatra", "Lord", "Pada", "House"]]
    rows = [("Ascendant", lagna)] if lagna else []
    rows += list(chart.get("planets", {}).items())
    position_rows = [
        [
            pname,
            pdata.get("sign", "—"),
            pdata.get("degree_formatted", "—"),
            pdata.get("navamsa_sign", "—"),
            pdata.get("nakshatra", "—"),
            pdata.get("nakshatra_lord", "—"),
            str(pdata.get("nakshatra_pada", "—")),
            f"H{pdata.get('house', '—')}",
        ]
        for pname, pdata in rows
    ]

    position_table = Table(
        position_header + position_rows,
        colWidths=[2.4*cm, 2.4*cm, 2.2*cm, 2.2*cm, 3.2*cm, 1.8*cm, 1.2*cm, 1.6*cm]
    )
    position_table.setStyle(TableStyle(_TABLE_BASE + _HEADER_ROW + [
        ("ALIGN", (6,0), (7,-1), "CENTER"),
    ]))
    story.append(position_table)
    story.append(Spacer(1, 0.5*cm))

    # ── HOUSES ────────────────────────────────────────────────
    houses = chart.get("houses", [])
    if houses:
        story.append(gold_bar("HOUSES  (Whole Sign)"))
        story.append(Spacer(1, 0.3*cm))
        house_header = [["House", "Sign", "Occupants"]]
        house_rows = [
            [f"H{h.get('house', '—')}", h.get("sign", "—"),
             ", ".join(h.get("occupants", [])) or "—"]
            for h in houses
        ]
        h_table = Table(house_header + house_rows, colWidths=[3*cm, 5*cm, 9*cm])
        h_table.setStyle(TableStyle(_TABLE_BASE + _HEADER_ROW))
        story.append(h_table)
        story.append(Spacer(1, 0.5*cm))

    # ── FOOTER DISCLAIMER ─────────────────────────────────────
    story.append(HRFlowable(width="100%", thickness=0.5, color=GOLD))
    story.append(Paragraph(
        f"Generated by {settings.PDF_AUTHOR} · {datetime.now().strftime('%d %B %Y')}",
        disclaimer_style
    ))
    story.append(Paragraph(
        "Positions use simplified mean-element models and a truncated lunar series. "
        "They are suitable for drawing a chart, not for ephemeris-grade work.",
        disclaimer_style
    ))

    # ── BUILD PDF ─────────────────────────────────────────────
    doc.build(story)
    buffer.seek(0)
    logger.debug("Built PDF report for %s", name)
    return buffer.read()
