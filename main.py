"""
Kundli Chart API — FastAPI Backend
==================================
Endpoints:
  POST /api/chart        — Birth chart (positions, nakshatras, houses)
  POST /api/coordinates  — Parse "28N36" / "77E12" style coordinates
  POST /api/pdf          — PDF report of a chart
  GET  /api/health       — Health check
"""

import io
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field, field_validator

from kundli_chart import (
    InvalidBirthDataError, chart_to_dict, generate_chart,
    parse_latitude, parse_longitude,
)
from kundli_chart.config import configure_logging, get_settings
from pdf_report import generate_pdf_report

settings = get_settings()
configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Vedic birth chart engine: ascendant, planets, nakshatras, navamsa, whole-sign houses",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Models ─────────────────────────────────────────────

class BirthData(BaseModel):
    name:            str   = ""
    year:            int   = Field(..., ge=1000, le=2999)
    month:           int   = Field(..., ge=1,    le=12)
    day:             int   = Field(..., ge=1,    le=31)
    hour:            int   = Field(12,  ge=0,    le=23)
    minute:          int   = Field(0,   ge=0,    le=59)
    timezone_offset: float = Field(0.0, ge=-14,  le=14)
    latitude:        float = Field(..., ge=-90,  le=90)
    longitude:       float = Field(..., ge=-180, le=180)

    @field_validator("latitude", mode="before")
    @classmethod
    def _latitude_string(cls, value):
        return parse_latitude(value) if isinstance(value, str) else value

    @field_validator("longitude", mode="before")
    @classmethod
    def _longitude_string(cls, value):
        return parse_longitude(value) if isinstance(value, str) else value


class CoordinatesRequest(BaseModel):
    latitude:  str = ""
    longitude: str = ""


class PDFRequest(BaseModel):
    chart: dict
    name:  Optional[str] = "Native"


# ── Endpoints ──────────────────────────────────────────────────

@app.get("/api/health")
def health():
    return {
        "status": "ok",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": [
            "POST /api/chart",
            "POST /api/coordinates",
            "POST /api/pdf",
        ],
    }


@app.post("/api/chart")
def chart_endpoint(data: BirthData):
    try:
        chart = generate_chart(
            year=data.year, month=data.month, day=data.day,
            hour=data.hour, minute=data.minute,
            timezone_offset=data.timezone_offset,
            latitude=data.latitude, longitude=data.longitude,
            name=data.name,
        )
    except InvalidBirthDataError as e:
        logger.info("Rejected birth data: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "chart": chart_to_dict(chart)}


@app.post("/api/coordinates")
def coordinates_endpoint(data: CoordinatesRequest):
    return {
        "latitude": parse_latitude(data.latitude),
        "longitude": parse_longitude(data.longitude),
    }


@app.post("/api/pdf")
def pdf_endpoint(data: PDFRequest):
    try:
        pdf_bytes = generate_pdf_report(data.chart, data.name)
    except Exception as e:
        logger.exception("PDF generation failed")
        raise HTTPException(status_code=500, detail=str(e))
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=kundli_{data.name}.pdf"
        },
    )
