# src/paintwindow/models/schemas.py
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

# ===== Response =====

class ReasonOut(BaseModel):
    code: str
    message: str
    observed: Dict[str, Any] = {}
    threshold: Dict[str, Any] = {}


class LocationOut(BaseModel):
    query: str
    name: str
    admin1: Optional[str] = None
    country: Optional[str] = None
    lat: float
    lon: float
    timezone: str = "auto"
    source: str = "open-meteo"


class NowOut(BaseModel):
    start: str
    end: Optional[str] = None
    go: bool
    risk: str
    summary: str
    reasons: List[ReasonOut]


class NextWindowOut(BaseModel):
    start: Optional[str] = None
    end: Optional[str] = None
    duration_hours: Optional[int] = None
    risk: Optional[str] = None
    summary: str


class ThresholdsOut(BaseModel):
    task: str
    label: str
    min_temp_f: float
    overnight_min_temp_f: float
    rain_probability_max_pct: float
    precipitation_max_mm: float
    max_humidity_pct: float
    max_wind_mph: float
    min_window_hours: int
    no_rain_buffer_hours: int
    horizon_hours: int


class MetaOut(BaseModel):
    units: str = "us"
    data_sources: Dict[str, str]


class ForecastResponse(BaseModel):  # /api/forecast 최상위 스키마
    schema_version: str
    request_id: str
    task: str
    location: LocationOut
    generated_at: str
    now: NowOut
    next_window: NextWindowOut
    thresholds: ThresholdsOut
    meta: MetaOut
    disclaimer: str


class ErrorBody(BaseModel):
    code: str
    message: str
    hint: Optional[str] = None
    details: Optional[str] = None


class ErrorResponse(BaseModel):
    schema_version: str
    request_id: str
    error: ErrorBody
