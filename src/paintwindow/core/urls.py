# src/paintwindow/core/urls.py
from __future__ import annotations
import os
from typing import Final

# 베이스 도메인은 .env로 덮어쓸 수 있게
OPEN_METEO_BASE: Final[str] = os.getenv("OPEN_METEO_BASE", "https://api.open-meteo.com")
OPEN_METEO_GEOCODE_BASE: Final[str] = os.getenv("OPEN_METEO_GEOCODE_BASE", "https://geocoding-api.open-meteo.com")
NOMINATIM_BASE: Final[str] = os.getenv("NOMINATIM_BASE", "https://nominatim.openstreetmap.org")

# 경로 상수 (도메인과 분리)
PATHS = {
    # hourly forecast
    "forecast": (OPEN_METEO_BASE, "/v1/forecast"),
    # name / postal code search
    "geocode": (OPEN_METEO_GEOCODE_BASE, "/v1/search"),
    # Canadian postal code fallback
    "nominatim_search": (NOMINATIM_BASE, "/search"),
}


def provider_url(path_key: str) -> str:
    """
    Endpoint builder.
    ex) provider_url("forecast") -> "https://api.open-meteo.com/v1/forecast"
    """
    base, path = PATHS[path_key]
    return f"{base}{path}"
