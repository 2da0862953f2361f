# src/paintwindow/core/settings.py
from __future__ import annotations
import os

FORECAST_DAYS = int(os.getenv("FORECAST_DAYS", "4"))

FORECAST_TIMEOUT_SEC = float(os.getenv("FORECAST_TIMEOUT_SEC", "8"))
GEOCODE_TIMEOUT_SEC = float(os.getenv("GEOCODE_TIMEOUT_SEC", "5"))
NOMINATIM_TIMEOUT_SEC = float(os.getenv("NOMINATIM_TIMEOUT_SEC", "6"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# 쉼표 구분
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if o.strip()
]
