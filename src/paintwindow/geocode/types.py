# src/paintwindow/geocode/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class Location:
    name: str
    latitude: float
    longitude: float
    admin1: Optional[str] = None
    country: Optional[str] = None
    timezone: str = "auto"
    source: str = "open-meteo"
