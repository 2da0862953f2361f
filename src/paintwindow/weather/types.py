# src/paintwindow/weather/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass(frozen=True)
class HourlyObservation:
    time: str                      # ISO-8601, UTC
    temp_f: Optional[float]        # None = provider gave no value
    humidity_pct: float
    rain_probability_pct: float
    precip_mm: float
    wind_mph: float


@dataclass
class HourlyForecast:
    hours: List[HourlyObservation]
    timezone: str


class ForecastProvider(Protocol):
    async def hourly(self, *, lat: float, lon: float, timezone: str = "auto", forecast_days: int = 4) -> HourlyForecast: ...
