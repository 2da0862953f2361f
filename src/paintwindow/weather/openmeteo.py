# src/paintwindow/weather/openmeteo.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from paintwindow.core.http import fetch_json
from paintwindow.core.settings import FORECAST_DAYS, FORECAST_TIMEOUT_SEC
from paintwindow.core.urls import provider_url
from paintwindow.utils.timewindow import to_iso_utc
from paintwindow.utils.units import c_to_f, kmh_to_mph, round1
from paintwindow.weather.types import HourlyForecast, HourlyObservation

HOURLY_FIELDS = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation_probability",
    "precipitation",
    "wind_speed_10m",
]


def _at(values: List[Any], i: int) -> Optional[Any]:
    return values[i] if i < len(values) else None


def parse_hourly(data: Dict[str, Any]) -> List[HourlyObservation]:
    """
    Open-Meteo hourly 블록 -> HourlyObservation 리스트 (°F, mph, UTC ISO).
    누락된 강수확률/강수량/풍속은 0으로 본다. 누락된 기온은 None.
    """
    hourly = data.get("hourly") or {}
    times = hourly.get("time") or []
    temp_c = hourly.get("temperature_2m") or []
    hum = hourly.get("relative_humidity_2m") or []
    pr = hourly.get("precipitation_probability") or []
    precip = hourly.get("precipitation") or []
    wind_kmh = hourly.get("wind_speed_10m") or []

    hours: List[HourlyObservation] = []
    for i, t in enumerate(times):
        tc = _at(temp_c, i)
        # 기온 누락 시간도 유지: 시간 연속성이 창 길이의 전제
        hours.append(HourlyObservation(
            time=to_iso_utc(datetime.fromtimestamp(int(t), tz=timezone.utc)),
            temp_f=round1(c_to_f(float(tc))) if tc is not None else None,
            humidity_pct=float(_at(hum, i) or 0),
            rain_probability_pct=float(_at(pr, i) or 0),
            precip_mm=float(_at(precip, i) or 0),
            wind_mph=round1(kmh_to_mph(float(_at(wind_kmh, i) or 0))),
        ))
    return hours


class OpenMeteoForecastProvider:
    """
    Open-Meteo hourly forecast (API key 불필요).
    timeformat=unixtime 으로 받아 UTC로 정규화한다.
    """
    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout or FORECAST_TIMEOUT_SEC

    async def _get(self, *, lat: float, lon: float, timezone: str, forecast_days: int) -> Dict[str, Any]:
        params = {
            "latitude": str(lat),
            "longitude": str(lon),
            "hourly": ",".join(HOURLY_FIELDS),
            "forecast_days": str(forecast_days),
            "timezone": timezone or "auto",
            "timeformat": "unixtime",
        }
        return await fetch_json(
            provider_url("forecast"), params=params, timeout=self.timeout, upstream="open-meteo-forecast",
        )

    async def hourly(self, *, lat: float, lon: float, timezone: str = "auto", forecast_days: int = FORECAST_DAYS) -> HourlyForecast:
        data = await self._get(lat=lat, lon=lon, timezone=timezone, forecast_days=forecast_days)
        return HourlyForecast(
            hours=parse_hourly(data or {}),
            timezone=(data or {}).get("timezone") or timezone or "auto",
        )
