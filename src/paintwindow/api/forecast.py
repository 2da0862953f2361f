# src/paintwindow/api/forecast.py
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from paintwindow.config import DISCLAIMER, SCHEMA_VERSION, get_rules
from paintwindow.core.errors import LocationNotFoundError, UpstreamError
from paintwindow.core.http import make_request_id
from paintwindow.core.settings import FORECAST_DAYS
from paintwindow.engine.reasons import TaskKind
from paintwindow.engine.thresholds import build_thresholds
from paintwindow.geocode.resolver import resolve_location
from paintwindow.models.rules import RulesConfig
from paintwindow.models.schemas import (
    ErrorBody,
    ErrorResponse,
    ForecastResponse,
    LocationOut,
    MetaOut,
    NextWindowOut,
    NowOut,
    ThresholdsOut,
)
from paintwindow.pipelines.verdict import build_verdict
from paintwindow.utils.timewindow import next_hour_iso, to_iso_utc
from paintwindow.weather.openmeteo import OpenMeteoForecastProvider
from paintwindow.weather.types import ForecastProvider

logger = logging.getLogger(__name__)

router = APIRouter()

CACHE_CONTROL = "public, s-maxage=900, max-age=600, stale-while-revalidate=3600"

DATA_SOURCES = {
    "geocoding_primary": "open-meteo",
    "geocoding_fallback": "nominatim (canadian postal only)",
    "forecast": "open-meteo",
}


def get_forecast_provider() -> ForecastProvider:
    return OpenMeteoForecastProvider()


def _error(status: int, request_id: str, code: str, message: str, hint: str | None = None, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(
        schema_version=SCHEMA_VERSION,
        request_id=request_id,
        error=ErrorBody(code=code, message=message, hint=hint, details=details),
    )
    return JSONResponse(status_code=status, content=body.model_dump(exclude_none=True))


@router.get("/forecast")
async def forecast(
    task: Optional[str] = Query(None, description='"paint" | "stain"'),
    loc: Optional[str] = Query(None, description="ZIP, postal code or city"),
    rules: RulesConfig = Depends(get_rules),
    provider: ForecastProvider = Depends(get_forecast_provider),
):
    """
    Paint / stain go-no-go + next safe window.
    ex) /api/forecast?task=paint&loc=54552
    """
    request_id = make_request_id()
    task_key = (task or "").strip().lower()
    loc = (loc or "").strip()

    if task_key not in {t.value for t in TaskKind}:
        return _error(
            400, request_id, "INVALID_TASK",
            "Invalid task. Use task=paint or task=stain.",
            "Example: /api/forecast?task=paint&loc=54552",
        )
    if not loc:
        return _error(
            400, request_id, "MISSING_LOCATION",
            "Missing loc. Use loc=ZIP or City.",
            "Example: loc=54552 or loc=Madison, WI",
        )

    try:
        geo = await run_in_threadpool(resolve_location, loc)
        th = build_thresholds(rules, task_key)

        now = datetime.now(timezone.utc)
        eval_start = next_hour_iso(now) if rules.evaluation.round_start_to_next_hour else to_iso_utc(now)

        fc = await provider.hourly(
            lat=geo.latitude, lon=geo.longitude, timezone=geo.timezone, forecast_days=FORECAST_DAYS,
        )
        verdict = build_verdict(task_key, fc.hours, th, eval_start).as_dict()

    except LocationNotFoundError as e:
        return _error(404, request_id, e.code, e.message, e.hint)
    except UpstreamError as e:
        logger.warning("[%s] upstream %s failed: %s (%s)", request_id, e.upstream, e.message, e.detail)
        return _error(
            e.status, request_id, "UPSTREAM_ERROR",
            "Forecast provider error. Try again.",
            "Try again in a minute or use a nearby city.",
            str(e.detail or e.message),
        )
    except Exception as e:
        logger.exception("[%s] unhandled error", request_id)
        return _error(
            500, request_id, "SERVER_ERROR", "Server error.",
            "If this persists, check server logs.", str(e),
        )

    payload = ForecastResponse(
        schema_version=SCHEMA_VERSION,
        request_id=request_id,
        task=task_key,
        location=LocationOut(
            query=loc,
            name=geo.name,
            admin1=geo.admin1,
            country=geo.country,
            lat=geo.latitude,
            lon=geo.longitude,
            timezone=fc.timezone,
            source=geo.source,
        ),
        generated_at=to_iso_utc(datetime.now(timezone.utc)),
        now=NowOut(**verdict["now"]),
        next_window=NextWindowOut(**verdict["next_window"]),
        thresholds=ThresholdsOut(**verdict["thresholds"]),
        meta=MetaOut(units=rules.units, data_sources=DATA_SOURCES),
        disclaimer=DISCLAIMER,
    )
    logger.info("[%s] %s @ %s -> go=%s", request_id, task_key, geo.name, payload.now.go)
    return JSONResponse(content=payload.model_dump(), headers={"Cache-Control": CACHE_CONTROL})
