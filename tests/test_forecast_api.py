"""API tests for /api/forecast and /health."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from paintwindow.api.forecast import CACHE_CONTROL, get_forecast_provider
from paintwindow.config import get_rules
from paintwindow.core.errors import LocationNotFoundError, UpstreamError
from paintwindow.geocode.types import Location
from paintwindow.main import app
from paintwindow.utils.timewindow import to_iso_utc
from paintwindow.weather.types import HourlyForecast, HourlyObservation
from tests.factories import make_rules, rules_doc

MADISON = Location(
    name="Madison",
    latitude=43.07,
    longitude=-89.40,
    admin1="Wisconsin",
    country="United States",
    timezone="America/Chicago",
)


def _hours_from_now(n: int, **overrides) -> list[HourlyObservation]:
    start = datetime.now(timezone.utc).replace(minute=0, second=0, microsecond=0)
    values = {
        "temp_f": 70.0,
        "humidity_pct": 40.0,
        "rain_probability_pct": 0.0,
        "precip_mm": 0.0,
        "wind_mph": 5.0,
    }
    values.update(overrides)
    return [HourlyObservation(time=to_iso_utc(start + timedelta(hours=i)), **values) for i in range(n)]


class FakeProvider:
    def __init__(self, hours=None, error: Exception | None = None) -> None:
        self.hours = hours if hours is not None else _hours_from_now(96)
        self.error = error
        self.calls = []

    async def hourly(self, *, lat, lon, timezone="auto", forecast_days=4):
        self.calls.append((lat, lon, timezone, forecast_days))
        if self.error:
            raise self.error
        return HourlyForecast(hours=self.hours, timezone="America/Chicago")


def _use(client, provider: FakeProvider) -> None:
    app.dependency_overrides[get_forecast_provider] = lambda: provider


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class TestRequestValidation:
    def test_invalid_task(self, client) -> None:
        resp = client.get("/api/forecast", params={"task": "varnish", "loc": "54552"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["schema_version"] == "1.0"
        assert body["request_id"]
        assert body["error"]["code"] == "INVALID_TASK"

    def test_missing_task(self, client) -> None:
        resp = client.get("/api/forecast", params={"loc": "54552"})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "INVALID_TASK"

    def test_missing_location(self, client) -> None:
        resp = client.get("/api/forecast", params={"task": "paint", "loc": "  "})
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "MISSING_LOCATION"

    def test_task_is_case_insensitive(self, client) -> None:
        _use(client, FakeProvider())
        with patch("paintwindow.api.forecast.resolve_location", return_value=MADISON):
            resp = client.get("/api/forecast", params={"task": "PAINT", "loc": "Madison"})
        assert resp.status_code == 200
        assert resp.json()["task"] == "paint"


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------


class TestForecastSuccess:
    def test_go_payload(self, client) -> None:
        provider = FakeProvider()
        _use(client, provider)
        with patch("paintwindow.api.forecast.resolve_location", return_value=MADISON):
            resp = client.get("/api/forecast", params={"task": "paint", "loc": "Madison, WI"})

        assert resp.status_code == 200
        assert resp.headers["cache-control"] == CACHE_CONTROL
        body = resp.json()
        assert body["task"] == "paint"
        assert body["location"]["query"] == "Madison, WI"
        assert body["location"]["name"] == "Madison"
        assert body["location"]["timezone"] == "America/Chicago"
        assert body["now"]["go"] is True
        assert body["now"]["risk"] == "low"
        assert body["now"]["reasons"] == []
        assert body["now"]["summary"] == "Go: professional-safe paint conditions."
        assert body["next_window"]["duration_hours"] == 4
        assert body["next_window"]["start"] == body["now"]["start"]
        assert body["thresholds"]["label"] == "Exterior paint"
        assert body["meta"]["data_sources"]["forecast"] == "open-meteo"
        assert body["disclaimer"].startswith("Guidance only.")
        assert provider.calls == [(43.07, -89.40, "America/Chicago", 4)]

    def test_no_go_reasons_are_serialized(self, client) -> None:
        _use(client, FakeProvider(_hours_from_now(96, wind_mph=25.0)))
        with patch("paintwindow.api.forecast.resolve_location", return_value=MADISON):
            resp = client.get("/api/forecast", params={"task": "stain", "loc": "Madison"})

        body = resp.json()
        assert body["now"]["go"] is False
        assert body["now"]["risk"] == "high"
        assert body["now"]["reasons"] == [{
            "code": "wind_too_high",
            "message": "Wind exceeds 12 mph during the work window.",
            "observed": {"max_wind_mph": 25.0},
            "threshold": {"max_wind_mph": 12.0},
        }]
        assert body["next_window"] == {
            "start": None,
            "end": None,
            "duration_hours": None,
            "risk": None,
            "summary": "No safe window found in the next few days.",
        }

    def test_rules_override(self, client) -> None:
        doc = rules_doc()
        doc["tasks"]["paint"]["max_wind_mph"] = 3
        app.dependency_overrides[get_rules] = lambda: make_rules(doc)
        _use(client, FakeProvider())
        with patch("paintwindow.api.forecast.resolve_location", return_value=MADISON):
            body = client.get("/api/forecast", params={"task": "paint", "loc": "Madison"}).json()
        assert body["thresholds"]["max_wind_mph"] == 3
        assert body["now"]["reasons"][0]["code"] == "wind_too_high"


# ---------------------------------------------------------------------------
# Collaborator failures
# ---------------------------------------------------------------------------


class TestCollaboratorErrors:
    def test_location_not_found(self, client) -> None:
        _use(client, FakeProvider())
        err = LocationNotFoundError("LOCATION_NOT_FOUND", "Location not found. Try a nearby city name.", "hint")
        with patch("paintwindow.api.forecast.resolve_location", side_effect=err):
            resp = client.get("/api/forecast", params={"task": "paint", "loc": "Atlantis"})
        assert resp.status_code == 404
        assert resp.json()["error"] == {
            "code": "LOCATION_NOT_FOUND",
            "message": "Location not found. Try a nearby city name.",
            "hint": "hint",
        }

    def test_forecast_timeout(self, client) -> None:
        provider = FakeProvider(error=UpstreamError("Upstream timeout", status=504, upstream="open-meteo-forecast", detail="Timeout after 8.0s"))
        _use(client, provider)
        with patch("paintwindow.api.forecast.resolve_location", return_value=MADISON):
            resp = client.get("/api/forecast", params={"task": "paint", "loc": "Madison"})
        assert resp.status_code == 504
        error = resp.json()["error"]
        assert error["code"] == "UPSTREAM_ERROR"
        assert error["details"] == "Timeout after 8.0s"

    def test_geocoder_upstream_error(self, client) -> None:
        _use(client, FakeProvider())
        with patch("paintwindow.api.forecast.resolve_location", side_effect=UpstreamError("Upstream error 500")):
            resp = client.get("/api/forecast", params={"task": "paint", "loc": "Madison"})
        assert resp.status_code == 502
        assert resp.json()["error"]["code"] == "UPSTREAM_ERROR"

    def test_unexpected_error(self, client) -> None:
        _use(client, FakeProvider(error=RuntimeError("kaboom")))
        with patch("paintwindow.api.forecast.resolve_location", return_value=MADISON):
            resp = client.get("/api/forecast", params={"task": "paint", "loc": "Madison"})
        assert resp.status_code == 500
        assert resp.json()["error"]["code"] == "SERVER_ERROR"


def test_health(client) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
