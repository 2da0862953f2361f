"""End-to-end tests for verdict assembly (no I/O)."""

from __future__ import annotations

from paintwindow.engine.reasons import ReasonCode, RiskLevel, TaskKind
from paintwindow.pipelines.verdict import build_verdict
from tests.factories import hour, hours, iso_at, thresholds


def test_go_now_and_next_window_is_now(th) -> None:
    verdict = build_verdict("paint", hours(72), th, iso_at(2))
    assert verdict.task == TaskKind.PAINT
    assert verdict.now.go is True
    assert verdict.now.start == iso_at(2)
    assert verdict.now.end == iso_at(6)
    assert verdict.now.risk == RiskLevel.LOW
    assert verdict.now.summary == "Go: professional-safe paint conditions."
    assert verdict.next_window.start == iso_at(2)
    assert verdict.next_window.summary == "Next paint-safe window found."


def test_no_go_now_with_later_window(th) -> None:
    data = [hour(i, rain_probability_pct=80.0 if i < 20 else 0.0) for i in range(72)]
    verdict = build_verdict("stain", data, thresholds(task=TaskKind.STAIN), iso_at(0))
    assert verdict.now.go is False
    assert verdict.now.risk == RiskLevel.HIGH
    assert verdict.now.reasons[0].code == ReasonCode.RAIN_RISK_DURING
    assert verdict.now.summary.startswith("No-go: Rain probability exceeds 30% during the work window")
    assert verdict.next_window.start == iso_at(20)
    assert verdict.next_window.end == iso_at(24)
    assert verdict.next_window.duration_hours == 4
    assert verdict.next_window.risk == RiskLevel.LOW
    assert verdict.next_window.summary == "Next stain-safe window found."


def test_nothing_found(th) -> None:
    verdict = build_verdict("paint", hours(72, wind_mph=30.0), th, iso_at(0))
    d = verdict.as_dict()
    assert d["now"]["go"] is False
    assert d["now"]["reasons"][0]["code"] == "wind_too_high"
    assert d["next_window"] == {
        "start": None,
        "end": None,
        "duration_hours": None,
        "risk": None,
        "summary": "No safe window found in the next few days.",
    }
    assert d["thresholds"]["task"] == "paint"


def test_short_forecast_reports_insufficient_data(th) -> None:
    verdict = build_verdict("paint", hours(6), th, iso_at(0))
    assert verdict.now.go is False
    assert verdict.now.risk == RiskLevel.MEDIUM
    assert verdict.now.end == iso_at(4)
    assert [r.code for r in verdict.now.reasons] == [ReasonCode.INSUFFICIENT_DATA]
    assert verdict.now.summary == "No-go: Not enough forecast data to evaluate the full window."
    assert verdict.next_window.start is None


def test_end_is_none_past_forecast(th) -> None:
    verdict = build_verdict("paint", hours(10), th, iso_at(8))
    assert verdict.now.start == iso_at(8)
    assert verdict.now.end is None


def test_empty_forecast_uses_anchor(th) -> None:
    verdict = build_verdict("paint", [], th, iso_at(0))
    assert verdict.now.start == iso_at(0)
    assert verdict.now.end is None
    assert verdict.now.go is False
