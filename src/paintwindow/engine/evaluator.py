# src/paintwindow/engine/evaluator.py
"""
Window evaluator.

A candidate start index passes when the work window [s, s+window) and the
curing buffer [s+window, s+window+buffer) that follows it satisfy every
criterion in CRITERIA. Every evaluation with enough data yields one margin per
criterion, pass or fail, so risk can be compared across candidates.
"""
from __future__ import annotations
import math
from typing import List, Sequence

from paintwindow.engine.constants import MARGIN_SCALES, OVERNIGHT_LOOKAHEAD_HOURS
from paintwindow.engine.reasons import EvaluationResult, Reason, ReasonCode
from paintwindow.engine.thresholds import ThresholdSet
from paintwindow.utils.units import round1, round2
from paintwindow.weather.types import HourlyObservation

INSUFFICIENT_DATA_MESSAGE = "Not enough forecast data to evaluate the full window."


def _margin(code: ReasonCode, distance: float) -> float:
    return distance / MARGIN_SCALES[code]


def evaluate_at(start_index: int, hours: Sequence[HourlyObservation], th: ThresholdSet) -> EvaluationResult:
    win = th.min_window_hours
    buf = th.no_rain_buffer_hours

    if start_index + win + buf > len(hours):
        return EvaluationResult(
            ok=False,
            reasons=(Reason(ReasonCode.INSUFFICIENT_DATA, INSUFFICIENT_DATA_MESSAGE),),
            margins=(),
        )

    # ---------- work window ----------
    work = hours[start_index:start_index + win]
    max_rain_prob = max(h.rain_probability_pct for h in work)
    max_wind = max(h.wind_mph for h in work)
    max_hum = max(h.humidity_pct for h in work)
    # 기온 누락(None)은 온도 집계에서만 제외, 전부 누락이면 inf
    min_temp = min((h.temp_f for h in work if h.temp_f is not None), default=math.inf)
    total_precip = sum(h.precip_mm for h in work)

    # ---------- curing buffer (rain only) ----------
    buffer = hours[start_index + win:start_index + win + buf]
    max_rain_prob_buf = max((h.rain_probability_pct for h in buffer), default=0.0)
    total_precip_buf = sum(h.precip_mm for h in buffer)

    # ---------- next 24h from start of work ----------
    overnight = hours[start_index:min(start_index + OVERNIGHT_LOOKAHEAD_HOURS, len(hours))]
    overnight_min = min((h.temp_f for h in overnight if h.temp_f is not None), default=math.inf)

    reasons: List[Reason] = []
    margins: List[float] = []

    if min_temp < th.min_temp_f:
        reasons.append(Reason(
            ReasonCode.TEMP_TOO_LOW,
            f"Temperature dips below {th.min_temp_f:g}°F during the work window.",
            {"min_temp_f": round1(min_temp)},
            {"min_temp_f": th.min_temp_f},
        ))
    margins.append(_margin(ReasonCode.TEMP_TOO_LOW, min_temp - th.min_temp_f))

    if overnight_min < th.overnight_min_temp_f:
        reasons.append(Reason(
            ReasonCode.OVERNIGHT_TEMP_RISK,
            f"Overnight low is below {th.overnight_min_temp_f:g}°F in the next 24 hours (curing risk).",
            {"overnight_min_temp_f": round1(overnight_min)},
            {"overnight_min_temp_f": th.overnight_min_temp_f},
        ))
    margins.append(_margin(ReasonCode.OVERNIGHT_TEMP_RISK, overnight_min - th.overnight_min_temp_f))

    if max_hum > th.max_humidity_pct:
        reasons.append(Reason(
            ReasonCode.HUMIDITY_TOO_HIGH,
            f"Humidity exceeds {th.max_humidity_pct:g}% during the work window.",
            {"max_humidity_pct": round1(max_hum)},
            {"max_humidity_pct": th.max_humidity_pct},
        ))
    margins.append(_margin(ReasonCode.HUMIDITY_TOO_HIGH, th.max_humidity_pct - max_hum))

    if max_wind > th.max_wind_mph:
        reasons.append(Reason(
            ReasonCode.WIND_TOO_HIGH,
            f"Wind exceeds {th.max_wind_mph:g} mph during the work window.",
            {"max_wind_mph": round1(max_wind)},
            {"max_wind_mph": th.max_wind_mph},
        ))
    margins.append(_margin(ReasonCode.WIND_TOO_HIGH, th.max_wind_mph - max_wind))

    if max_rain_prob > th.rain_probability_max_pct:
        reasons.append(Reason(
            ReasonCode.RAIN_RISK_DURING,
            f"Rain probability exceeds {th.rain_probability_max_pct:g}% during the work window.",
            {"max_rain_probability_pct": round1(max_rain_prob)},
            {"rain_probability_max_pct": th.rain_probability_max_pct},
        ))
    margins.append(_margin(ReasonCode.RAIN_RISK_DURING, th.rain_probability_max_pct - max_rain_prob))

    if total_precip > th.precipitation_max_mm:
        reasons.append(Reason(
            ReasonCode.PRECIPITATION_DURING,
            "Forecast includes measurable precipitation during the work window.",
            {"total_precip_mm": round2(total_precip)},
            {"precipitation_max_mm": th.precipitation_max_mm},
        ))
    margins.append(_margin(ReasonCode.PRECIPITATION_DURING, th.precipitation_max_mm - total_precip))

    if max_rain_prob_buf > th.rain_probability_max_pct:
        reasons.append(Reason(
            ReasonCode.RAIN_RISK_AFTER,
            f"Rain probability exceeds {th.rain_probability_max_pct:g}% in the curing buffer window.",
            {"max_rain_probability_pct_buffer": round1(max_rain_prob_buf), "buffer_hours": buf},
            {"rain_probability_max_pct": th.rain_probability_max_pct, "buffer_hours": buf},
        ))
    margins.append(_margin(ReasonCode.RAIN_RISK_AFTER, th.rain_probability_max_pct - max_rain_prob_buf))

    if total_precip_buf > th.precipitation_max_mm:
        reasons.append(Reason(
            ReasonCode.PRECIPITATION_AFTER,
            "Forecast includes measurable precipitation in the curing buffer window.",
            {"total_precip_mm_buffer": round2(total_precip_buf), "buffer_hours": buf},
            {"precipitation_max_mm": th.precipitation_max_mm, "buffer_hours": buf},
        ))
    margins.append(_margin(ReasonCode.PRECIPITATION_AFTER, th.precipitation_max_mm - total_precip_buf))

    return EvaluationResult(ok=not reasons, reasons=tuple(reasons), margins=tuple(margins))
