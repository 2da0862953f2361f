# src/paintwindow/engine/reasons.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class TaskKind(str, Enum):
    PAINT = "paint"
    STAIN = "stain"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReasonCode(str, Enum):
    TEMP_TOO_LOW = "temp_too_low"
    OVERNIGHT_TEMP_RISK = "overnight_temp_risk"
    HUMIDITY_TOO_HIGH = "humidity_too_high"
    WIND_TOO_HIGH = "wind_too_high"
    RAIN_RISK_DURING = "rain_risk_during"
    PRECIPITATION_DURING = "precipitation_during"
    RAIN_RISK_AFTER = "rain_risk_after"
    PRECIPITATION_AFTER = "precipitation_after"
    INSUFFICIENT_DATA = "insufficient_data"


# 평가 순서 = reasons 순서 = margins 인덱스
CRITERIA: Tuple[ReasonCode, ...] = (
    ReasonCode.TEMP_TOO_LOW,
    ReasonCode.OVERNIGHT_TEMP_RISK,
    ReasonCode.HUMIDITY_TOO_HIGH,
    ReasonCode.WIND_TOO_HIGH,
    ReasonCode.RAIN_RISK_DURING,
    ReasonCode.PRECIPITATION_DURING,
    ReasonCode.RAIN_RISK_AFTER,
    ReasonCode.PRECIPITATION_AFTER,
)


@dataclass(frozen=True)
class Reason:
    code: ReasonCode
    message: str
    observed: Dict[str, Any] = field(default_factory=dict)
    threshold: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "observed": dict(self.observed),
            "threshold": dict(self.threshold),
        }


@dataclass(frozen=True)
class EvaluationResult:
    """
    One window evaluation.
    margins: len(CRITERIA) values in CRITERIA order, or () when the forecast was too short.
    """
    ok: bool
    reasons: Tuple[Reason, ...]
    margins: Tuple[float, ...]

    def margin(self, code: ReasonCode) -> float | None:
        if not self.margins:
            return None
        return self.margins[CRITERIA.index(code)]

    @property
    def codes(self) -> Tuple[ReasonCode, ...]:
        return tuple(r.code for r in self.reasons)
