# src/paintwindow/models/rules.py
from __future__ import annotations
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from paintwindow.engine.reasons import TaskKind

# ===== Rules document (rules.config.json) =====

class _Strict(BaseModel):
    # 문자열 "50" 같은 값도 숫자로 받아주지 않음: 설정 오류는 기동 시점에 터뜨린다
    model_config = ConfigDict(strict=True, frozen=True)


class GlobalRules(_Strict):
    min_temp_f: float
    overnight_min_temp_f: float
    rain_probability_max_pct: float = Field(..., ge=0, le=100)
    precipitation_max_mm: float = Field(..., ge=0)


class TaskRules(_Strict):
    label: str
    max_humidity_pct: float = Field(..., ge=0, le=100)
    max_wind_mph: float = Field(..., ge=0)
    no_rain_buffer_hours: int = Field(..., ge=0)


class EvaluationRules(_Strict):
    min_window_hours: int = Field(..., ge=1)
    round_start_to_next_hour: bool = True


class RulesConfig(_Strict):
    units: str = "us"
    horizon_hours: int = Field(..., ge=1)
    global_: GlobalRules = Field(..., alias="global")
    evaluation: EvaluationRules
    tasks: Dict[str, TaskRules]

    @model_validator(mode="after")
    def _every_task_configured(self):
        missing = [t.value for t in TaskKind if t.value not in self.tasks]
        if missing:
            raise ValueError(f"rules document has no section for task(s): {', '.join(missing)}")
        return self
