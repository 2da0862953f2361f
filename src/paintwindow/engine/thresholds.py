# src/paintwindow/engine/thresholds.py
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict

from paintwindow.engine.reasons import TaskKind
from paintwindow.models.rules import RulesConfig


@dataclass(frozen=True)
class ThresholdSet:
    task: TaskKind
    label: str
    # global
    min_temp_f: float
    overnight_min_temp_f: float
    rain_probability_max_pct: float
    precipitation_max_mm: float
    # task
    max_humidity_pct: float
    max_wind_mph: float
    # window sizing
    min_window_hours: int
    no_rain_buffer_hours: int
    horizon_hours: int

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["task"] = self.task.value
        return d


def build_thresholds(rules: RulesConfig, task: TaskKind | str) -> ThresholdSet:
    """global + task + evaluation 섹션을 하나의 평면 레코드로 합친다."""
    task = TaskKind(task)
    g = rules.global_
    t = rules.tasks[task.value]
    return ThresholdSet(
        task=task,
        label=t.label,
        min_temp_f=g.min_temp_f,
        overnight_min_temp_f=g.overnight_min_temp_f,
        rain_probability_max_pct=g.rain_probability_max_pct,
        precipitation_max_mm=g.precipitation_max_mm,
        max_humidity_pct=t.max_humidity_pct,
        max_wind_mph=t.max_wind_mph,
        min_window_hours=rules.evaluation.min_window_hours,
        no_rain_buffer_hours=t.no_rain_buffer_hours,
        horizon_hours=rules.horizon_hours,
    )
