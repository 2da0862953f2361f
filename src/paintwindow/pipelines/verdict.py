# src/paintwindow/pipelines/verdict.py
"""
Verdict assembly: threshold set + hourly forecast + anchor time -> "now" and "next window".
Pure; no I/O.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from paintwindow.engine.evaluator import evaluate_at
from paintwindow.engine.finder import find_next_window
from paintwindow.engine.reasons import Reason, RiskLevel, TaskKind
from paintwindow.engine.risk import risk_from_margins
from paintwindow.engine.summary import summarize, summarize_next
from paintwindow.engine.thresholds import ThresholdSet
from paintwindow.utils.timewindow import first_index_at_or_after
from paintwindow.weather.types import HourlyObservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NowWindow:
    start: str
    end: Optional[str]
    go: bool
    risk: RiskLevel
    summary: str
    reasons: Tuple[Reason, ...]


@dataclass(frozen=True)
class NextWindow:
    start: Optional[str]
    end: Optional[str]
    duration_hours: Optional[int]
    risk: Optional[RiskLevel]
    summary: str


@dataclass(frozen=True)
class Verdict:
    task: TaskKind
    now: NowWindow
    next_window: NextWindow
    thresholds: ThresholdSet

    def as_dict(self) -> Dict[str, Any]:
        return {
            "task": self.task.value,
            "now": {
                "start": self.now.start,
                "end": self.now.end,
                "go": self.now.go,
                "risk": self.now.risk.value,
                "summary": self.now.summary,
                "reasons": [r.as_dict() for r in self.now.reasons],
            },
            "next_window": {
                "start": self.next_window.start,
                "end": self.next_window.end,
                "duration_hours": self.next_window.duration_hours,
                "risk": self.next_window.risk.value if self.next_window.risk else None,
                "summary": self.next_window.summary,
            },
            "thresholds": self.thresholds.as_dict(),
        }


def build_verdict(
    task: TaskKind | str,
    hours: Sequence[HourlyObservation],
    th: ThresholdSet,
    eval_start_iso: str,
) -> Verdict:
    task = TaskKind(task)

    idx = first_index_at_or_after(hours, eval_start_iso)
    now_eval = evaluate_at(idx, hours, th)
    end_idx = idx + th.min_window_hours

    now = NowWindow(
        start=hours[idx].time if idx < len(hours) else eval_start_iso,
        end=hours[end_idx].time if end_idx < len(hours) else None,
        go=now_eval.ok,
        risk=risk_from_margins(now_eval.margins),
        summary=summarize(task, now_eval.ok, now_eval.reasons),
        reasons=now_eval.reasons,
    )

    match = find_next_window(hours, th, eval_start_iso)
    next_window = NextWindow(
        start=match.start,
        end=match.end,
        duration_hours=match.duration_hours,
        risk=match.risk,
        summary=summarize_next(task, match),
    )

    logger.info(
        "verdict task=%s go=%s risk=%s next=%s",
        task.value, now.go, now.risk.value, match.start,
    )
    return Verdict(task=task, now=now, next_window=next_window, thresholds=th)
