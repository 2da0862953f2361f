# src/paintwindow/engine/finder.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from paintwindow.engine.evaluator import evaluate_at
from paintwindow.engine.reasons import Reason, RiskLevel
from paintwindow.engine.risk import risk_from_margins
from paintwindow.engine.thresholds import ThresholdSet
from paintwindow.utils.timewindow import first_index_at_or_after
from paintwindow.weather.types import HourlyObservation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WindowMatch:
    start: Optional[str] = None
    end: Optional[str] = None
    duration_hours: Optional[int] = None
    risk: Optional[RiskLevel] = None
    reasons: Tuple[Reason, ...] = ()
    start_index: Optional[int] = None

    @property
    def found(self) -> bool:
        return self.start is not None


NOT_FOUND = WindowMatch()


def find_next_window(hours: Sequence[HourlyObservation], th: ThresholdSet, search_start_iso: str) -> WindowMatch:
    """
    search_start_iso 이후 첫 통과 구간.
    Scans at most th.horizon_hours candidate starts; no pass -> NOT_FOUND (not an error).
    """
    begin = first_index_at_or_after(hours, search_start_iso)
    count = min(th.horizon_hours, len(hours) - begin)

    for i in range(begin, begin + count):
        ev = evaluate_at(i, hours, th)
        if ev.ok:
            return WindowMatch(
                start=hours[i].time,
                end=hours[i + th.min_window_hours].time,
                duration_hours=th.min_window_hours,
                risk=risk_from_margins(ev.margins),
                reasons=ev.reasons,
                start_index=i,
            )

    logger.info("no %s window within %d candidate hours", th.task.value, max(count, 0))
    return NOT_FOUND
