# src/paintwindow/engine/risk.py
from __future__ import annotations
import math
from typing import Iterable

from paintwindow.engine.constants import RISK_LOW_MIN_MARGIN, RISK_MEDIUM_MIN_MARGIN
from paintwindow.engine.reasons import RiskLevel


def risk_from_margins(margins: Iterable[float]) -> RiskLevel:
    """
    Bucket by the single worst finite margin.
    No finite margin (e.g. insufficient data) -> medium.
    """
    finite = [m for m in margins if math.isfinite(m)]
    if not finite:
        return RiskLevel.MEDIUM

    worst = min(finite)
    if worst >= RISK_LOW_MIN_MARGIN:
        return RiskLevel.LOW
    if worst >= RISK_MEDIUM_MIN_MARGIN:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH
