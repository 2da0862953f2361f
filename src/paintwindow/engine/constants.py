"""Decision engine constants.

Margin scales divide the signed distance between an aggregate and its limit so
that unlike units land on a roughly comparable scale for risk bucketing. They
are fixed design values, not probabilities.
"""

from __future__ import annotations

from typing import Dict

from paintwindow.engine.reasons import ReasonCode

# ── Margin scales (units of the criterion per 1.0 margin) ──────────────────

MARGIN_SCALES: Dict[ReasonCode, float] = {
    ReasonCode.TEMP_TOO_LOW: 20.0,          # °F
    ReasonCode.OVERNIGHT_TEMP_RISK: 20.0,   # °F
    ReasonCode.HUMIDITY_TOO_HIGH: 30.0,     # %RH
    ReasonCode.WIND_TOO_HIGH: 20.0,         # mph
    ReasonCode.RAIN_RISK_DURING: 30.0,      # % probability
    ReasonCode.PRECIPITATION_DURING: 1.0,   # mm
    ReasonCode.RAIN_RISK_AFTER: 30.0,       # % probability
    ReasonCode.PRECIPITATION_AFTER: 1.0,    # mm
}

# ── Risk buckets (worst margin) ───────────────────────────────────────────

RISK_LOW_MIN_MARGIN: float = 0.25
RISK_MEDIUM_MIN_MARGIN: float = 0.10

# ── Window geometry ────────────────────────────────────────────────────────

# curing-risk look-ahead from the start of work, independent of window length
OVERNIGHT_LOOKAHEAD_HOURS: int = 24
