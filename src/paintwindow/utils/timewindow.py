# src/paintwindow/utils/timewindow.py
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Sequence

from paintwindow.weather.types import HourlyObservation


def parse_iso(value: str) -> datetime:
    """ISO-8601 -> aware datetime. 'Z' 접미사 허용, naive 값은 UTC로 간주."""
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso_utc(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def next_hour_iso(now: datetime) -> str:
    """
    Top of the next hour after `now`, as a UTC ISO string.
    현재 시각이 정각이어도 다음 정각으로 넘어간다.
    """
    floored = now.replace(minute=0, second=0, microsecond=0)
    return to_iso_utc(floored + timedelta(hours=1))


def first_index_at_or_after(hours: Sequence[HourlyObservation], start_iso: str) -> int:
    """First index whose time >= start_iso, or 0 when every hour is earlier."""
    start = parse_iso(start_iso)
    for i, h in enumerate(hours):
        if parse_iso(h.time) >= start:
            return i
    return 0
