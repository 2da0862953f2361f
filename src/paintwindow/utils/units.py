# src/paintwindow/utils/units.py
from __future__ import annotations


def round1(n: float) -> float:
    return round(n * 10) / 10


def round2(n: float) -> float:
    return round(n * 100) / 100


def c_to_f(c: float) -> float:
    return (c * 9 / 5) + 32


def kmh_to_mph(kmh: float) -> float:
    return kmh * 0.621371
