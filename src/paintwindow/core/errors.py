# src/paintwindow/core/errors.py
from __future__ import annotations
from typing import Optional


class UpstreamError(Exception):
    """외부 provider (geocoding / forecast) 호출 실패."""

    def __init__(
        self,
        message: str,
        *,
        status: int = 502,
        upstream: Optional[str] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.upstream = upstream
        self.detail = detail


class LocationNotFoundError(Exception):
    """Location input could not be resolved to a single place."""

    def __init__(self, code: str, message: str, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint
