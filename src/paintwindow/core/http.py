# src/paintwindow/core/http.py
from __future__ import annotations
import logging
import uuid
from typing import Any, Dict, Optional

import httpx
import requests

from paintwindow.core.errors import UpstreamError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


def make_request_id() -> str:
    return uuid.uuid4().hex[:12]


def _detail(text: str) -> str:
    return (text or "")[:300]


async def fetch_json(
    url: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 8.0,
    upstream: str = "upstream",
) -> Any:
    """
    GET + JSON (async).
    - non-2xx  -> UpstreamError(502)
    - timeout  -> UpstreamError(504)
    - 그 외 전송 오류 -> UpstreamError(502)
    """
    try:
        async with httpx.AsyncClient(timeout=timeout, headers={**DEFAULT_HEADERS, **(headers or {})}) as client:
            r = await client.get(url, params=params)
            r.raise_for_status()
            return r.json()
    except httpx.HTTPStatusError as e:
        logger.warning("%s responded %s", upstream, e.response.status_code)
        raise UpstreamError(
            f"Upstream error {e.response.status_code}",
            status=502, upstream=upstream, detail=_detail(e.response.text),
        ) from e
    except httpx.TimeoutException as e:
        logger.warning("%s timed out after %ss", upstream, timeout)
        raise UpstreamError(
            "Upstream timeout", status=504, upstream=upstream, detail=f"Timeout after {timeout}s",
        ) from e
    except (httpx.RequestError, ValueError) as e:
        logger.warning("%s request failed: %s", upstream, e)
        raise UpstreamError(
            "Upstream request failed", status=502, upstream=upstream, detail=_detail(str(e)),
        ) from e


def get_json(
    url: str,
    *,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: float = 5.0,
    upstream: str = "upstream",
) -> Any:
    """Blocking counterpart of fetch_json (requests). Same error mapping."""
    try:
        resp = requests.get(url, params=params, headers={**DEFAULT_HEADERS, **(headers or {})}, timeout=timeout)
    except requests.Timeout as e:
        logger.warning("%s timed out after %ss", upstream, timeout)
        raise UpstreamError(
            "Upstream timeout", status=504, upstream=upstream, detail=f"Timeout after {timeout}s",
        ) from e
    except requests.RequestException as e:
        logger.warning("%s request failed: %s", upstream, e)
        raise UpstreamError(
            "Upstream request failed", status=502, upstream=upstream, detail=_detail(str(e)),
        ) from e

    if not resp.ok:
        logger.warning("%s responded %s", upstream, resp.status_code)
        raise UpstreamError(
            f"Upstream error {resp.status_code}",
            status=502, upstream=upstream, detail=_detail(resp.text),
        )

    try:
        return resp.json()
    except ValueError as e:
        raise UpstreamError(
            "Upstream returned invalid JSON", status=502, upstream=upstream, detail=_detail(resp.text),
        ) from e
