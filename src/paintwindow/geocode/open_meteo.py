# src/paintwindow/geocode/open_meteo.py
from typing import Any, Dict, List, Optional

from paintwindow.core.http import get_json
from paintwindow.core.settings import GEOCODE_TIMEOUT_SEC
from paintwindow.core.urls import provider_url
from paintwindow.geocode.normalize import NormalizedLoc
from paintwindow.geocode.types import Location


def search_open_meteo(name: str, timeout: Optional[float] = None) -> List[Dict[str, Any]]:
    """Open-Meteo geocoding search. 결과는 이미 랭킹 순."""
    params = {"name": name.strip(), "count": 5, "language": "en", "format": "json"}
    data = get_json(
        provider_url("geocode"),
        params=params,
        timeout=timeout or GEOCODE_TIMEOUT_SEC,
        upstream="open-meteo-geocode",
    )
    return (data or {}).get("results") or []


def pick_best_result(query: NormalizedLoc, results: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not results:
        return None

    # ZIP 입력이면 postal_code가 정확히 일치하는 결과를 우선
    if query.is_zip_like:
        zip5 = query.raw[:5]
        for r in results:
            if str(r.get("postal_code") or "") == zip5:
                return r

    return results[0]


def to_location(r: Dict[str, Any]) -> Location:
    return Location(
        name=r.get("name") or "",
        latitude=float(r["latitude"]),
        longitude=float(r["longitude"]),
        admin1=r.get("admin1"),
        country=r.get("country"),
        timezone=r.get("timezone") or "auto",
        source="open-meteo",
    )
