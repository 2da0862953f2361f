# src/paintwindow/geocode/nominatim.py
import math
from typing import Optional

from paintwindow.config import NOMINATIM_USER_AGENT
from paintwindow.core.http import get_json
from paintwindow.core.settings import NOMINATIM_TIMEOUT_SEC
from paintwindow.core.urls import provider_url
from paintwindow.geocode.normalize import safe_text
from paintwindow.geocode.types import Location


def search_nominatim(query: str, timeout: Optional[float] = None) -> Optional[Location]:
    """
    Nominatim 검색. 캐나다 우편번호 전용 fallback (countrycodes=ca, limit=1).
    """
    params = {
        "q": query.strip(),
        "format": "jsonv2",
        "addressdetails": 1,
        "limit": 1,
        "countrycodes": "ca",
    }
    data = get_json(
        provider_url("nominatim_search"),
        params=params,
        headers={"User-Agent": NOMINATIM_USER_AGENT},
        timeout=timeout or NOMINATIM_TIMEOUT_SEC,
        upstream="nominatim",
    )
    if not isinstance(data, list) or not data:
        return None

    r = data[0]
    try:
        lat = float(r.get("lat"))
        lon = float(r.get("lon"))
    except (TypeError, ValueError):
        return None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return None

    address = r.get("address") or {}
    name = (
        address.get("city") or address.get("town") or address.get("village")
        or address.get("hamlet") or address.get("county") or safe_text(r.get("display_name"))
    )
    return Location(
        name=name,
        latitude=lat,
        longitude=lon,
        admin1=address.get("state") or address.get("province"),
        country=address.get("country") or "Canada",
        timezone="auto",
        source="nominatim",
    )
