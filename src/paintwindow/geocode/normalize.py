# src/paintwindow/geocode/normalize.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

MAX_QUERY_LEN = 120

_CA_POSTAL = re.compile(r"^[A-Z]\d[A-Z]\d[A-Z]\d$")
_US_ZIP = re.compile(r"^[0-9]{5}(-[0-9]{4})?$")
_WS = re.compile(r"\s+")


@dataclass(frozen=True)
class NormalizedLoc:
    raw: str
    is_zip_like: bool
    is_canada_postal: bool
    ca_compact: Optional[str] = None
    ca_spaced: Optional[str] = None


def normalize_loc(raw: Optional[str]) -> NormalizedLoc:
    """
    - "A1A 1A1" / "a1a1a1" -> 캐나다 우편번호 (compact / spaced 둘 다 준비)
    - "12345" / "12345-6789" -> US ZIP
    - 너무 긴 입력은 120자에서 자른다
    """
    s = (raw or "").strip()

    ca = _WS.sub("", s.upper())
    is_ca = bool(_CA_POSTAL.match(ca))

    return NormalizedLoc(
        raw=s[:MAX_QUERY_LEN],
        is_zip_like=bool(_US_ZIP.match(s)),
        is_canada_postal=is_ca,
        ca_compact=ca if is_ca else None,
        ca_spaced=f"{ca[:3]} {ca[3:]}" if is_ca else None,
    )


def safe_text(s: Optional[str]) -> str:
    return _WS.sub(" ", s or "").strip()
