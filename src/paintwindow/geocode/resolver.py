# src/paintwindow/geocode/resolver.py
"""
Free text / postal code -> one Location.

Order:
  1) Open-Meteo with the input as typed
  2) Canadian postal code only: Open-Meteo with compact, then spaced variants
  3) Canadian postal code only: Nominatim
Primary provider failures propagate as UpstreamError. A Nominatim failure is
reported as "not found" with a postal-code hint.
"""
from __future__ import annotations
import logging

from paintwindow.core.errors import LocationNotFoundError, UpstreamError
from paintwindow.geocode.nominatim import search_nominatim
from paintwindow.geocode.normalize import normalize_loc
from paintwindow.geocode.open_meteo import pick_best_result, search_open_meteo, to_location
from paintwindow.geocode.types import Location

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Location not found. Try a nearby city name."
HINT_GENERAL = "Try 'City, State' or a nearby larger city."
HINT_POSTAL = "Postal code geocoding failed. Try entering the nearest city."


def resolve_location(raw: str | None) -> Location:
    n = normalize_loc(raw)
    if not n.raw:
        raise LocationNotFoundError("MISSING_LOCATION", "Missing loc. Use loc=ZIP or City.")

    best = pick_best_result(n, search_open_meteo(n.raw))
    if best:
        return to_location(best)

    if n.is_canada_postal:
        for variant in (n.ca_compact, n.ca_spaced):
            best = pick_best_result(n, search_open_meteo(variant))
            if best:
                return to_location(best)

        try:
            nom = search_nominatim(n.ca_spaced)
        except UpstreamError as e:
            logger.warning("nominatim fallback failed for %r: %s", n.ca_spaced, e.detail or e.message)
            raise LocationNotFoundError("LOCATION_NOT_FOUND", NOT_FOUND_MESSAGE, HINT_POSTAL) from e
        if nom:
            return nom

    logger.info("location not found: %r", n.raw)
    raise LocationNotFoundError("LOCATION_NOT_FOUND", NOT_FOUND_MESSAGE, HINT_GENERAL)
