"""GeoNames geocoding with a static table of pre-resolved places."""

import logging
from types import MappingProxyType
from typing import Mapping

from chatquery.config import Settings
from chatquery.models import GeonamesData, Location
from chatquery.normalize import select_place

from .http import decode_model, http_get

logger = logging.getLogger(__name__)

GEONAMES_SEARCH_URL = "http://api.geonames.org/search"

PLACES_LOOKUP: Mapping[str, Location] = MappingProxyType({
    "oslo": Location("Norway", "Oslo", "Oslo", "Oslo"),
    "sandvika": Location("Norway", "Akershus", "Bærum", "Sandvika"),
})


def lookup_static(query: str) -> Location | None:
    """Return the pre-resolved location for a well-known place, if any."""
    return PLACES_LOOKUP.get(query.strip().lower())


def fetch_location(query: str, username: str, timeout: float = 5.0) -> Location:
    """
    Resolve a free-text place name through the GeoNames search API.

    Raises:
        PlaceNotFoundError: no place matched the query
        ProviderReportedError: GeoNames rejected the request
        TransportError / DecodeError: the call itself failed
    """
    logger.info(f"GeoNames lookup for: {query[:50]}")
    response = http_get(
        GEONAMES_SEARCH_URL,
        params={
            "username": username,
            "q": query,
            "maxRows": "1",
            "type": "json",
            "orderby": "relevance",
        },
        timeout=timeout,
    )
    return select_place(query, decode_model(response, GeonamesData))


def geocode(query: str, settings: Settings) -> Location:
    """Resolve a place, checking the static table before the remote lookup."""
    location = lookup_static(query)
    if location is not None:
        logger.debug(f"Static place hit for: {query}")
        return location
    username = settings.require("geonames_id")
    return fetch_location(query, username, timeout=settings.http_timeout)
