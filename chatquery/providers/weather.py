"""Weather from yr.no, resolved through the geocoding lookup."""

import logging
from urllib.parse import quote

from lxml import etree

from chatquery.config import Settings
from chatquery.exceptions import DecodeError, ProviderReportedError, TransportError
from chatquery.models import Forecast, Location
from chatquery.normalize import normalize_weather, normalize_weather_lookup_failure

from .geonames import geocode
from .http import decode_xml, http_get

logger = logging.getLogger(__name__)

YR_PLACE_URL = "http://www.yr.no/place/{path}/forecast.xml"


def forecast_url(location: Location) -> str:
    """Build the yr.no forecast URL; the county segment is only used when known."""
    segments = [location.country, location.region]
    if location.county:
        segments.append(location.county)
    segments.append(location.city)
    path = "/".join(quote(segment.replace(" ", "_")) for segment in segments)
    return YR_PLACE_URL.format(path=path)


def parse_forecast(root: etree._Element) -> Forecast:
    """Pick the current period, the first tabular time entry, from forecast.xml."""
    current = root.find("forecast/tabular/time")
    if current is None:
        raise DecodeError("yr.no forecast has no tabular time entries")

    symbol = current.find("symbol")
    temperature = current.find("temperature")
    if symbol is None or temperature is None:
        raise DecodeError("yr.no forecast period is missing symbol or temperature")

    try:
        value = int(round(float(temperature.get("value", ""))))
    except ValueError as e:
        raise DecodeError(f"Invalid yr.no temperature: {temperature.get('value')!r}") from e
    return Forecast(condition=symbol.get("name", ""), temperature=value)


def fetch_forecast(location: Location, timeout: float = 5.0) -> Forecast:
    url = forecast_url(location)
    logger.info(f"yr.no forecast for {location.city}, {location.country}")
    response = http_get(url, timeout=timeout)
    if response.status_code != 200:
        raise TransportError(
            f"yr.no returned {response.status_code} for {url}",
            status_code=response.status_code,
        )
    return parse_forecast(decode_xml(response))


def weather(query: str, settings: Settings) -> str:
    """Provide weather information from yr.no."""
    try:
        location = geocode(query, settings)
    except ProviderReportedError as e:
        logger.info(f"Weather lookup failed for {query[:50]}: {e}")
        return normalize_weather_lookup_failure(e)

    forecast = fetch_forecast(location, timeout=settings.http_timeout)
    return normalize_weather(location, forecast)
