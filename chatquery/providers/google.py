"""Google Custom Search provider."""

from __future__ import annotations

import logging

from chatquery.config import Settings
from chatquery.models import BadStatus, Empty, GoogleErrorResponse, GoogleSearch, ProviderError, Success
from chatquery.models.responses import ProviderResponse
from chatquery.normalize import normalize_google

from .http import decode_model, http_get

logger = logging.getLogger(__name__)

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"


def fetch_google(
    query: str, api_key: str, cx_id: str, timeout: float = 5.0
) -> ProviderResponse[GoogleSearch]:
    """Search Google Custom Search for the top result."""
    logger.info(f"Google search for query: {query[:50]}")
    response = http_get(
        GOOGLE_SEARCH_URL,
        params={"cx": cx_id, "key": api_key, "q": query, "num": "1"},
        timeout=timeout,
    )

    if response.status_code != 200:
        if not response.content:
            return BadStatus(status_code=response.status_code)
        error = decode_model(response, GoogleErrorResponse).error
        if not error.message:
            return BadStatus(status_code=response.status_code)
        logger.warning(f"Google query error {error.code}: {error.message}")
        code = str(error.code) if error.code is not None else None
        return ProviderError(message=error.message, code=code)

    results = decode_model(response, GoogleSearch)
    if not results.items:
        return Empty()
    return Success(payload=results)


def google(query: str, settings: Settings) -> str:
    """Perform a Google query and return a formatted result."""
    api_key = settings.require("google_search_api_key")
    cx_id = settings.require("google_search_cx_id")
    return normalize_google(fetch_google(query, api_key, cx_id, timeout=settings.http_timeout))
