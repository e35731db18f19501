"""Bing Web Search provider."""

from __future__ import annotations

import logging

from chatquery.config import Settings
from chatquery.models import BadStatus, BingAnswer, BingErrorResponse, Empty, ProviderError, Success
from chatquery.models.responses import ProviderResponse
from chatquery.normalize import normalize_bing

from .http import decode_model, http_get

logger = logging.getLogger(__name__)

BING_SEARCH_URL = "https://api.cognitive.microsoft.com/bing/v7.0/search"


def fetch_bing(query: str, api_key: str, timeout: float = 5.0) -> ProviderResponse[BingAnswer]:
    """
    Search Bing for a single answer.

    Returns a ProviderResponse variant; non-200 statuses are folded into
    ProviderError (error document present) or BadStatus (empty body).
    """
    logger.info(f"Bing search for query: {query[:50]}")
    response = http_get(
        BING_SEARCH_URL,
        params={
            "answerCount": "1",
            "count": "1",
            "safeSearch": "Moderate",
            "q": query,
        },
        headers={
            "Accept": "application/json",
            "Ocp-Apim-Subscription-Key": api_key,
        },
        timeout=timeout,
    )

    if response.status_code != 200:
        if not response.content:
            logger.warning(f"Bing returned {response.status_code} with empty body")
            return BadStatus(status_code=response.status_code)

        errors = decode_model(response, BingErrorResponse).errors
        if not errors:
            return BadStatus(status_code=response.status_code)
        logger.warning(f"Bing query error {errors[0].code}: {errors[0].message}")
        return ProviderError(message=errors[0].message, code=errors[0].code or None)

    answer = decode_model(response, BingAnswer)
    if answer.is_empty:
        return Empty()
    return Success(payload=answer)


def bing(query: str, settings: Settings) -> str:
    """Perform a Bing query and return a formatted result."""
    api_key = settings.require("bing_api_key")
    return normalize_bing(fetch_bing(query, api_key, timeout=settings.http_timeout))
