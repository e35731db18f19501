"""Wolfram|Alpha knowledge engine provider."""

from __future__ import annotations

import logging

from lxml import etree

from chatquery.config import Settings
from chatquery.exceptions import DecodeError
from chatquery.models import BadStatus, Pod, ProviderError, Success, WolframData
from chatquery.models.responses import ProviderResponse
from chatquery.normalize import normalize_wolfram

from .http import decode_xml, http_get

logger = logging.getLogger(__name__)

WOLFRAM_QUERY_URL = "http://api.wolframalpha.com/v2/query"


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"


def parse_queryresult(root: etree._Element) -> ProviderResponse[WolframData]:
    """Turn a ``queryresult`` element into a response variant."""
    if root.tag != "queryresult":
        raise DecodeError(f"Expected queryresult document, got {root.tag}")

    if _as_bool(root.get("error")):
        message = root.findtext("error/msg") or "unknown error"
        code = root.findtext("error/code")
        return ProviderError(message=message, code=code)

    try:
        timing = float(root.get("parsetiming", "0") or 0)
    except ValueError as e:
        raise DecodeError(f"Invalid parsetiming: {root.get('parsetiming')!r}") from e

    pods = [
        Pod(
            title=pod.get("title", ""),
            id=pod.get("id", ""),
            primary=_as_bool(pod.get("primary")),
            plaintexts=[text.text or "" for text in pod.findall("subpod/plaintext")],
        )
        for pod in root.findall("pod")
    ]
    did_you_means = [
        (suggestion.text or "").strip()
        for suggestion in root.findall("didyoumeans/didyoumean")
    ]

    return Success(
        payload=WolframData(
            success=_as_bool(root.get("success")),
            parse_timing=timing,
            pods=pods,
            did_you_means=did_you_means,
        )
    )


def fetch_wolfram(query: str, app_id: str, timeout: float = 5.0) -> ProviderResponse[WolframData]:
    logger.info(f"Wolfram query: {query[:50]}")
    response = http_get(
        WOLFRAM_QUERY_URL,
        params={"format": "plaintext", "input": query, "appid": app_id},
        timeout=timeout,
    )
    if response.status_code != 200:
        logger.warning(f"Wolfram returned {response.status_code}")
        return BadStatus(status_code=response.status_code)
    return parse_queryresult(decode_xml(response))


def wolfram(query: str, settings: Settings) -> str:
    """Perform a Wolfram|Alpha query and return a formatted result."""
    app_id = settings.require("wolfram_id")
    return normalize_wolfram(query, fetch_wolfram(query, app_id, timeout=settings.http_timeout))
