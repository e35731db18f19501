"""Shared transport helpers for the provider clients."""

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx
from lxml import etree
from pydantic import BaseModel, ValidationError

from chatquery.exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)

USER_AGENT = "chatquery/1.0"

ModelT = TypeVar("ModelT", bound=BaseModel)

# Third-party XML: no entity expansion, no fetching of external DTDs.
_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)


def http_get(
    url: str,
    *,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout: float = 5.0,
) -> httpx.Response:
    """
    Perform one GET request and return the response whatever its status.

    Raises:
        TransportError: when the provider cannot be reached
    """
    request_headers = {"User-Agent": USER_AGENT}
    if headers:
        request_headers.update(headers)

    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(url, params=params, headers=request_headers)
    except httpx.RequestError as e:
        logger.error(f"Network error requesting {url}: {e}")
        raise TransportError(f"Network error requesting {url}: {e}") from e

    logger.debug(f"{url} responded {response.status_code}")
    return response


def decode_json(response: httpx.Response) -> Any:
    """Parse a JSON body, raising DecodeError when it is not JSON."""
    try:
        return response.json()
    except ValueError as e:
        raise DecodeError(f"Invalid JSON from {_describe(response)}: {e}") from e


def decode_model(response: httpx.Response, model: Type[ModelT]) -> ModelT:
    """Parse a JSON body straight into a pydantic model."""
    data = decode_json(response)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected response shape for {model.__name__}: {e}") from e


def decode_xml(response: httpx.Response) -> etree._Element:
    """Parse an XML body, raising DecodeError when it is malformed."""
    try:
        return etree.fromstring(response.content, parser=_XML_PARSER)
    except etree.XMLSyntaxError as e:
        raise DecodeError(f"Invalid XML from {_describe(response)}: {e}") from e


def _describe(response: httpx.Response) -> str:
    try:
        return str(response.request.url.copy_with(query=None))
    except RuntimeError:
        return "provider"
