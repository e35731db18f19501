"""GitHub star counts for a repository or every public repository of an owner."""

import logging
from typing import Iterator, Optional

import httpx
from pydantic import ValidationError

from chatquery.config import Settings
from chatquery.exceptions import DecodeError, InvalidQueryError, TransportError
from chatquery.models import Repository, RepositoryPage
from chatquery.normalize import normalize_stars, sum_stars

from .http import decode_json, decode_model, http_get

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
PER_PAGE = 50


def _headers(token: str) -> dict[str, str]:
    return {
        "Accept": "application/vnd.github+json",
        "Authorization": f"Bearer {token}",
    }


def _found(response: httpx.Response, target: str) -> bool:
    """False for 404; any other non-200 status is a transport failure."""
    if response.status_code == 404:
        logger.info(f"GitHub has no {target}")
        return False
    if response.status_code != 200:
        raise TransportError(
            f"GitHub returned {response.status_code} for {target}",
            status_code=response.status_code,
        )
    return True


def next_page_number(response: httpx.Response) -> Optional[int]:
    """Read the page number of the ``next`` relation in the Link header."""
    link = response.links.get("next")
    if not link or not link.get("url"):
        return None
    page = httpx.URL(link["url"]).params.get("page")
    if not page or not page.isdigit():
        return None
    return int(page)


def parse_repository_page(response: httpx.Response) -> RepositoryPage:
    data = decode_json(response)
    if not isinstance(data, list):
        raise DecodeError("GitHub repository listing is not a list")
    try:
        return RepositoryPage(
            repositories=[Repository.model_validate(item) for item in data],
            next_page=next_page_number(response),
        )
    except ValidationError as e:
        raise DecodeError(f"Unexpected GitHub repository shape: {e}") from e


def fetch_repository_stars(owner: str, repo: str, token: str, timeout: float = 5.0) -> Optional[int]:
    """Stars of a single repository, or None when it does not exist."""
    response = http_get(
        f"{GITHUB_API_URL}/repos/{owner}/{repo}",
        headers=_headers(token),
        timeout=timeout,
    )
    if not _found(response, f"{owner}/{repo}"):
        return None
    return decode_model(response, Repository).stargazers_count or 0


def iter_repository_pages(owner: str, token: str, timeout: float = 5.0) -> Iterator[RepositoryPage]:
    """Lazily yield an owner's public repositories, one request per page."""
    page = 1
    while True:
        response = http_get(
            f"{GITHUB_API_URL}/users/{owner}/repos",
            params={"type": "public", "per_page": PER_PAGE, "page": page},
            headers=_headers(token),
            timeout=timeout,
        )
        if not _found(response, owner):
            return

        listing = parse_repository_page(response)
        logger.debug(f"GitHub {owner} page {page}: {len(listing.repositories)} repositories")
        yield listing

        if not listing.repositories or listing.next_page is None:
            return
        page = listing.next_page


def github_stars(user_or_repo: str, settings: Settings) -> str:
    """Take a user (aarondl) or repo (aarondl/query) and report its stars."""
    target = user_or_repo.strip()
    if not target:
        raise InvalidQueryError("must supply a user or owner/repo")
    token = settings.require("github_api_key")

    owner, _, repo = target.partition("/")
    if not owner or "/" in repo:
        raise InvalidQueryError(f"expected owner or owner/repo, got {target!r}")
    if repo:
        total = fetch_repository_stars(owner, repo, token, timeout=settings.http_timeout)
    else:
        total = sum_stars(iter_repository_pages(owner, token, timeout=settings.http_timeout))
    return normalize_stars(total)
