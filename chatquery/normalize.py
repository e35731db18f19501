"""Normalize provider responses into single IRC status lines.

Every function here is pure: it takes an already-fetched, already-parsed
response and returns the line to emit. Nothing in this module touches the
network, so the same input always renders to the same bytes.
"""

from __future__ import annotations

from typing import Iterable, Optional
from urllib.parse import quote_plus

from chatquery.exceptions import PlaceNotFoundError, ProviderReportedError
from chatquery.models import (
    BadStatus,
    BingAnswer,
    Empty,
    Forecast,
    GeonamesData,
    GoogleSearch,
    Location,
    ProviderError,
    ProviderResponse,
    RepositoryPage,
    Success,
    VideoListResponse,
    WolframData,
)
from chatquery.utils.formatting import BOLD, bold, humanize_duration, label, strip_iso_prefix

BING = "Bing"
GOOGLE = "Google"
WEATHER = "Weather"
WEATHER_SOURCE = "YR.no"
WOLFRAM = "Wolfram"
GITHUB = "GitHub"
YOUTUBE = "YouTube"

WOLFRAM_INPUT_URL = "https://www.wolframalpha.com/input/?i={}"


def no_results(name: str) -> str:
    """Canonical sentence for a well-formed response with nothing to show."""
    return bold(f"{name}: No results found.")


def _status_line(name: str, response: ProviderError | BadStatus) -> str:
    if isinstance(response, ProviderError):
        return f"{label(name)} Query error {response.message}"
    return f"{label(name)} Query returned {response.status_code}"


def normalize_bing(response: ProviderResponse[BingAnswer]) -> str:
    """Render a Bing answer; page results win over video results."""
    if isinstance(response, (ProviderError, BadStatus)):
        return _status_line(BING, response)
    if isinstance(response, Empty):
        return no_results(BING)

    answer = response.payload
    if answer.web_pages.value:
        page = answer.web_pages.value[0]
        return (
            f"{label(BING, f'{answer.web_pages.total_estimated_matches} results')} "
            f"{page.url} - {page.snippet}"
        )
    if answer.videos.value:
        video = answer.videos.value[0]
        return (
            f"{label(BING, strip_iso_prefix(video.duration))} "
            f"{video.content_url} - {video.name} - {video.description}"
        )
    return no_results(BING)


def normalize_google(response: ProviderResponse[GoogleSearch]) -> str:
    """Render a Google Custom Search response."""
    if isinstance(response, (ProviderError, BadStatus)):
        return _status_line(GOOGLE, response)
    if isinstance(response, Empty) or not response.payload.items:
        return no_results(GOOGLE)

    search = response.payload
    item = search.items[0]
    return f"{label(GOOGLE, f'{search.info.total_results} results')} {item.link} - {item.snippet}"


def select_place(query: str, data: GeonamesData) -> Location:
    """Project a GeoNames search onto its most relevant match.

    Raises:
        PlaceNotFoundError: when the search matched nothing
        ProviderReportedError: when GeoNames answered with a status document
    """
    if data.status is not None and data.status.message:
        code = str(data.status.value) if data.status.value is not None else None
        raise ProviderReportedError(data.status.message, code)
    if not data.geonames:
        raise PlaceNotFoundError(query)

    place = data.geonames[0]
    return Location(
        country=place.country_name,
        region=place.admin_name1,
        county=None,
        city=place.name,
    )


def _weather_label() -> str:
    return label(WEATHER, WEATHER_SOURCE)


def normalize_weather(location: Location, forecast: Forecast) -> str:
    """Render the current forecast for a resolved location."""
    return (
        f"{_weather_label()} {location.city}, {location.country} {bold('=>')} "
        f"{forecast.condition}, {forecast.temperature} °C"
    )


def normalize_weather_lookup_failure(error: ProviderReportedError) -> str:
    """Render a geocoding failure as a weather line instead of a hard error."""
    if isinstance(error, PlaceNotFoundError):
        return f"{_weather_label()} {error}"
    return f"{_weather_label()} Lookup error {error.message}"


def normalize_wolfram(query: str, response: ProviderResponse[WolframData]) -> str:
    """Render a Wolfram|Alpha result.

    Branches, in order: did-you-mean suggestion, no results, fallback to a
    link to the web UI when the second pod has nothing to show, and finally
    the first two pods side by side.
    """
    if isinstance(response, ProviderError):
        return _status_line(WOLFRAM, response)
    if isinstance(response, BadStatus):
        return f"{label(WOLFRAM)} Server response was {response.status_code}"
    if isinstance(response, Empty):
        return f"{label(WOLFRAM)} No results found."

    data = response.payload
    prefix = label(WOLFRAM, f"{data.parse_timing:.2f}ms")

    if not data.success:
        if data.did_you_means:
            return f"{prefix} Did you mean: {data.did_you_means[0]}"
        return f"{prefix} No results found."

    # A successful result with nothing in its input pod has nothing to anchor on.
    if not data.pods or not data.pods[0].first_text:
        return f"{prefix} No results found."

    question = data.pods[0].first_text
    if len(data.pods) < 2 or not data.pods[1].first_text:
        link = WOLFRAM_INPUT_URL.format(quote_plus(query))
        return f"{prefix} {question} {bold('=>')} {link}"

    return f"{prefix} {question} {bold('=>')} {data.pods[1].first_text}"


def sum_stars(pages: Iterable[RepositoryPage]) -> Optional[int]:
    """Sum stargazers across pages of an owner's repositories.

    Pages are consumed lazily and iteration stops at the first empty page or
    the first page without a successor, so a generator that fetches on demand
    issues no further requests. Forks are skipped and a missing count is zero.
    Returns None when the owner has no repositories at all.
    """
    total = 0
    seen = False
    for page in pages:
        if not page.repositories:
            break
        seen = True
        total += sum(
            repo.stargazers_count or 0 for repo in page.repositories if not repo.fork
        )
        if page.next_page is None:
            break
    return total if seen else None


def normalize_stars(total: Optional[int]) -> str:
    """Render a star count, or the canonical sentence when nothing was found."""
    if total is None:
        return no_results(GITHUB)
    return f"{label(GITHUB)} {total}"


def normalize_youtube(response: ProviderResponse[VideoListResponse]) -> str:
    """Render video metadata. Not-found and errors stay silent."""
    if not isinstance(response, Success) or not response.payload.items:
        return ""

    video = response.payload.items[0]
    title = video.snippet.title
    if not title:
        return ""
    duration = humanize_duration(video.content_details.duration)
    if duration is None:
        return f"{label(YOUTUBE)} {title}"
    return f"{label(YOUTUBE, duration)} {title}"


__all__ = [
    "BOLD",
    "no_results",
    "normalize_bing",
    "normalize_google",
    "normalize_stars",
    "normalize_weather",
    "normalize_weather_lookup_failure",
    "normalize_wolfram",
    "normalize_youtube",
    "select_place",
    "sum_stars",
]
