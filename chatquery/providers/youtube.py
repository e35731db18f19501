"""YouTube video titles for links pasted into chat."""

from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from chatquery.config import Settings
from chatquery.exceptions import TransportError
from chatquery.models import Empty, Success, VideoListResponse
from chatquery.models.responses import ProviderResponse
from chatquery.normalize import normalize_youtube

from .http import decode_model, http_get

logger = logging.getLogger(__name__)

YOUTUBE_VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"

RGX_URL = re.compile(r"https?://(?:www\.|m\.)?(?:youtube\.com|youtu\.be)/\S+", re.IGNORECASE)
RGX_VIDEO_ID = re.compile(r"^([A-Za-z0-9_-]{11})(?![A-Za-z0-9_-])")

# Sentence punctuation that commonly trails a pasted link.
_TRAILING_PUNCTUATION = ".,;:!?)]}'\""

_PATH_PREFIXES = ("embed", "shorts", "v", "live")


def find_link(msg: str) -> Optional[str]:
    """Return the first YouTube URL in a message."""
    match = RGX_URL.search(msg)
    if not match:
        return None
    return match.group(0).rstrip(_TRAILING_PUNCTUATION)


def extract_video_id(link: str) -> Optional[str]:
    """Pull the video identifier out of a youtu.be or youtube.com URL."""
    parsed = urlparse(link)
    host = parsed.netloc.lower()
    segments = [segment for segment in parsed.path.split("/") if segment]

    candidate: Optional[str] = None
    if host.endswith("youtu.be"):
        candidate = segments[0] if segments else None
    elif segments and segments[0] == "watch":
        candidate = parse_qs(parsed.query).get("v", [None])[0]
    elif len(segments) >= 2 and segments[0] in _PATH_PREFIXES:
        candidate = segments[1]

    match = RGX_VIDEO_ID.match(candidate) if candidate else None
    return match.group(1) if match else None


def fetch_video(video_id: str, api_key: str, timeout: float = 5.0) -> ProviderResponse[VideoListResponse]:
    logger.info(f"YouTube metadata for video {video_id}")
    response = http_get(
        YOUTUBE_VIDEOS_URL,
        params={"part": "snippet,contentDetails", "id": video_id, "key": api_key},
        timeout=timeout,
    )
    if response.status_code == 404:
        return Empty()
    if response.status_code != 200:
        raise TransportError(
            f"YouTube returned {response.status_code} for video {video_id}",
            status_code=response.status_code,
        )
    videos = decode_model(response, VideoListResponse)
    if not videos.items:
        return Empty()
    return Success(payload=videos)


def youtube(msg: str, settings: Settings) -> str:
    """
    Check whether a message contains a YouTube link and, if so, format its title.

    Messages without a usable link produce an empty string rather than an error.
    """
    api_key = settings.require("google_youtube_key")

    link = find_link(msg)
    if not link:
        return ""
    video_id = extract_video_id(link)
    if not video_id:
        logger.debug(f"No video id in YouTube link: {link}")
        return ""

    return normalize_youtube(fetch_video(video_id, api_key, timeout=settings.http_timeout))
