"""Shared fixtures for chatquery tests."""

import json as jsonlib

import httpx
import pytest

from chatquery.config import Settings


@pytest.fixture
def settings():
    """Settings with every credential filled in and no .env lookup."""
    return Settings(
        _env_file=None,
        bing_api_key="bing-key",
        geonames_id="geo-user",
        github_api_key="gh-token",
        google_search_api_key="google-key",
        google_search_cx_id="google-cx",
        google_youtube_key="yt-key",
        wolfram_id="wolfram-app",
    )


@pytest.fixture
def bare_settings():
    """Settings with no credentials at all."""
    return Settings(
        _env_file=None,
        bing_api_key="",
        geonames_id="",
        github_api_key="",
        google_search_api_key="",
        google_search_cx_id="",
        google_youtube_key="",
        wolfram_id="",
    )


def make_response(status_code=200, json=None, text=None, headers=None, url="https://example.test/api"):
    """Build an httpx.Response the way http_get would return it."""
    request = httpx.Request("GET", url)
    if json is not None:
        return httpx.Response(
            status_code,
            content=jsonlib.dumps(json).encode("utf-8"),
            headers={"Content-Type": "application/json", **(headers or {})},
            request=request,
        )
    return httpx.Response(
        status_code,
        content=(text or "").encode("utf-8"),
        headers=headers or {},
        request=request,
    )


@pytest.fixture
def respond():
    """Factory fixture for canned provider responses."""
    return make_response
