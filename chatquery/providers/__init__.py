"""Query adapters, one module per third-party API."""

from .bing import bing
from .geonames import PLACES_LOOKUP, geocode
from .github import github_stars
from .google import google
from .weather import weather
from .wolfram import wolfram
from .youtube import youtube

__all__ = [
    "PLACES_LOOKUP",
    "bing",
    "geocode",
    "github_stars",
    "google",
    "weather",
    "wolfram",
    "youtube",
]
