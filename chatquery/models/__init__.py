from .code_host import Repository, RepositoryPage
from .knowledge import Pod, WolframData
from .places import Forecast, GeonamesData, GeonamesPlace, GeonamesStatus, Location
from .responses import BadStatus, Empty, ProviderError, ProviderResponse, Success
from .search import (
    BingAnswer,
    BingErrorResponse,
    BingVideo,
    BingVideos,
    BingWebPage,
    BingWebPages,
    GoogleErrorResponse,
    GoogleSearch,
    GoogleSearchInformation,
    GoogleSearchItem,
)
from .video import Video, VideoContentDetails, VideoListResponse, VideoSnippet

__all__ = [
    "BadStatus",
    "BingAnswer",
    "BingErrorResponse",
    "BingVideo",
    "BingVideos",
    "BingWebPage",
    "BingWebPages",
    "Empty",
    "Forecast",
    "GeonamesData",
    "GeonamesPlace",
    "GeonamesStatus",
    "GoogleErrorResponse",
    "GoogleSearch",
    "GoogleSearchInformation",
    "GoogleSearchItem",
    "Location",
    "Pod",
    "ProviderError",
    "ProviderResponse",
    "Repository",
    "RepositoryPage",
    "Success",
    "Video",
    "VideoContentDetails",
    "VideoListResponse",
    "VideoSnippet",
]
