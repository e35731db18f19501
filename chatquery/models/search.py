"""Data models for web search providers (Bing, Google)."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _ProviderModel(BaseModel):
    """Provider payloads: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class BingWebPage(_ProviderModel):
    name: str = ""
    url: str = ""
    snippet: str = ""
    display_url: str = Field(default="", alias="displayUrl")


class BingWebPages(_ProviderModel):
    total_estimated_matches: int = Field(default=0, alias="totalEstimatedMatches")
    value: List[BingWebPage] = Field(default_factory=list)


class BingVideo(_ProviderModel):
    name: str = ""
    description: str = ""
    content_url: str = Field(default="", alias="contentUrl")
    host_page_url: str = Field(default="", alias="hostPageUrl")
    duration: str = ""


class BingVideos(_ProviderModel):
    total_estimated_matches: int = Field(default=0, alias="totalEstimatedMatches")
    value: List[BingVideo] = Field(default_factory=list)


class BingAnswer(_ProviderModel):
    """Answer document from the Bing Web Search API."""

    web_pages: BingWebPages = Field(default_factory=BingWebPages, alias="webPages")
    videos: BingVideos = Field(default_factory=BingVideos)

    @property
    def is_empty(self) -> bool:
        return not self.web_pages.value and not self.videos.value


class BingErrorDetail(_ProviderModel):
    code: str = ""
    sub_code: str = Field(default="", alias="subCode")
    message: str = ""
    parameter: str = ""


class BingErrorResponse(_ProviderModel):
    """Error document Bing returns alongside non-200 statuses."""

    errors: List[BingErrorDetail] = Field(default_factory=list)


class GoogleSearchItem(_ProviderModel):
    title: str = ""
    snippet: str = ""
    link: str = ""
    display_link: str = Field(default="", alias="displayLink")


class GoogleSearchInformation(_ProviderModel):
    total_results: str = Field(default="0", alias="totalResults")
    formatted_total_results: str = Field(default="", alias="formattedTotalResults")
    search_time: float = Field(default=0.0, alias="searchTime")


class GoogleSearch(_ProviderModel):
    """Response from the Google Custom Search JSON API."""

    items: List[GoogleSearchItem] = Field(default_factory=list)
    info: GoogleSearchInformation = Field(
        default_factory=GoogleSearchInformation, alias="searchInformation"
    )


class GoogleErrorBody(_ProviderModel):
    code: Optional[int] = None
    message: str = ""


class GoogleErrorResponse(_ProviderModel):
    error: GoogleErrorBody = Field(default_factory=GoogleErrorBody)
