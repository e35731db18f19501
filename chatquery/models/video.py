"""Data models for YouTube video metadata."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class VideoSnippet(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = ""
    channel_title: str = Field(default="", alias="channelTitle")


class VideoContentDetails(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    duration: str = ""


class Video(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = ""
    snippet: VideoSnippet = Field(default_factory=VideoSnippet)
    content_details: VideoContentDetails = Field(
        default_factory=VideoContentDetails, alias="contentDetails"
    )


class VideoListResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    items: List[Video] = Field(default_factory=list)
