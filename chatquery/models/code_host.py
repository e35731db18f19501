"""Data models for GitHub repository listings."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Repository(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = ""
    full_name: str = ""
    fork: bool = False
    stargazers_count: Optional[int] = None


class RepositoryPage(BaseModel):
    """One page of an owner's repositories plus the next page number, if any."""

    model_config = ConfigDict(frozen=True)

    repositories: List[Repository] = Field(default_factory=list)
    next_page: Optional[int] = None
