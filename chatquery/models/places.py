"""Data models for geocoding and weather lookups."""

from typing import List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class Location(NamedTuple):
    """A place resolved down to the path segments yr.no understands."""

    country: str
    region: str
    county: Optional[str]
    city: str


class GeonamesPlace(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    country_name: str = Field(default="", alias="countryName")
    admin_name1: str = Field(default="", alias="adminName1")
    name: str = ""


class GeonamesStatus(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    message: str = ""
    value: Optional[int] = None


class GeonamesData(BaseModel):
    """Search response from api.geonames.org, ordered by relevance."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    geonames: List[GeonamesPlace] = Field(default_factory=list)
    status: Optional[GeonamesStatus] = None


class Forecast(BaseModel):
    """Current period of a yr.no forecast."""

    model_config = ConfigDict(frozen=True)

    condition: str
    temperature: int
