"""Data models for Wolfram|Alpha query results."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Pod(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    id: str = ""
    primary: bool = False
    plaintexts: List[str] = Field(default_factory=list)

    @property
    def first_text(self) -> str:
        return self.plaintexts[0] if self.plaintexts else ""


class WolframData(BaseModel):
    """The ``queryresult`` document, reduced to what gets rendered."""

    model_config = ConfigDict(frozen=True)

    success: bool = False
    parse_timing: float = 0.0
    pods: List[Pod] = Field(default_factory=list)
    did_you_means: List[str] = Field(default_factory=list)
