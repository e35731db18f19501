"""Tagged response variants handed from provider clients to the normalizer."""

from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict

PayloadT = TypeVar("PayloadT")


class Success(BaseModel, Generic[PayloadT]):
    """Well-formed provider response carrying usable data."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    payload: PayloadT


class Empty(BaseModel):
    """Well-formed provider response with zero usable items."""

    model_config = ConfigDict(frozen=True)


class ProviderError(BaseModel):
    """Application-level error reported in the provider's body."""

    model_config = ConfigDict(frozen=True)

    message: str
    code: str | None = None


class BadStatus(BaseModel):
    """Non-success HTTP status with nothing in the body to explain it."""

    model_config = ConfigDict(frozen=True)

    status_code: int


ProviderResponse = Union[Success[PayloadT], Empty, ProviderError, BadStatus]
