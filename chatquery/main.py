"""FastAPI chat surface for the query adapters."""

import logging

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from chatquery.config import Settings, get_settings
from chatquery.exceptions import (
    ConfigurationError,
    DecodeError,
    InvalidQueryError,
    ProviderReportedError,
    QueryError,
    TransportError,
    UnknownCommandError,
)
from chatquery.middleware.request_logging import RequestLoggingMiddleware
from chatquery.query import dispatch
from chatquery.utils.logging import setup_logging

settings = get_settings()
setup_logging(level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_title,
    version=settings.app_version,
    description="Chat query adapters for search, weather, knowledge and video lookups",
)
app.add_middleware(RequestLoggingMiddleware)

_ERROR_STATUS = (
    (UnknownCommandError, 400),
    (InvalidQueryError, 400),
    (ConfigurationError, 500),
    (TransportError, 502),
    (DecodeError, 502),
    (ProviderReportedError, 502),
)

for provider, ready in settings.configured_providers().items():
    if not ready:
        logger.warning(f"{provider} credentials are not configured; its commands will fail")


class ChatIn(BaseModel):
    message: str = Field(..., description="Raw chat message or slash command")


def _error(exc: QueryError) -> JSONResponse:
    status_code = next((code for cls, code in _ERROR_STATUS if isinstance(exc, cls)), 500)
    return JSONResponse({"ok": False, "error": str(exc)}, status_code=status_code)


@app.get("/health")
def health_check(app_settings: Settings = Depends(get_settings)):
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": app_settings.app_title,
        "version": app_settings.app_version,
        "providers": app_settings.configured_providers(),
    }


@app.post("/api/chat")
def chat(inbody: ChatIn, app_settings: Settings = Depends(get_settings)):
    """Answer a slash command or title a pasted YouTube link."""
    try:
        say = dispatch(inbody.message, app_settings)
    except QueryError as e:
        logger.warning(f"Chat command failed: {e}", extra={"command": inbody.message[:50]})
        return _error(e)
    return {"ok": True, "say": say}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
