from __future__ import annotations

from fastapi import HTTPException, Request

from config import AppConfig, load_config
from patternkit.exceptions import ParseError, PatternKitError, UnsupportedTypeError


def get_config(request: Request) -> AppConfig:
    """Return the config loaded at startup, or the defaults if startup has not run."""

    config = getattr(request.app.state, "config", None)
    if config is None:
        config = load_config()
        request.app.state.config = config
    return config


def to_http_error(exc: PatternKitError) -> HTTPException:
    """Map a library error to the matching HTTP error.

    UnsupportedTypeError -> 400, ParseError -> 422, anything else -> 500.
    """

    if isinstance(exc, UnsupportedTypeError):
        return HTTPException(
            status_code=400,
            detail={"error": str(exc), "type": exc.type_tag, "supported": exc.supported},
        )
    if isinstance(exc, ParseError):
        return HTTPException(status_code=422, detail={"error": str(exc), "format": exc.format_name})
    return HTTPException(status_code=500, detail={"error": str(exc)})
