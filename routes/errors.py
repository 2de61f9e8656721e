"""Centralized error handling utilities"""

import logging

from fastapi import HTTPException

from caption_summarizer import ErrorKind, RequestState, get_settings

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.INVALID_URL: 400,
    ErrorKind.TRANSCRIPT_UNAVAILABLE: 404,
    ErrorKind.NETWORK: 502,
    ErrorKind.SUMMARIZATION: 502,
    ErrorKind.UNEXPECTED: 500,
}


class ErrorType:
    """Error type constants for failures raised by the HTTP layer itself"""
    MISSING_API_KEY = "missing_api_key"
    BUSY = "submission_in_progress"


def create_http_error(status_code: int, detail: str, error_type: str | None = None) -> HTTPException:
    """Create HTTPException with logging"""
    if status_code >= 500:
        logger.error("%s: %s", error_type or "Error", detail)
    else:
        logger.warning("%s: %s", error_type or "Error", detail)
    return HTTPException(status_code=status_code, detail=detail)


def error_for_state(state: RequestState) -> HTTPException:
    """Convert a failed request state to HTTPException with the matching status code"""
    kind = state.error_kind or ErrorKind.UNEXPECTED
    return create_http_error(STATUS_BY_KIND[kind], state.error or "", kind.value)


def require_api_key(api_key: str | None) -> str:
    """Return the request key, else the server key; raise HTTPException if neither is set"""
    if api_key and api_key.strip():
        return api_key.strip()

    server_key = get_settings().server_api_key
    if not server_key:
        raise create_http_error(400, "Gemini API key is required", ErrorType.MISSING_API_KEY)
    return server_key
