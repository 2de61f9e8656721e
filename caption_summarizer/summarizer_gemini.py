"""Transcript summarization using the Google Gemini API."""

import logging

from google import genai

from .prompts import get_summary_prompt
from .schemas import SUMMARIZATION_FAILED_MESSAGE, ErrorKind, Failure, Success
from .settings import get_settings

logger = logging.getLogger(__name__)


def _log_usage(response, model: str) -> None:
    usage = getattr(response, "usage_metadata", None)
    if usage and getattr(usage, "prompt_token_count", None) is not None:
        logger.info(
            "Gemini usage model=%s input=%s total=%s",
            model,
            usage.prompt_token_count,
            usage.total_token_count,
        )


def summarize_transcript(
    transcript: str,
    focus_points: str | None,
    api_key: str,
) -> Success[str] | Failure:
    """Summarize a transcript with Gemini.

    A new client is created from ``api_key`` on every call and dropped
    afterwards. Any failure of the call, including an empty reply, is reported
    as a single generic summarization failure; the cause is only logged.

    Args:
        transcript: Assembled caption text
        focus_points: Optional aspects the summary should emphasise
        api_key: Gemini API key for this call

    Returns:
        Success with the plain response text, or Failure
    """
    settings = get_settings()
    model = settings.gemini_summary_model
    prompt = get_summary_prompt(transcript, focus_points)

    try:
        client = genai.Client(api_key=api_key, http_options={"timeout": settings.llm_timeout_milliseconds})
        response = client.models.generate_content(model=model, contents=prompt)

        if not response.text:
            logger.warning("Empty response from Gemini API")
            return Failure(kind=ErrorKind.SUMMARIZATION, message=SUMMARIZATION_FAILED_MESSAGE)

        _log_usage(response, model)
        return Success(value=response.text)

    except Exception as e:
        logger.exception("Gemini API error: %s", e)
        return Failure(kind=ErrorKind.SUMMARIZATION, message=SUMMARIZATION_FAILED_MESSAGE)
