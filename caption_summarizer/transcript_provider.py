"""Caption retrieval through youtube-transcript-api."""

import logging

import requests
from youtube_transcript_api import (
    CouldNotRetrieveTranscript,
    RequestBlocked,
    YouTubeRequestFailed,
    YouTubeTranscriptApi,
)

from .schemas import CaptionFragment, ErrorKind, Failure, Success
from .settings import get_settings
from .utils import safe_truncate, watch_url

logger = logging.getLogger(__name__)


def fetch_transcript(
    video_id: str,
    lang: str | None = None,
    *,
    api: YouTubeTranscriptApi | None = None,
) -> Success[list[CaptionFragment]] | Failure:
    """Fetch the captions of a video in a single language.

    Only ``lang`` is requested; there is no fallback to other languages.

    Args:
        video_id: 11-character YouTube video identifier
        lang: Caption language code, defaults to the configured transcript language
        api: Transcript client to use instead of a fresh one

    Returns:
        Success with the caption fragments in spoken order, or Failure
    """
    lang = lang or get_settings().transcript_language
    api = api or YouTubeTranscriptApi()

    logger.info("Fetching %s captions for %s", lang, watch_url(video_id))
    try:
        fetched = api.fetch(video_id, languages=[lang])
        fragments = [CaptionFragment(text=snippet.text, start=snippet.start, duration=snippet.duration) for snippet in fetched]
    except (YouTubeRequestFailed, RequestBlocked, requests.RequestException) as exc:
        logger.warning("Transcript request failed for %s: %s", video_id, safe_truncate(str(exc), 200))
        return Failure(kind=ErrorKind.NETWORK, message=str(exc).strip())
    except CouldNotRetrieveTranscript as exc:
        logger.info("No %s transcript for %s: %s", lang, video_id, type(exc).__name__)
        return Failure(kind=ErrorKind.TRANSCRIPT_UNAVAILABLE, message=str(exc).strip())

    logger.info("Fetched %d caption fragments for %s", len(fragments), video_id)
    return Success(value=fragments)


def assemble_transcript(fragments: list[CaptionFragment]) -> str:
    """Join caption texts in order with a single space. Empty input gives ''."""
    return " ".join(fragment.text for fragment in fragments)
