"""Utility functions for YouTube URL parsing and log-safe text handling."""

import re

# Group 7 holds the candidate identifier.
VIDEO_ID_PATTERN = re.compile(r"^.*((youtu.be/)|(v/)|(/u/\w/)|(embed/)|(watch\?))\??v?=?([^#&?]*).*", re.ASCII)
VIDEO_ID_LENGTH = 11


def extract_video_id(url: str) -> str | None:
    """Extract the 11-character video identifier from a YouTube URL.

    Recognises ``youtu.be/<id>``, ``/v/<id>``, ``/u/<x>/<id>``, ``/embed/<id>``
    and ``watch?v=<id>``. The identifier runs up to the next ``#``, ``&`` or ``?``.
    The input is not trimmed or lower-cased.

    Args:
        url: URL as typed by the user

    Returns:
        The identifier, or None when the URL is not recognised or the
        identifier is not exactly 11 characters long
    """
    match = VIDEO_ID_PATTERN.match(url)
    if match and len(match.group(7)) == VIDEO_ID_LENGTH:
        return match.group(7)
    return None


def watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def safe_truncate(text: str, max_length: int = 100) -> str:
    """Truncate text for log lines and error details.

    Args:
        text: Text to truncate
        max_length: Maximum length in characters (not bytes)

    Returns:
        Text no longer than max_length, with an ellipsis when cut
    """
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."
