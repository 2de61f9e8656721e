"""Tests for YouTube URL parsing."""

import pytest

from caption_summarizer.utils import extract_video_id, safe_truncate, watch_url


@pytest.mark.unit
class TestExtractVideoId:
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://m.youtube.com/watch?v=dQw4w9WgXcQ&feature=share",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ?si=abcdef",
            "https://youtu.be/dQw4w9WgXcQ#t=30",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://www.youtube.com/v/dQw4w9WgXcQ?version=3",
            "https://www.youtube.com/u/1/dQw4w9WgXcQ",
        ],
    )
    def test_recognised_shapes(self, url):
        assert extract_video_id(url) == "dQw4w9WgXcQ"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "not a url",
            "https://vimeo.com/123456789",
            "https://www.youtube.com/watch?v=short",
            "https://youtu.be/dQw4w9WgXcQX",
            "https://youtu.be/dQw4w9WgXcQ ",
            "https://www.youtube.com/u/あ/dQw4w9WgXcQ",
        ],
    )
    def test_rejected_urls(self, url):
        assert extract_video_id(url) is None

    def test_identifier_characters_are_kept_verbatim(self):
        assert extract_video_id("https://youtu.be/A-b_C1d2E3f") == "A-b_C1d2E3f"


@pytest.mark.unit
class TestHelpers:
    def test_watch_url(self):
        assert watch_url("dQw4w9WgXcQ") == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"

    def test_safe_truncate(self):
        assert safe_truncate("short") == "short"
        assert safe_truncate("x" * 20, 10) == "x" * 7 + "..."
