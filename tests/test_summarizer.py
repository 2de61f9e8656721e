"""
Tests for the Gemini summarizer client
======================================

- Prompt construction with and without focus points
- Client creation per call with the caller's API key
- Uniform failure on any API error
"""

from unittest.mock import MagicMock, patch

import pytest

from caption_summarizer import ErrorKind, Failure, Success, get_summary_prompt
from caption_summarizer.schemas import SUMMARIZATION_FAILED_MESSAGE
from caption_summarizer.summarizer_gemini import summarize_transcript


@pytest.mark.unit
class TestSummaryPrompt:
    def test_without_focus_points(self):
        prompt = get_summary_prompt("字幕テキスト")

        assert prompt == "以下の字幕を要約してください。\n\n字幕：\n字幕テキスト"
        assert "注目" not in prompt

    @pytest.mark.parametrize("focus_points", [None, "", "   "])
    def test_empty_focus_points_leave_no_clause(self, focus_points):
        assert "以下の点に注目してください" not in get_summary_prompt("text", focus_points)

    def test_focus_points_clause(self):
        prompt = get_summary_prompt("text", "budget, timeline")

        assert "以下の点に注目してください：budget, timeline" in prompt
        assert prompt.splitlines()[0] == "以下の字幕を要約してください。以下の点に注目してください：budget, timeline"

    def test_transcript_follows_label_verbatim(self):
        transcript = "A  B\nC"
        prompt = get_summary_prompt(transcript, "budget")

        assert prompt.endswith("字幕：\n" + transcript)


@pytest.mark.unit
class TestSummarizeTranscript:
    @patch("caption_summarizer.summarizer_gemini.genai.Client")
    def test_returns_response_text(self, mock_client_cls):
        mock_client = mock_client_cls.return_value
        mock_client.models.generate_content.return_value = MagicMock(text="要約です", usage_metadata=None)

        result = summarize_transcript("字幕", "budget, timeline", "user-key")

        assert isinstance(result, Success)
        assert result.value == "要約です"
        assert mock_client_cls.call_args.kwargs["api_key"] == "user-key"
        call_kwargs = mock_client.models.generate_content.call_args.kwargs
        assert call_kwargs["model"] == "gemini-2.5-flash"
        assert call_kwargs["contents"] == get_summary_prompt("字幕", "budget, timeline")

    @patch("caption_summarizer.summarizer_gemini.genai.Client")
    def test_new_client_for_every_call(self, mock_client_cls):
        mock_client_cls.return_value.models.generate_content.return_value = MagicMock(text="ok", usage_metadata=None)

        summarize_transcript("a", None, "key-1")
        summarize_transcript("b", None, "key-2")

        assert [call.kwargs["api_key"] for call in mock_client_cls.call_args_list] == ["key-1", "key-2"]

    @patch("caption_summarizer.summarizer_gemini.genai.Client")
    def test_api_error_becomes_generic_failure(self, mock_client_cls):
        mock_client_cls.return_value.models.generate_content.side_effect = RuntimeError("400 API key not valid")

        result = summarize_transcript("字幕", None, "bad-key")

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.SUMMARIZATION
        assert result.message == SUMMARIZATION_FAILED_MESSAGE
        assert "API key" not in result.message

    @patch("caption_summarizer.summarizer_gemini.genai.Client")
    def test_client_construction_error_becomes_failure(self, mock_client_cls):
        mock_client_cls.side_effect = ValueError("missing key")

        result = summarize_transcript("字幕", None, "")

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.SUMMARIZATION

    @patch("caption_summarizer.summarizer_gemini.genai.Client")
    def test_empty_response_is_failure(self, mock_client_cls):
        mock_client_cls.return_value.models.generate_content.return_value = MagicMock(text=None, usage_metadata=None)

        result = summarize_transcript("字幕", None, "key")

        assert isinstance(result, Failure)
        assert result.message == SUMMARIZATION_FAILED_MESSAGE
