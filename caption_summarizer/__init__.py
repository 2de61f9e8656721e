"""Top-level package exports for the caption summarizer."""

from .orchestrator import Orchestrator, SubmissionInProgressError
from .prompts import get_summary_prompt
from .schemas import (
    CaptionFragment,
    ErrorKind,
    Failure,
    RequestState,
    RequestStatus,
    SubmissionInput,
    Success,
)
from .settings import AppSettings, get_settings
from .summarizer_gemini import summarize_transcript
from .transcript_provider import assemble_transcript, fetch_transcript
from .utils import extract_video_id

__version__ = "1.0.0"

__all__ = [
    "AppSettings",
    "CaptionFragment",
    "ErrorKind",
    "Failure",
    "Orchestrator",
    "RequestState",
    "RequestStatus",
    "SubmissionInProgressError",
    "SubmissionInput",
    "Success",
    "assemble_transcript",
    "extract_video_id",
    "fetch_transcript",
    "get_settings",
    "get_summary_prompt",
    "summarize_transcript",
]
