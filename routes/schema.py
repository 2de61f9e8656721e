"""Request and Response models for the API"""

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from caption_summarizer import ErrorKind, RequestState, RequestStatus


class BaseResponse(BaseModel):
    status: str = Field(description="Response status: success or error")
    message: str = Field(description="Human-readable message")
    timestamp: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())


class SummarizeRequest(BaseModel):
    url: str = Field(..., min_length=1, description="YouTube video URL")
    api_key: str | None = Field(
        default=None,
        description="Gemini API key; the server key is used when omitted",
    )
    focus_points: str | None = Field(
        default=None,
        description="Optional aspects the summary should focus on",
    )


class StateResponse(BaseModel):
    state: RequestStatus = Field(description="idle, in_flight, succeeded or failed")
    summary: str | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    generation: int = Field(description="Run counter of the page orchestrator")

    @classmethod
    def from_state(cls, state: RequestState) -> "StateResponse":
        return cls(
            state=state.status,
            summary=state.summary,
            error=state.error,
            error_kind=state.error_kind,
            generation=state.generation,
        )


class SummarizeResponse(BaseResponse):
    summary: str
    video_id: str
    processing_time: str
    model: str = Field(description="Model used for the summary")
    transcript_language: str = Field(description="Caption language that was summarized")


class ConfigurationResponse(BaseResponse):
    model: str = Field(description="Gemini model used for summaries")
    transcript_language: str = Field(description="Caption language requested from YouTube")
    gemini_configured: bool = Field(description="Whether a server-side Gemini key is set")
    version: str
