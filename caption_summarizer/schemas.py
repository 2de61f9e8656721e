"""Data models shared by the summarization pipeline."""

from enum import Enum
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Why a submission failed."""

    INVALID_URL = "invalid_url"
    TRANSCRIPT_UNAVAILABLE = "transcript_unavailable"
    NETWORK = "network"
    SUMMARIZATION = "summarization"
    UNEXPECTED = "unexpected"


class Success(BaseModel, Generic[T]):
    """Successful outcome of a pipeline stage."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    value: T


class Failure(BaseModel):
    """Failed outcome of a pipeline stage, carrying a user-facing message."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    kind: ErrorKind
    message: str


class SubmissionInput(BaseModel):
    """What the user typed into the form for one submission."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="YouTube video URL")
    api_key: str = Field(description="Gemini API key, used for this submission only", repr=False)
    focus_points: str | None = Field(default=None, description="Aspects the summary should emphasise")


class CaptionFragment(BaseModel):
    """One caption line as returned by the transcript source."""

    model_config = ConfigDict(frozen=True)

    text: str
    start: float = 0.0
    duration: float = 0.0


class RequestStatus(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RequestState(BaseModel):
    """Snapshot of the orchestrator's request state."""

    model_config = ConfigDict(frozen=True)

    status: RequestStatus = RequestStatus.IDLE
    summary: str | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    generation: int = 0


INVALID_URL_MESSAGE = "無効なYouTube URLです。"
SUMMARIZATION_FAILED_MESSAGE = "要約の生成中にエラーが発生しました。"
UNEXPECTED_ERROR_MESSAGE = "予期せぬエラーが発生しました。"
