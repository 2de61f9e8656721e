"""Summarization endpoints: per-browser form sessions and a stateless one-shot call."""

from datetime import datetime
import logging

from fastapi import APIRouter, Depends

from caption_summarizer import (
    Orchestrator,
    RequestStatus,
    SubmissionInProgressError,
    SubmissionInput,
    extract_video_id,
    get_settings,
)
from routes.schema import StateResponse, SummarizeRequest, SummarizeResponse

from .errors import ErrorType, create_http_error, error_for_state, require_api_key
from .helpers import get_processing_time, run_blocking
from .sessions import get_page_orchestrator

router = APIRouter()
logger = logging.getLogger(__name__)


def new_orchestrator() -> Orchestrator:
    return Orchestrator()


def _to_submission(request: SummarizeRequest) -> SubmissionInput:
    return SubmissionInput(
        url=request.url,
        api_key=require_api_key(request.api_key),
        focus_points=request.focus_points,
    )


@router.get("/state", response_model=StateResponse)
async def get_state(orchestrator: Orchestrator = Depends(get_page_orchestrator)):
    return StateResponse.from_state(orchestrator.state)


@router.post("/submit", response_model=StateResponse)
async def submit(request: SummarizeRequest, orchestrator: Orchestrator = Depends(get_page_orchestrator)):
    submission = _to_submission(request)
    try:
        state = await run_blocking(orchestrator.submit, submission)
    except SubmissionInProgressError as e:
        raise create_http_error(409, str(e), ErrorType.BUSY) from e
    return StateResponse.from_state(state)


@router.post("/reset", response_model=StateResponse)
async def reset(orchestrator: Orchestrator = Depends(get_page_orchestrator)):
    return StateResponse.from_state(orchestrator.reset())


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(request: SummarizeRequest, orchestrator: Orchestrator = Depends(new_orchestrator)):
    submission = _to_submission(request)
    start_time = datetime.now()

    state = await run_blocking(orchestrator.submit, submission)
    if state.status != RequestStatus.SUCCEEDED:
        raise error_for_state(state)

    settings = get_settings()
    return SummarizeResponse(
        status="success",
        message="Summary generated successfully",
        summary=state.summary,
        video_id=extract_video_id(submission.url),
        processing_time=get_processing_time(start_time),
        model=settings.gemini_summary_model,
        transcript_language=settings.transcript_language,
    )
