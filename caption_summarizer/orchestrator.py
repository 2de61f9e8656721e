"""Submission pipeline: URL -> captions -> transcript -> Gemini summary.

The orchestrator owns the request state. Each stage returns a Success or a
Failure and the orchestrator stops at the first Failure. Runs are tagged with
a generation number; a run whose generation is no longer current (because the
state was reset while it was in flight) cannot write its outcome.
"""

from collections.abc import Callable
import logging
import threading

from .schemas import (
    INVALID_URL_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    CaptionFragment,
    ErrorKind,
    Failure,
    RequestState,
    RequestStatus,
    SubmissionInput,
    Success,
)
from .settings import get_settings
from .summarizer_gemini import summarize_transcript
from .transcript_provider import assemble_transcript, fetch_transcript
from .utils import extract_video_id

logger = logging.getLogger(__name__)

Listener = Callable[[RequestState], None]
Fetcher = Callable[[str, str], Success[list[CaptionFragment]] | Failure]
Assembler = Callable[[list[CaptionFragment]], str]
Summarizer = Callable[[str, str | None, str], Success[str] | Failure]


class SubmissionInProgressError(RuntimeError):
    """Raised when a submission starts while another one is still in flight."""


class Orchestrator:
    """Runs one submission at a time and publishes every state transition."""

    def __init__(
        self,
        *,
        fetcher: Fetcher = fetch_transcript,
        assembler: Assembler = assemble_transcript,
        summarizer: Summarizer = summarize_transcript,
        transcript_language: str | None = None,
    ):
        self._fetcher = fetcher
        self._assembler = assembler
        self._summarizer = summarizer
        self._transcript_language = transcript_language or get_settings().transcript_language
        self._lock = threading.RLock()
        self._state = RequestState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> RequestState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for state changes. Returns a function that removes it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def reset(self) -> RequestState:
        """Return to idle, clearing any summary or error.

        A run still in flight keeps going but its outcome is discarded.
        """
        with self._lock:
            state = RequestState(generation=self._state.generation + 1)
            self._set_state(state)
            return state

    def submit(self, submission: SubmissionInput) -> RequestState:
        """Run the whole pipeline for one submission.

        Raises:
            SubmissionInProgressError: another submission is in flight

        Returns:
            The succeeded or failed state this run produced, or the current
            state when the orchestrator was reset meanwhile and the outcome
            was discarded.
        """
        generation = self._begin()

        try:
            outcome = self._run(submission)
        except Exception as e:
            logger.exception("Unexpected error during submission: %s", e)
            outcome = Failure(kind=ErrorKind.UNEXPECTED, message=UNEXPECTED_ERROR_MESSAGE)

        if isinstance(outcome, Failure):
            state = RequestState(
                status=RequestStatus.FAILED,
                error=outcome.message,
                error_kind=outcome.kind,
                generation=generation,
            )
        else:
            state = RequestState(status=RequestStatus.SUCCEEDED, summary=outcome.value, generation=generation)

        if not self._commit(state):
            return self._state
        return state

    def _begin(self) -> int:
        with self._lock:
            if self._state.status == RequestStatus.IN_FLIGHT:
                raise SubmissionInProgressError("A submission is already in progress")
            generation = self._state.generation + 1
            self._set_state(RequestState(status=RequestStatus.IN_FLIGHT, generation=generation))
            return generation

    def _run(self, submission: SubmissionInput) -> Success[str] | Failure:
        video_id = extract_video_id(submission.url)
        if video_id is None:
            return Failure(kind=ErrorKind.INVALID_URL, message=INVALID_URL_MESSAGE)

        fetched = self._fetcher(video_id, self._transcript_language)
        if isinstance(fetched, Failure):
            return fetched

        transcript = self._assembler(fetched.value)
        logger.info("Assembled transcript for %s (%d chars)", video_id, len(transcript))

        return self._summarizer(transcript, submission.focus_points, submission.api_key)

    def _commit(self, state: RequestState) -> bool:
        with self._lock:
            if state.generation != self._state.generation:
                logger.info("Discarding stale result of run %d (current run %d)", state.generation, self._state.generation)
                return False
            self._set_state(state)
            return True

    def _set_state(self, state: RequestState) -> None:
        # Caller holds the lock.
        self._state = state
        logger.info("Request state -> %s (run %d)", state.status.value, state.generation)
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                logger.exception("State listener failed: %s", e)
