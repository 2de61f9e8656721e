"""Per-browser form sessions, each backed by its own orchestrator."""

from collections import OrderedDict
from collections.abc import Callable
from functools import lru_cache
import logging
import secrets
import threading

from fastapi import Depends, Request, Response

from caption_summarizer import Orchestrator, get_settings

logger = logging.getLogger(__name__)


class SessionStore:
    """Bounded map from session id to orchestrator. The least recently used session is evicted first."""

    def __init__(self, factory: Callable[[], Orchestrator] = Orchestrator, max_sessions: int = 256):
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, Orchestrator] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> Orchestrator:
        with self._lock:
            orchestrator = self._sessions.get(session_id)
            if orchestrator is not None:
                self._sessions.move_to_end(session_id)
                return orchestrator

            orchestrator = self._factory()
            self._sessions[session_id] = orchestrator
            while len(self._sessions) > self._max_sessions:
                self._sessions.popitem(last=False)
                logger.info("Evicted oldest form session (limit %d)", self._max_sessions)
            return orchestrator


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    return SessionStore(max_sessions=get_settings().max_page_sessions)


def get_session_id(request: Request, response: Response) -> str:
    """Read the session cookie, issuing a new one when the browser has none."""
    cookie_name = get_settings().session_cookie_name
    session_id = request.cookies.get(cookie_name)
    if not session_id:
        session_id = secrets.token_urlsafe(16)
        response.set_cookie(cookie_name, session_id, httponly=True, samesite="lax")
    return session_id


def get_page_orchestrator(
    session_id: str = Depends(get_session_id),
    store: SessionStore = Depends(get_session_store),
) -> Orchestrator:
    """Orchestrator behind this browser's form."""
    return store.get(session_id)
