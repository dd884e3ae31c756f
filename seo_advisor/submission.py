"""
Submission lifecycle for the advisor.

Each browser session owns its own request state. Only one analysis may be
in flight per session: a submission that arrives while that session's
previous one is still running is dropped. It is neither queued nor reported
as an error, and it never reaches the analyzer. Other sessions are not
affected.
"""

import logging
import secrets
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import List, Optional, Tuple

from .analyzer import SEOAnalyzer
from .page import GENERIC_ERROR_MESSAGE
from .renderer import DisplayBlock, build_display_blocks
from .schemas import AnalysisResult, ArticleInput

logger = logging.getLogger(__name__)


class RequestState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class SubmissionOutcome:
    state: RequestState
    result: Optional[AnalysisResult] = None
    blocks: Optional[List[DisplayBlock]] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.state is RequestState.COMPLETED


def error_message(exc: BaseException) -> str:
    """Message shown to the user for a failed submission."""
    message = str(exc).strip()
    return message or GENERIC_ERROR_MESSAGE


class SubmissionHandler:
    def __init__(self, analyzer: SEOAnalyzer):
        self.analyzer = analyzer
        self._lock = Lock()
        self._state = RequestState.IDLE

    @property
    def state(self) -> RequestState:
        with self._lock:
            return self._state

    def _begin(self) -> bool:
        with self._lock:
            if self._state is RequestState.IN_FLIGHT:
                return False
            self._state = RequestState.IN_FLIGHT
            return True

    def _finish(self, state: RequestState):
        with self._lock:
            self._state = state

    def submit(self, article: ArticleInput) -> Optional[SubmissionOutcome]:
        """
        Analyze and render one article.

        Returns None when another submission is still in flight. Otherwise
        returns a COMPLETED outcome with result and display blocks, or a
        FAILED outcome carrying the error message. Rendering is
        all-or-nothing: a failed outcome never carries partial blocks.
        """
        if not self._begin():
            logger.info("⏳ Submission dropped: another analysis is still in flight")
            return None

        try:
            result = self.analyzer.analyze(article)
            blocks = build_display_blocks(result, article.content)
        except Exception as e:
            logger.error(f"❌ Analysis failed: {e}")
            self._finish(RequestState.FAILED)
            return SubmissionOutcome(RequestState.FAILED, error=error_message(e))

        self._finish(RequestState.COMPLETED)
        return SubmissionOutcome(RequestState.COMPLETED, result=result, blocks=blocks)


MAX_SESSIONS = 1000


class SessionSubmissions:
    """One SubmissionHandler per browser session, keyed by the session cookie."""

    def __init__(self, analyzer: SEOAnalyzer, max_sessions: int = MAX_SESSIONS):
        self.analyzer = analyzer
        self.max_sessions = max_sessions
        self._lock = Lock()
        self._handlers: "OrderedDict[str, SubmissionHandler]" = OrderedDict()

    @staticmethod
    def new_session_id() -> str:
        return secrets.token_urlsafe(16)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)

    def handler_for(self, session_id: Optional[str]) -> Tuple[str, SubmissionHandler]:
        """Return (session_id, handler), issuing a new session when none is given."""
        if not session_id:
            session_id = self.new_session_id()
        with self._lock:
            handler = self._handlers.get(session_id)
            if handler is None:
                handler = SubmissionHandler(self.analyzer)
                self._handlers[session_id] = handler
                self._evict(keep=session_id)
            self._handlers.move_to_end(session_id)
            return session_id, handler

    def _evict(self, keep: str):
        # Oldest idle sessions go first; in-flight ones are never dropped
        for sid in list(self._handlers):
            if len(self._handlers) <= self.max_sessions:
                break
            if sid != keep and self._handlers[sid].state is not RequestState.IN_FLIGHT:
                del self._handlers[sid]
