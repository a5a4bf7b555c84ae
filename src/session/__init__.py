"""Per-user session state and the analysis run controller.

The controller issues the three study tasks concurrently, waits for all of
them to settle and merges whichever succeeded into the session state.
"""

from src.session.controller import (
    AGGREGATE_FAILURE_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    StudySessionController,
)
from src.session.state import DisplayMode, RunPhase, StudySessionState

__all__ = [
    "AGGREGATE_FAILURE_MESSAGE",
    "EMPTY_INPUT_MESSAGE",
    "UNEXPECTED_ERROR_MESSAGE",
    "DisplayMode",
    "RunPhase",
    "StudySessionController",
    "StudySessionState",
]
