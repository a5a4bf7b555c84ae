"""Session controller: input handling and the three-way analysis run.

A run moves the session from idle (or settled) to running and then to
settled. While running, the three study tasks are dispatched together and
awaited until every one of them has finished, successfully or not. Result
slots and the error message are only written when the run settles, so
overlapping requests never race on session state.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from src.agent.tasks import (
    ANALYSIS_TASK,
    QUESTIONS_TASK,
    TOPICS_TASK,
    ContentGenerator,
    analyze_document,
    generate_questions,
    predict_topics,
)
from src.exceptions import InputValidationError
from src.models.schemas import StudyTab
from src.parsing.text_file import read_text_upload
from src.session.state import RunPhase, StudySessionState

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter some text or upload a file to analyze."
AGGREGATE_FAILURE_MESSAGE = "One or more AI tasks failed. Some results may be missing."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

TaskFn = Callable[[ContentGenerator, str], Awaitable[Any]]

DEFAULT_TASKS: dict[str, TaskFn] = {
    ANALYSIS_TASK: analyze_document,
    QUESTIONS_TASK: generate_questions,
    TOPICS_TASK: predict_topics,
}

# task name -> state attribute holding its result
SLOTS = {
    ANALYSIS_TASK: "analysis",
    QUESTIONS_TASK: "questions",
    TOPICS_TASK: "topics",
}


class StudySessionController:
    """Owns a StudySessionState and every transition on it.

    Args:
        client: Generative client handed to each task.
        tasks: Task name to coroutine function; defaults to the three study tasks.
        on_change: Called with the state after each visible change.
    """

    def __init__(
        self,
        client: ContentGenerator | None,
        tasks: Mapping[str, TaskFn] | None = None,
        on_change: Callable[[StudySessionState], None] | None = None,
    ) -> None:
        self._client = client
        self._tasks = dict(tasks or DEFAULT_TASKS)
        self._on_change = on_change
        self.state = StudySessionState()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)

    @property
    def is_running(self) -> bool:
        return self.state.phase == RunPhase.RUNNING

    # === Input ===

    def set_input_text(self, text: str) -> None:
        self.state.input_text = text or ""

    def load_file(self, filename: str | None, content_type: str | None, data: bytes) -> str:
        """Use an uploaded file as the input text.

        On rejection the error is recorded and the input text is left as it was.

        Returns:
            The decoded text.

        Raises:
            InputValidationError: If the file is not plain text or unreadable.
        """
        try:
            text = read_text_upload(filename, content_type, data)
        except InputValidationError as e:
            self.state.error = str(e)
            self.state.file_name = None
            self._notify()
            raise

        self.state.input_text = text
        self.state.file_name = filename
        self.state.error = None
        logger.info(f"Loaded {len(text)} characters from {filename!r}")
        self._notify()
        return text

    def clear_file(self) -> None:
        self.state.file_name = None
        self.state.input_text = ""
        self.state.error = None
        self._notify()

    def select_tab(self, tab: StudyTab | str) -> None:
        self.state.active_tab = StudyTab(tab)
        self._notify()

    # === Analysis run ===

    def _start_run(self) -> None:
        state = self.state
        state.phase = RunPhase.RUNNING
        state.is_loading = True
        state.error = None
        state.failures = {}
        state.analysis = None
        state.questions = None
        state.topics = None
        self._notify()

    async def _dispatch(self, text: str) -> dict[str, Any]:
        names = list(self._tasks)
        outcomes = await asyncio.gather(
            *(self._tasks[name](self._client, text) for name in names),
            return_exceptions=True,
        )
        return dict(zip(names, outcomes, strict=True))

    def _settle(self, outcomes: Mapping[str, Any]) -> None:
        state = self.state
        failures: dict[str, str] = {}

        for name, outcome in outcomes.items():
            if isinstance(outcome, BaseException):
                logger.warning(f"{name} task failed: {outcome!r}")
                failures[name] = str(outcome) or type(outcome).__name__
                continue
            setattr(state, SLOTS[name], outcome)

        state.failures = failures
        if failures:
            state.error = AGGREGATE_FAILURE_MESSAGE
            if len(failures) == len(outcomes):
                logger.error("All AI tasks failed")
        state.phase = RunPhase.SETTLED
        state.is_loading = False

    def validate_input(self) -> str:
        """Return the input text, or record and raise the empty-input error."""
        text = self.state.input_text
        if not text.strip():
            self.state.error = EMPTY_INPUT_MESSAGE
            self._notify()
            raise InputValidationError(EMPTY_INPUT_MESSAGE)
        return text

    async def run(self) -> StudySessionState:
        """Run the three study tasks on the current input text.

        Returns:
            The settled state, or the unchanged state if a run is already in
            progress.

        Raises:
            InputValidationError: If the input text is empty or whitespace.
        """
        if self.is_running:
            logger.info("Analysis already running; ignoring new request")
            return self.state

        text = self.validate_input()

        try:
            self._start_run()
            outcomes = await self._dispatch(text)
            self._settle(outcomes)
            self._notify()
            return self.state
        except Exception:
            logger.exception("Unexpected error during analysis run")
            self.state.error = UNEXPECTED_ERROR_MESSAGE
        finally:
            self.state.phase = RunPhase.SETTLED
            self.state.is_loading = False

        try:
            self._notify()
        except Exception:
            logger.exception("State listener failed after analysis run")
        return self.state
