"""Session state for one user of the study assistant."""

from enum import Enum

from pydantic import BaseModel, Field

from src.models.schemas import AnalysisResult, GeneratedQuestions, StudyTab, Topic


class RunPhase(str, Enum):
    """Lifecycle of an analysis run."""

    IDLE = "idle"
    RUNNING = "running"
    SETTLED = "settled"


class DisplayMode(str, Enum):
    """What the result area should show."""

    LOADING = "loading"
    EMPTY = "empty"
    ERROR = "error"
    RESULTS = "results"


class StudySessionState(BaseModel):
    """Everything the study page needs to render.

    Result slots are either None or a complete record from one model call.

    Attributes:
        input_text: Text to analyze (typed, pasted or loaded from a file).
        file_name: Name of the loaded file, if the text came from one.
        active_tab: Result view currently selected.
        phase: Where the current run is in its lifecycle.
        is_loading: True while a run is in flight.
        analysis: Summary and keywords slot.
        questions: Generated questions slot.
        topics: Predicted topics slot.
        error: Message shown to the user, if any.
        failures: Task name to failure reason for the last run (logs only).
    """

    input_text: str = ""
    file_name: str | None = None
    active_tab: StudyTab = StudyTab.ANALYSIS
    phase: RunPhase = RunPhase.IDLE
    is_loading: bool = False
    analysis: AnalysisResult | None = None
    questions: GeneratedQuestions | None = None
    topics: list[Topic] | None = None
    error: str | None = None
    failures: dict[str, str] = Field(default_factory=dict)

    @property
    def has_results(self) -> bool:
        return any(slot is not None for slot in (self.analysis, self.questions, self.topics))

    @property
    def all_failed(self) -> bool:
        return self.phase == RunPhase.SETTLED and not self.has_results and bool(self.failures)

    def display_mode(self) -> DisplayMode:
        """Pick the result area content, in the order the page checks it."""
        if self.is_loading:
            return DisplayMode.LOADING
        if not self.has_results and not self.error:
            return DisplayMode.EMPTY
        if self.error and not self.has_results:
            return DisplayMode.ERROR
        return DisplayMode.RESULTS
