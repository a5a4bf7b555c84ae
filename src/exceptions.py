"""Error taxonomy for the study assistant.

Input problems are reported to the user immediately. Task failures are
caught by the session controller and turned into an absent result slot.
"""


class StudyAssistantError(Exception):
    """Base class for all study assistant errors."""


class InputValidationError(StudyAssistantError):
    """Raised for empty input or an unsupported upload.

    The message is safe to show to the user as-is.
    """


class TaskFailure(StudyAssistantError):
    """A single AI task failed.

    Attributes:
        task: Name of the task that failed (analysis, questions, topics).
    """

    def __init__(self, task: str, message: str) -> None:
        super().__init__(f"{task}: {message}")
        self.task = task


class TransportFailure(TaskFailure):
    """The model call itself failed (network, provider or auth error)."""


class ParseFailure(TaskFailure):
    """The model answered but the answer could not be read as the expected shape.

    Attributes:
        raw_text: The offending response text, kept for diagnosis.
    """

    def __init__(self, task: str, raw_text: str) -> None:
        super().__init__(task, "failed to parse model response")
        self.raw_text = raw_text
