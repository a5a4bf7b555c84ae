from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class StudyTab(str, Enum):
    """Result views the user can switch between."""

    ANALYSIS = "analysis"
    QUESTIONS = "questions"
    TOPICS = "topics"


class AnalysisResult(BaseModel):
    """Summary and keywords for a document.

    Attributes:
        summary: Concise summary of the source text.
        keywords: Most relevant keywords, five requested but not enforced.
    """

    model_config = ConfigDict(frozen=True)

    summary: str = Field(..., description="A concise summary of the provided text.")
    keywords: list[str] = Field(
        ...,
        description="An array of the top 5 most relevant keywords from the text.",
    )


class MCQ(BaseModel):
    """A single multiple-choice question.

    Attributes:
        question: The question stem.
        options: Answer options in display order.
        answer: Text of the correct option (not checked against options).
    """

    model_config = ConfigDict(frozen=True)

    question: str
    options: list[str]
    answer: str = Field(..., description="The correct option text.")


class GeneratedQuestions(BaseModel):
    """Exam-style questions generated from a document.

    Attributes:
        mcqs: Multiple-choice questions.
        short_answers: Short-answer questions (2-3 marks).
        long_answers: Long-answer questions; only the first one is shown.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mcqs: list[MCQ] = Field(..., description="An array of multiple-choice questions.")
    short_answers: list[str] = Field(
        ...,
        alias="shortAnswers",
        description="An array of short-answer questions.",
    )
    long_answers: list[str] = Field(
        ...,
        alias="longAnswers",
        description="An array containing one long-answer question.",
    )


class Topic(BaseModel):
    """A predicted exam topic.

    Attributes:
        topic: Name of the topic.
        probability: Chance (nominally 0-100) of the topic appearing in an exam.
    """

    model_config = ConfigDict(frozen=True)

    topic: str = Field(..., description="The name of the topic.")
    probability: float = Field(
        ...,
        description="The probability (0-100) of the topic appearing in an exam.",
    )


TopicPredictions = list[Topic]


class StudyRequest(BaseModel):
    """Request payload for the analyze endpoint.

    Attributes:
        text: Study material to analyze.
    """

    text: str = Field(..., min_length=1)

    @field_validator("text")
    @classmethod
    def reject_blank_text(cls, v: str) -> str:
        """Reject whitespace-only text; the text itself is kept as sent."""
        if not v.strip():
            raise ValueError("Text must not be empty or whitespace")
        return v


class StudyResponse(BaseModel):
    """Settled results of one analysis run.

    Attributes:
        analysis: Summary and keywords, or None if that task failed.
        questions: Generated questions, or None if that task failed.
        topics: Predicted topics, or None if that task failed.
        error: Aggregate warning when at least one task failed.
    """

    model_config = ConfigDict(populate_by_name=True)

    analysis: AnalysisResult | None = None
    questions: GeneratedQuestions | None = None
    topics: list[Topic] | None = None
    error: str | None = None


class TextUploadResponse(BaseModel):
    """Response after a plain-text upload.

    Attributes:
        filename: Name of the uploaded file.
        text: Decoded file content, verbatim.
        characters: Length of the decoded content.
    """

    filename: str
    text: str
    characters: int = Field(ge=0)
