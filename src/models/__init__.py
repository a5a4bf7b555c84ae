"""Pydantic models for study results and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - AnalysisResult: Summary with keywords
    - MCQ / GeneratedQuestions: Exam-style questions
    - Topic: Predicted exam topic with probability
    - StudyRequest / StudyResponse: Analyze endpoint payloads
    - TextUploadResponse: Plain-text upload result
"""

from src.models.schemas import (
    MCQ,
    AnalysisResult,
    GeneratedQuestions,
    StudyRequest,
    StudyResponse,
    StudyTab,
    TextUploadResponse,
    Topic,
    TopicPredictions,
)

__all__ = [
    "MCQ",
    "AnalysisResult",
    "GeneratedQuestions",
    "StudyRequest",
    "StudyResponse",
    "StudyTab",
    "TextUploadResponse",
    "Topic",
    "TopicPredictions",
]
