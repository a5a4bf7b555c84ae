"""The three study tasks sent to the generative model.

Each task builds a prompt around the source text, attaches the JSON schema
of its result, makes exactly one model call and parses the reply. A reply
that cannot be parsed raises ParseFailure; transport errors from the client
propagate unchanged.
"""

import logging
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter

from src.exceptions import ParseFailure
from src.models.schemas import AnalysisResult, GeneratedQuestions, Topic
from src.parsing.response_parser import parse_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

ANALYSIS_TASK = "analysis"
QUESTIONS_TASK = "questions"
TOPICS_TASK = "topics"


class ContentGenerator(Protocol):
    """Anything that can answer a prompt with raw text."""

    async def generate_content(
        self,
        prompt: str,
        output_schema: dict[str, Any],
        task: str = ...,
    ) -> str: ...


def output_schema_for(shape: Any, description: str | None = None) -> dict[str, Any]:
    """Build the JSON schema sent alongside a prompt.

    Args:
        shape: Pydantic model or type describing the expected result.
        description: Optional top-level hint for the model.

    Returns:
        JSON schema using wire (alias) field names.
    """
    schema = TypeAdapter(shape).json_schema(by_alias=True)
    if description:
        schema["description"] = description
    return schema


def analysis_prompt(text: str) -> str:
    return (
        "Summarize the following text and extract the top 5 most important keywords. "
        f'Text: "{text}"'
    )


def questions_prompt(text: str) -> str:
    return (
        "Based on the following text, generate 3 multiple-choice questions, "
        "2 short-answer questions (for 2-3 marks), and 1 long-answer question "
        f'(for 12 marks). Text: "{text}"'
    )


def topics_prompt(text: str) -> str:
    return (
        "Analyze the following text from past exam papers or study material. "
        "Identify the 5 most important topics and their probability of appearing "
        f'in a future exam as a percentage. Text: "{text}"'
    )


ANALYSIS_SCHEMA = output_schema_for(AnalysisResult)
QUESTIONS_SCHEMA = output_schema_for(GeneratedQuestions)
TOPICS_SCHEMA = output_schema_for(
    list[Topic],
    description="An array of important topics and their predicted probability.",
)


async def _run_task(
    client: ContentGenerator,
    task: str,
    prompt: str,
    output_schema: dict[str, Any],
    shape: Any,
) -> Any:
    raw = await client.generate_content(prompt, output_schema, task=task)

    result = parse_response(raw, shape)
    if result is None:
        raise ParseFailure(task, raw)

    logger.info(f"{task} task completed")
    return result


async def analyze_document(client: ContentGenerator, text: str) -> AnalysisResult:
    """Summarize the text and extract its top keywords.

    Raises:
        ParseFailure: If the reply is not a valid AnalysisResult.
        TransportFailure: If the model call fails.
    """
    return await _run_task(
        client, ANALYSIS_TASK, analysis_prompt(text), ANALYSIS_SCHEMA, AnalysisResult
    )


async def generate_questions(client: ContentGenerator, text: str) -> GeneratedQuestions:
    """Generate multiple-choice, short-answer and long-answer questions.

    Raises:
        ParseFailure: If the reply is not a valid GeneratedQuestions.
        TransportFailure: If the model call fails.
    """
    return await _run_task(
        client, QUESTIONS_TASK, questions_prompt(text), QUESTIONS_SCHEMA, GeneratedQuestions
    )


async def predict_topics(client: ContentGenerator, text: str) -> list[Topic]:
    """Predict the topics most likely to appear in an exam.

    Raises:
        ParseFailure: If the reply is not a valid list of topics.
        TransportFailure: If the model call fails.
    """
    return await _run_task(
        client, TOPICS_TASK, topics_prompt(text), TOPICS_SCHEMA, list[Topic]
    )
