"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - sample_text: Short study passage used as input
    - fake_client: Scripted stand-in for the generative client
    - async_client: HTTPX client for API testing with the fake client injected

The fake client answers each task with canned JSON (or raises) so no test
depends on a live model.
"""

import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from src.agent.client import get_generative_client
from src.agent.tasks import ANALYSIS_TASK, QUESTIONS_TASK, TOPICS_TASK
from src.api import app

ANALYSIS_PAYLOAD = {
    "summary": "Photosynthesis converts light energy into chemical energy.",
    "keywords": ["photosynthesis", "chlorophyll", "light", "glucose", "oxygen"],
}

QUESTIONS_PAYLOAD = {
    "mcqs": [
        {
            "question": "Which pigment absorbs light?",
            "options": ["Chlorophyll", "Keratin", "Melanin", "Hemoglobin"],
            "answer": "Chlorophyll",
        },
        {
            "question": "Which gas is released?",
            "options": ["Nitrogen", "Oxygen", "Helium"],
            "answer": "Oxygen",
        },
        {
            "question": "Where does it happen?",
            "options": ["Mitochondria", "Chloroplast"],
            "answer": "Chloroplast",
        },
    ],
    "shortAnswers": ["Define photosynthesis.", "Name the products of photosynthesis."],
    "longAnswers": ["Explain the light and dark reactions of photosynthesis in detail."],
}

TOPICS_PAYLOAD = [
    {"topic": "Light reactions", "probability": 85},
    {"topic": "Calvin cycle", "probability": 70},
    {"topic": "Chlorophyll", "probability": 55},
    {"topic": "Stomata", "probability": 30},
    {"topic": "Limiting factors", "probability": 20},
]

PAYLOADS = {
    ANALYSIS_TASK: ANALYSIS_PAYLOAD,
    QUESTIONS_TASK: QUESTIONS_PAYLOAD,
    TOPICS_TASK: TOPICS_PAYLOAD,
}


def fenced(payload: Any) -> str:
    """Wrap a payload in a ```json fenced block, as models often do."""
    return f"```json\n{json.dumps(payload)}\n```"


class FakeGenerativeClient:
    """Answers generate_content from a per-task script.

    Each script entry is either response text or an exception to raise.
    Every call is recorded in ``calls`` as (task, prompt, output_schema).
    """

    def __init__(self, script: dict[str, str | BaseException] | None = None) -> None:
        self.script: dict[str, str | BaseException] = script or {
            task: fenced(payload) for task, payload in PAYLOADS.items()
        }
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    async def generate_content(
        self,
        prompt: str,
        output_schema: dict[str, Any],
        task: str = "generate",
    ) -> str:
        self.calls.append((task, prompt, output_schema))
        outcome = self.script[task]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def sample_text() -> str:
    """Return a short study passage."""
    return (
        "Photosynthesis is the process by which green plants use sunlight, "
        "water and carbon dioxide to produce glucose and oxygen."
    )


@pytest.fixture
def fake_client() -> FakeGenerativeClient:
    """Fake client where every task succeeds with a fenced payload."""
    return FakeGenerativeClient()


@pytest.fixture
def override_client() -> Callable[[FakeGenerativeClient], None]:
    """Install a fake client as the API's generative client dependency."""

    def install(client: FakeGenerativeClient) -> None:
        app.dependency_overrides[get_generative_client] = lambda: client

    return install


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
