"""Generative model access for the study assistant.

Responsibilities:
    - Model configuration from environment (Gemini or OpenAI-compatible)
    - One-shot Agno agents constrained to a JSON output schema
    - The three study tasks: document analysis, question generation,
      topic prediction

Maintains clean separation from the UI and HTTP layers.
"""

from src.agent.client import GenerativeClient, get_generative_client
from src.agent.config import StudyAgentConfig, get_agent_config
from src.agent.tasks import analyze_document, generate_questions, predict_topics

__all__ = [
    "GenerativeClient",
    "StudyAgentConfig",
    "analyze_document",
    "generate_questions",
    "get_agent_config",
    "get_generative_client",
    "predict_topics",
]
