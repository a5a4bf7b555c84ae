"""Agno-backed client for the remote generative model.

Exposes a single operation, ``generate_content``, which sends one prompt
together with an output-shape descriptor and returns the raw response text.

Architecture Decisions:

1. **One-shot agents** - Every call runs a fresh Agno ``Agent`` with no
   storage, history or knowledge. The three study tasks are independent and
   must not see each other's context.

2. **Shared model** - The provider model (and its HTTP client) is created once
   per service and reused by every agent.

3. **Schema in instructions** - The JSON schema of the expected result is
   handed to the agent as instructions and expected output. The reply is kept
   as raw text and parsed by ``src.parsing.response_parser`` so that fenced or
   malformed replies are handled in one place.

4. **Transport errors are wrapped** - Anything raised by the model call
   becomes ``TransportFailure`` tagged with the task name. No retries.
"""

import json
import logging
from typing import Any

from agno.agent import Agent
from agno.models.base import Model
from agno.models.google import Gemini
from agno.models.openai import OpenAIChat
from agno.run.base import RunStatus

from src.agent.config import StudyAgentConfig, get_agent_config
from src.exceptions import TransportFailure

logger = logging.getLogger(__name__)

JSON_ONLY_INSTRUCTIONS = [
    "Respond with a single JSON document and nothing else.",
    "The JSON document must conform to the JSON schema below.",
    "Every property in the schema is required.",
]


def describe_output_schema(output_schema: dict[str, Any]) -> str:
    """Render a JSON schema as the text handed to the model."""
    return json.dumps(output_schema, indent=2, ensure_ascii=False)


class GenerativeClient:
    """Client for the remote generative model.

    Wraps Agno with:
    - Provider selection (Gemini or OpenAI-compatible)
    - Structured-output instructions per request
    - Singleton lifecycle management
    - Centralized transport error handling
    """

    def __init__(self, config: StudyAgentConfig | None = None) -> None:
        """Initialize the client.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        self._model = self._create_model()

    @property
    def model_name(self) -> str:
        return self._config.model_name

    def _create_model(self) -> Model:
        """Create the provider model.

        Returns:
            Gemini or OpenAIChat model configured from settings.
        """
        if self._config.provider == "openai":
            return OpenAIChat(
                id=self._config.model_name,
                api_key=self._config.api_key,
                base_url=self._config.base_url,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )

        return Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
            max_output_tokens=self._config.max_tokens,
        )

    def _create_agent(self, output_schema: dict[str, Any]) -> Agent:
        """Create a one-shot agent constrained to the given output shape."""
        schema_text = describe_output_schema(output_schema)
        return Agent(
            model=self._model,
            description="A study assistant that turns study material into structured JSON.",
            instructions=[*JSON_ONLY_INSTRUCTIONS, schema_text],
            expected_output=f"JSON matching this schema:\n{schema_text}",
            markdown=False,
        )

    async def generate_content(
        self,
        prompt: str,
        output_schema: dict[str, Any],
        task: str = "generate",
    ) -> str:
        """Send one prompt and return the raw response text.

        Args:
            prompt: Natural-language instruction including the source text.
            output_schema: JSON schema describing the expected result.
            task: Task name used in logs and errors.

        Returns:
            Raw response text (empty if the model returned no content).

        Raises:
            TransportFailure: If the model call fails.
        """
        agent = self._create_agent(output_schema)
        logger.debug(f"Dispatching {task} request to {self._config.model_name}")

        try:
            response = await agent.arun(prompt)
        except Exception as e:
            logger.error(f"{task} request failed: {e}")
            raise TransportFailure(task, str(e)) from e

        if response.status == RunStatus.error:
            message = response.content or "model run ended in error"
            logger.error(f"{task} request failed: {message}")
            raise TransportFailure(task, str(message))

        content = response.content
        if content is None:
            return ""
        if isinstance(content, str):
            return content
        # Some providers hand back already-decoded JSON
        return json.dumps(content, default=str)


# Module-level singleton instance
_client: GenerativeClient | None = None


def get_generative_client() -> GenerativeClient:
    """Get or create the global generative client.

    Returns:
        The GenerativeClient instance.
    """
    global _client
    if _client is None:
        _client = GenerativeClient()
    return _client
