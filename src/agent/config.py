"""Generative model configuration with environment variable loading.

Pydantic-based configuration for the study agent.
Supports Google Gemini (default) and OpenAI or OpenAI-compatible APIs.
"""

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

Provider = Literal["gemini", "openai"]


def _env_api_key() -> str:
    for name in ("LLM_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY", "OPENAI_API_KEY"):
        value = os.getenv(name)
        if value:
            return value
    return ""


class StudyAgentConfig(BaseModel):
    """Configuration for the study agent.

    Attributes:
        provider: Model provider, "gemini" or "openai".
        api_key: API key for model access.
        base_url: API base URL for OpenAI-compatible providers (None for default).
        model_name: Model identifier to use.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
    """

    model_config = ConfigDict(validate_default=True, protected_namespaces=())

    provider: Provider = Field(
        default_factory=lambda: os.getenv("LLM_PROVIDER", "gemini").lower(),
        description="Model provider",
    )
    api_key: str = Field(
        default_factory=_env_api_key,
        description="API key for LLM provider",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (OpenAI-compatible providers only)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("LLM_MODEL", "gemini-2.5-flash"),
        description="Model to use",
    )
    temperature: float = Field(
        default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0.7")),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "4096")),
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY or GEMINI_API_KEY in .env"
            )
        return v.strip()


def get_agent_config() -> StudyAgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured StudyAgentConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return StudyAgentConfig()
