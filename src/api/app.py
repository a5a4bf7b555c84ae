"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.agent.config import get_agent_config
from src.api.routes import router as study_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Report the configured model on startup and log shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Study Assistant API...")
    try:
        config = get_agent_config()
    except ValueError:
        logger.warning("No model API key configured; analysis requests will fail")
    else:
        logger.info(f"Using {config.provider} model {config.model_name}")
    yield
    logger.info("Shutting down Study Assistant API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Study Assistant API",
        description=(
            "AI study assistant. Summarizes study material, extracts keywords, "
            "generates exam-style questions and predicts likely exam topics "
            "through a generative language model."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(study_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "study-assistant"}

    return application


app = create_app()
