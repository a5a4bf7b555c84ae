"""FastAPI endpoints for the study assistant.

Endpoints:
    - GET /health: Service health status
    - POST /upload/text: Plain-text uploads
    - POST /study/analyze: Summary, questions and topic prediction
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
