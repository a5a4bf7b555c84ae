"""Study Assistant - AI summaries, exam questions and topic predictions.

Combines NiceGUI for the browser interface, FastAPI for the HTTP API,
Agno for model access, and Pydantic for data validation.

Components:
    - agent: Model configuration, client and the three study tasks
    - session: Session state and the concurrent analysis run
    - parsing: Model response parsing and plain-text uploads
    - api: HTTP endpoints
    - ui: Web interface with summary, question and topic views
    - models: Result and request/response schemas
"""

__version__ = "0.1.0"
