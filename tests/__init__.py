"""Test package for the study assistant.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP endpoint tests against the FastAPI app

The generative model is replaced by a scripted fake client (see conftest),
so no test needs an API key or network access.
Leverages pytest with pytest-check for soft assertions.
"""
