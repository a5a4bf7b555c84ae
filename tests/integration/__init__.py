"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests through ASGITransport
    - Upload validation and decoding
    - Analyze flow from request to settled results, with the model scripted
"""
