"""NiceGUI interface - thin visualization layer for the study assistant.

Responsibilities:
    - Text input and plain-text file upload
    - Tabbed summary, question and topic views
    - Loading, empty and error states
    - Dark/light theme with a persisted preference

Contains no business logic. Delegates every transition to the session
controller.
"""
