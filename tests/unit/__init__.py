"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Fenced JSON extraction, shape validation, text uploads
    - agent/: Configuration, client wrapping of Agno, the three tasks
    - session/: Run state machine and partial-failure merging
    - ui/: View formatting helpers
"""
