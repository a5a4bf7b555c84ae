"""Parsing utilities for model responses and uploaded study material.

Responsibilities:
    - Fenced-JSON extraction from raw model output
    - Syntactic and shape validation of structured responses
    - Plain-text upload validation and decoding

Parsers report bad model output with a None sentinel; bad user input is
raised as InputValidationError.
"""

from src.parsing.response_parser import extract_json_body, parse_json_response, parse_response
from src.parsing.text_file import MAX_FILE_SIZE, UNSUPPORTED_FILE_MESSAGE, read_text_upload

__all__ = [
    "MAX_FILE_SIZE",
    "UNSUPPORTED_FILE_MESSAGE",
    "extract_json_body",
    "parse_json_response",
    "parse_response",
    "read_text_upload",
]
