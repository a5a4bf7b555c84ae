"""Parsing of raw model responses into structured results.

Models sometimes wrap their JSON in a ```json fenced block; the fence is
removed before decoding. Failures are reported by returning None, never by
raising, so callers decide what a failed parse means.
"""

import json
import logging
import re
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_FENCE_PATTERN = re.compile(r"```json\n(.*?)\n```", re.DOTALL)


def extract_json_body(raw: str) -> str:
    """Return the body of a ```json fenced block, or the raw text if none.

    Args:
        raw: Response text from the model.

    Returns:
        The candidate JSON document with surrounding whitespace removed.
    """
    match = JSON_FENCE_PATTERN.search(raw)
    body = match.group(1) if match else raw
    return body.strip()


def parse_json_response(raw: str | None) -> Any | None:
    """Decode a model response as JSON.

    Only syntactic validity is checked here.

    Args:
        raw: Response text from the model.

    Returns:
        The decoded value, or None if the text is not valid JSON.
    """
    if raw is None:
        logger.error("Failed to parse JSON response: no response text")
        return None

    try:
        return json.loads(extract_json_body(raw))
    except (ValueError, TypeError, RecursionError) as e:
        logger.error(f"Failed to parse JSON response: {e}")
        logger.error(f"Original string: {raw}")
        return None


def parse_response(raw: str | None, shape: type[T]) -> T | None:
    """Decode a model response and validate it against an expected shape.

    Args:
        raw: Response text from the model.
        shape: Pydantic model or type (e.g. ``list[Topic]``) to validate into.

    Returns:
        The validated value, or None if decoding or validation fails.
    """
    data = parse_json_response(raw)
    if data is None:
        return None

    try:
        return TypeAdapter(shape).validate_python(data)
    except ValidationError as e:
        logger.error(f"Response does not match expected shape: {e}")
        logger.error(f"Original string: {raw}")
        return None
