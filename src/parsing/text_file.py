"""Plain-text upload handling.

Validates the declared content type and decodes the file into source text.
"""

import codecs
import logging

from src.exceptions import InputValidationError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
TEXT_CONTENT_TYPE = "text/plain"

UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Please upload a .txt file."
READ_FAILED_MESSAGE = "Failed to read the file."


class FileTooLargeError(InputValidationError):
    """Raised when an upload exceeds MAX_FILE_SIZE."""


def is_plain_text(content_type: str | None) -> bool:
    """Check whether a declared content type is plain text.

    Parameters such as ``charset`` are ignored.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == TEXT_CONTENT_TYPE


def read_text_upload(filename: str | None, content_type: str | None, data: bytes) -> str:
    """Turn an uploaded file into source text.

    Args:
        filename: Name of the uploaded file (used for logging only).
        content_type: Declared MIME type of the upload.
        data: Raw file bytes.

    Returns:
        The file content decoded as UTF-8, verbatim.

    Raises:
        InputValidationError: If the type is not plain text or the bytes
            cannot be decoded.
        FileTooLargeError: If the file exceeds the size limit.
    """
    if not is_plain_text(content_type):
        logger.warning(f"Rejected upload {filename!r} with content type {content_type!r}")
        raise InputValidationError(UNSUPPORTED_FILE_MESSAGE)

    if len(data) > MAX_FILE_SIZE:
        size_mb = len(data) / (1024 * 1024)
        raise FileTooLargeError(f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)")

    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(f"Failed to decode upload {filename!r}: {e}")
        raise InputValidationError(READ_FAILED_MESSAGE) from e
