"""Study endpoints: plain-text upload and three-way analysis.

Handles upload validation and runs the session controller for API clients.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from src.agent.client import GenerativeClient, get_generative_client
from src.exceptions import InputValidationError
from src.models.schemas import StudyRequest, StudyResponse, TextUploadResponse
from src.parsing.text_file import FileTooLargeError, read_text_upload
from src.session.controller import StudySessionController

logger = logging.getLogger(__name__)

router = APIRouter(tags=["study"])


@router.post("/upload/text", response_model=TextUploadResponse)
async def upload_text(file: UploadFile) -> TextUploadResponse:
    """Upload a plain-text file and return its content.

    Args:
        file: The uploaded .txt file (multipart/form-data).

    Returns:
        TextUploadResponse with filename and decoded text.

    Raises:
        400: Not plain text, or not decodable.
        413: File exceeds 10MB limit.
    """
    content = await file.read()

    try:
        text = read_text_upload(file.filename, file.content_type, content)
    except FileTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=str(e),
        ) from e
    except InputValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return TextUploadResponse(
        filename=file.filename or "",
        text=text,
        characters=len(text),
    )


@router.post("/study/analyze", response_model=StudyResponse)
async def analyze(
    request: StudyRequest,
    client: GenerativeClient = Depends(get_generative_client),
) -> StudyResponse:
    """Summarize, generate questions and predict topics for the given text.

    The three tasks run concurrently. Tasks that fail leave their field
    null and set the aggregate warning in ``error``.

    Args:
        request: Text to analyze (empty or whitespace rejected with 422).
        client: Generative client (injected).

    Returns:
        StudyResponse with every result that succeeded.
    """
    controller = StudySessionController(client)
    controller.set_input_text(request.text)

    try:
        state = await controller.run()
    except InputValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if state.failures:
        logger.warning(f"Analysis finished with failed tasks: {sorted(state.failures)}")

    return StudyResponse(
        analysis=state.analysis,
        questions=state.questions,
        topics=state.topics,
        error=state.error,
    )
