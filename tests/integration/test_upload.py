"""Integration tests for the plain-text upload endpoint.

Tests real upload flow through the FastAPI app, no mocks.
"""

from httpx import AsyncClient

from src.models.schemas import TextUploadResponse
from src.parsing.text_file import UNSUPPORTED_FILE_MESSAGE


class TestTextUpload:
    """Integration tests for POST /upload/text endpoint."""

    async def test_upload_text_success(self, async_client: AsyncClient) -> None:
        """Upload valid text file returns its content verbatim."""
        content = "Cell biology\n\nMitochondria produce ATP.\n"

        response = await async_client.post(
            "/upload/text",
            files={"file": ("notes.txt", content.encode(), "text/plain")},
        )

        assert response.status_code == 200

        data = TextUploadResponse.model_validate(response.json())
        assert data.filename == "notes.txt"
        assert data.text == content
        assert data.characters == len(content)

    async def test_upload_with_charset_parameter(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/upload/text",
            files={"file": ("notes.txt", "Ünïcode".encode(), "text/plain; charset=utf-8")},
        )

        assert response.status_code == 200
        assert response.json()["text"] == "Ünïcode"

    async def test_reject_pdf(self, async_client: AsyncClient) -> None:
        """PDF upload is rejected with 400 and the unsupported-type message."""
        response = await async_client.post(
            "/upload/text",
            files={"file": ("slides.pdf", b"%PDF-1.4", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == UNSUPPORTED_FILE_MESSAGE

    async def test_reject_image(self, async_client: AsyncClient) -> None:
        jpeg_header = bytes([0xFF, 0xD8, 0xFF, 0xE0, 0x00, 0x10, 0x4A, 0x46])

        response = await async_client.post(
            "/upload/text",
            files={"file": ("image.jpg", jpeg_header, "image/jpeg")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == UNSUPPORTED_FILE_MESSAGE

    async def test_reject_undecodable_text(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/upload/text",
            files={"file": ("bad.txt", b"\xff\xfe\xfa", "text/plain")},
        )

        assert response.status_code == 400
        assert "Failed to read" in response.json()["detail"]

    async def test_reject_oversized_file(self, async_client: AsyncClient) -> None:
        """File exceeding 10MB limit is rejected with 413."""
        oversized = b"x" * (10 * 1024 * 1024 + 1024)

        response = await async_client.post(
            "/upload/text",
            files={"file": ("large.txt", oversized, "text/plain")},
        )

        assert response.status_code == 413
        assert "10MB" in response.json()["detail"]


class TestUploadErrorHandling:
    """Tests for error scenarios in upload endpoint."""

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/upload/text")

        assert response.status_code == 405

    async def test_missing_file_returns_422(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/upload/text")

        assert response.status_code == 422

    async def test_cors_headers_present(self, async_client: AsyncClient) -> None:
        """Response includes CORS headers for cross-origin requests."""
        response = await async_client.post(
            "/upload/text",
            files={"file": ("notes.txt", b"hello", "text/plain")},
            headers={"Origin": "http://localhost:3000"},
        )

        assert "access-control-allow-origin" in response.headers
