"""HTTP client for the remote document extraction service.

Uses httpx with configurable timeouts. A submission is a single
POST /upload; failed requests are surfaced, never retried.
"""

import logging

import httpx

from config import settings
from models import ExtractionPayload, failure_message, parse_body

logger = logging.getLogger(__name__)

UPLOAD_FIELD = "file"


class ExtractionError(Exception):
    """Base class for upload failures; the message is shown to the user."""


class ExtractionServiceError(ExtractionError):
    """Extraction service answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ExtractionTransportError(ExtractionError):
    """Extraction service could not be reached (connect, timeout, protocol)."""


class ExtractionClient:
    """HTTP client for the extraction service's /upload endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int | None = None,
        connect_timeout: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.EXTRACT_API_BASE).rstrip("/")

        read_timeout = timeout if timeout is not None else settings.UPLOAD_TIMEOUT_SECONDS
        conn_timeout = connect_timeout if connect_timeout is not None else settings.UPLOAD_CONNECT_TIMEOUT

        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=httpx.Timeout(
                connect=float(conn_timeout),
                read=float(read_timeout),
                write=60.0,
                pool=30.0,
            ),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self):
        self._client.close()

    def __enter__(self) -> "ExtractionClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def upload(self, filename: str, content: bytes, content_type: str | None = None) -> ExtractionPayload:
        """Send one document to the extraction service.

        Returns the parsed ExtractionPayload.
        Raises ExtractionServiceError (non-2xx) or ExtractionTransportError.
        """
        # Log name and size only, never document content
        logger.info("Uploading %s (%d bytes) to %s/upload", filename, len(content), self._base_url)

        upload = (filename, content, content_type) if content_type else (filename, content)
        try:
            resp = self._client.post("/upload", files={UPLOAD_FIELD: upload})
            raw = resp.text
        except httpx.HTTPError as e:
            logger.warning("Extraction service request failed: %s", e)
            raise ExtractionTransportError(f"Cannot reach extraction service: {e}") from e

        body = parse_body(raw)

        if not resp.is_success:
            message = failure_message(body, raw, resp.status_code)
            logger.error("Extraction service error %d: %s", resp.status_code, message)
            raise ExtractionServiceError(message, resp.status_code)

        payload = ExtractionPayload.model_validate(body)
        logger.info(
            "Extraction returned %d fields and %d page images",
            len(payload.extracted_data),
            len(payload.pdf_images),
        )
        return payload
