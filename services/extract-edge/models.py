"""Pydantic models for the extraction service's /upload response body."""

import json
import logging
from typing import Any

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class ErrorPayload(BaseModel):
    detail: str = ""

    @field_validator("detail", mode="before")
    @classmethod
    def _detail_as_text(cls, value: Any) -> str:
        # false, 0, [] and {} count as missing
        if not value:
            return ""
        # FastAPI validation errors send detail as a list of objects
        return _as_text(value)


class ExtractionPayload(BaseModel):
    extracted_data: dict[str, str] = {}
    pdf_images: list[str] = []

    @field_validator("extracted_data", mode="before")
    @classmethod
    def _fields_as_text(cls, value: Any) -> dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {str(key): _as_text(val) for key, val in value.items()}

    @field_validator("pdf_images", mode="before")
    @classmethod
    def _images_as_list(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        return [img for img in value if isinstance(img, str)]


def parse_body(raw: str) -> dict[str, Any]:
    """Parse a response body as a JSON object.

    Anything that is not a JSON object (malformed text, arrays, scalars)
    is treated as an empty structure rather than an error.
    """
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Response body is not JSON (%d chars)", len(raw))
        return {}
    if not isinstance(parsed, dict):
        return {}
    return parsed


def failure_message(body: dict[str, Any], raw: str, status_code: int) -> str:
    """Pick the message for a failed upload: detail, then raw body, then status."""
    detail = ErrorPayload.model_validate(body).detail
    if detail:
        return detail
    if raw:
        return raw
    return f"HTTP {status_code}"
