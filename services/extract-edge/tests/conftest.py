"""Shared test fixtures for Extract Edge tests."""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add parent directory to path so we can import the modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from state import ClientState, SelectedFile, select_file, submission_succeeded


@pytest.fixture
def sample_pdf() -> SelectedFile:
    """Minimal PDF-looking upload; contents are never inspected by the client."""
    return SelectedFile(
        name="invoice.pdf",
        content=b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF",
        content_type="application/pdf",
    )


@pytest.fixture
def sample_txt() -> SelectedFile:
    return SelectedFile(name="notes.txt", content=b"Patient: Max Mustermann", content_type="text/plain")


@pytest.fixture
def success_body() -> dict:
    """Mock extraction service response with two fields and two pages."""
    return {
        "extracted_data": {"A": "1", "B": "2"},
        "pdf_images": ["img1", "img2"],
    }


@pytest.fixture
def success_response(success_body: dict) -> httpx.Response:
    return httpx.Response(200, text=json.dumps(success_body))


@pytest.fixture
def selected_state(sample_pdf: SelectedFile) -> ClientState:
    return select_file(ClientState(), sample_pdf)


@pytest.fixture
def result_state(selected_state: ClientState) -> ClientState:
    """State after a successful submission with two fields and two pages."""
    return submission_succeeded(selected_state, {"A": "1", "B": "2"}, ["img1", "img2"])
