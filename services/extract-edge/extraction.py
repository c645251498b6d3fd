"""Submission orchestrator: guard, upload, fold the outcome into state."""

import logging

from state import (
    ClientState,
    begin_submission,
    submission_failed,
    submission_succeeded,
)
from upload_client import ExtractionClient

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Network error"


def submit(state: ClientState, client: ExtractionClient) -> ClientState:
    """Upload the selected file and return the resulting state.

    No-op unless a file is selected and nothing is in flight.
    """
    if not state.can_submit:
        return state
    return run_submission(begin_submission(state), client)


def run_submission(state: ClientState, client: ExtractionClient) -> ClientState:
    """Perform the upload for a submission that is already in flight.

    Every failure is caught here and stored as the error message; the
    in-flight flag is cleared on every path.
    """
    if not state.in_flight:
        return state
    if state.file is None:
        return submission_failed(state, "")

    selected = state.file
    # Name and size only, never document content
    logger.info("Submitting %s (%d bytes)", selected.name, selected.size)
    try:
        payload = client.upload(selected.name, selected.content, selected.content_type)
    except Exception as e:
        logger.warning("Submission of %s failed: %s", selected.name, e)
        return submission_failed(state, str(e) or FALLBACK_ERROR)

    return submission_succeeded(state, payload.extracted_data, payload.pdf_images)
