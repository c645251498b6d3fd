"""Client state for the Extract Edge page.

All page state lives in one immutable ClientState record. Every user
action is a pure function that takes the current state and returns the
next one, so transitions can be tested without a rendering environment.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

ZOOM_STEP = 0.1
MIN_ZOOM = 0.1
DEFAULT_ZOOM = 1.0


class Status(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SelectedFile:
    name: str
    content: bytes = field(repr=False)
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class ClientState:
    file: SelectedFile | None = None
    fields: dict[str, str] | None = None
    images: tuple[str, ...] = ()
    selected_page: int = 0
    zoom: float = DEFAULT_ZOOM
    in_flight: bool = False
    error: str = ""

    @property
    def can_submit(self) -> bool:
        return self.file is not None and not self.in_flight

    @property
    def current_image(self) -> str | None:
        if not self.images:
            return None
        return self.images[self.selected_page]


def select_file(state: ClientState, file: SelectedFile | None) -> ClientState:
    """Hold a newly picked file and drop everything derived from the old one."""
    if file is None:
        return state
    return replace(state, file=file, fields=None, images=(), selected_page=0, error="")


def begin_submission(state: ClientState) -> ClientState:
    return replace(state, in_flight=True, error="")


def submission_succeeded(state: ClientState, fields: dict[str, str], images: list[str]) -> ClientState:
    # Result and images are replaced together, never merged
    return replace(
        state,
        fields=dict(fields),
        images=tuple(images),
        selected_page=0,
        in_flight=False,
    )


def submission_failed(state: ClientState, message: str) -> ClientState:
    # Previous result and images stay visible
    return replace(state, in_flight=False, error=message)


def edit_field(state: ClientState, key: str, value: str) -> ClientState:
    if state.fields is None or key not in state.fields:
        return state
    fields = dict(state.fields)
    fields[key] = value
    return replace(state, fields=fields)


def select_page(state: ClientState, index: int) -> ClientState:
    if not 0 <= index < len(state.images):
        return state
    return replace(state, selected_page=index)


def zoom_in(state: ClientState) -> ClientState:
    if not state.images:
        return state
    return replace(state, zoom=round(state.zoom + ZOOM_STEP, 1))


def zoom_out(state: ClientState) -> ClientState:
    if not state.images:
        return state
    return replace(state, zoom=max(MIN_ZOOM, round(state.zoom - ZOOM_STEP, 1)))


def status(state: ClientState) -> Status:
    if state.in_flight:
        return Status.SUBMITTING
    if state.error:
        return Status.FAILED
    if state.fields is not None:
        return Status.SUCCEEDED
    if state.file is not None:
        return Status.SELECTED
    return Status.IDLE
