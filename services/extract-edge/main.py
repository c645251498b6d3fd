"""Extract Edge: single-page Streamlit client for document extraction.

Upload a PDF/TXT/DOCX, send it to the extraction service, edit the
returned fields, browse the rendered pages and export JSON or CSV.
Run: streamlit run main.py
"""

import logging

import streamlit as st

from config import settings
from exports import CSV_EXPORT, JSON_EXPORT, offered_download, to_csv, to_json
from extraction import run_submission
from rendering import page_image_html
from state import (
    ClientState,
    SelectedFile,
    begin_submission,
    edit_field,
    select_file,
    select_page,
    zoom_in,
    zoom_out,
)
from upload_client import ExtractionClient

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ACCEPTED_TYPES = ["pdf", "txt", "docx"]


@st.cache_resource
def get_client() -> ExtractionClient:
    logger.info("Using extraction service at %s", settings.EXTRACT_API_BASE)
    return ExtractionClient()


def _state() -> ClientState:
    if "client_state" not in st.session_state:
        st.session_state.client_state = ClientState()
        st.session_state.result_seq = 0
    return st.session_state.client_state


def _apply(new_state: ClientState):
    st.session_state.client_state = new_state


def _on_file_change():
    uploaded = st.session_state.get("upload")
    if uploaded is None:
        return
    picked = SelectedFile(name=uploaded.name, content=uploaded.getvalue(), content_type=uploaded.type or None)
    _apply(select_file(_state(), picked))


def _on_field_change(key: str, widget_key: str):
    _apply(edit_field(_state(), key, st.session_state[widget_key]))


def _render_upload_form(state: ClientState):
    st.file_uploader(
        "Select File",
        type=ACCEPTED_TYPES,
        key="upload",
        on_change=_on_file_change,
        disabled=state.in_flight,
    )

    if state.in_flight:
        st.button("Processing...", key="submit", disabled=True, width="stretch")
        with st.spinner("Processing..."):
            result = run_submission(state, get_client())
        if result.fields is not None and result.fields is not state.fields:
            st.session_state.result_seq += 1
        _apply(result)
        st.rerun()

    if st.button("Upload & Process", key="submit", disabled=not state.can_submit, width="stretch"):
        # Persist the in-flight state first so the next run draws the
        # form disabled while the upload is outstanding
        _apply(begin_submission(state))
        st.rerun()


def _render_results(state: ClientState):
    st.subheader("Results")
    seq = st.session_state.result_seq
    cols = st.columns(2)
    for i, (key, value) in enumerate(state.fields.items()):
        widget_key = f"field-{seq}-{key}"
        with cols[i % 2]:
            st.text_input(
                key,
                value=value,
                key=widget_key,
                on_change=_on_field_change,
                args=(key, widget_key),
            )

    json_col, csv_col = st.columns(2)
    with offered_download(to_json(state.fields), *JSON_EXPORT) as download:
        json_col.download_button(
            "Download JSON",
            data=download.data,
            file_name=download.filename,
            mime=download.mime,
            width="stretch",
        )
    with offered_download(to_csv(state.fields), *CSV_EXPORT) as download:
        csv_col.download_button(
            "Download CSV",
            data=download.data,
            file_name=download.filename,
            mime=download.mime,
            width="stretch",
        )


def _render_viewer(state: ClientState):
    page_cols = st.columns(len(state.images))
    for i, col in enumerate(page_cols):
        if col.button(
            str(i + 1),
            key=f"page-{i}",
            type="primary" if i == state.selected_page else "secondary",
        ):
            _apply(select_page(_state(), i))
            st.rerun()

    zoom_in_col, zoom_out_col, _ = st.columns([1, 1, 8])
    if zoom_in_col.button("+", key="zoom-in"):
        _apply(zoom_in(_state()))
        st.rerun()
    if zoom_out_col.button("-", key="zoom-out"):
        _apply(zoom_out(_state()))
        st.rerun()

    st.markdown(
        page_image_html(state.current_image, state.selected_page, state.zoom),
        unsafe_allow_html=True,
    )


def main():
    st.set_page_config(page_title="Extract Edge", layout="centered")
    st.title("EXTRACT EDGE")

    _render_upload_form(_state())

    state = _state()
    if state.error:
        st.text(state.error)

    if state.fields is not None:
        _render_results(state)

    if state.images:
        _render_viewer(state)


main()
