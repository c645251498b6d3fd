"""Tests for local JSON/CSV export."""

import json
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from exports import CSV_EXPORT, JSON_EXPORT, offered_download, to_csv, to_json


class TestToCSV:
    def test_header_and_rows(self):
        assert to_csv({"A": "1", "B": "2"}) == 'Parameter,Value\n"A","1"\n"B","2"'

    def test_no_trailing_newline(self):
        assert not to_csv({"A": "1"}).endswith("\n")

    def test_empty_map_is_header_line_only(self):
        assert to_csv({}) == "Parameter,Value\n"

    def test_follows_map_order(self):
        csv = to_csv({"zeta": "z", "alpha": "a"})
        assert csv.splitlines()[1:] == ['"zeta","z"', '"alpha","a"']

    def test_embedded_quotes_not_escaped(self):
        assert to_csv({'Name': 'Dr. "Max"'}).splitlines()[1] == '"Name","Dr. "Max""'


class TestToJSON:
    def test_four_space_indent(self):
        assert to_json({"A": "1", "B": "2"}) == '{\n    "A": "1",\n    "B": "2"\n}'

    def test_keeps_map_order(self):
        assert list(json.loads(to_json({"zeta": "z", "alpha": "a"}))) == ["zeta", "alpha"]

    def test_non_ascii_written_as_is(self):
        assert "Musterstraße" in to_json({"street": "Musterstraße"})


class TestOfferedDownload:
    def test_payload(self):
        with offered_download('{"A": "1"}', *JSON_EXPORT) as download:
            assert download.filename == "data.json"
            assert download.mime == "application/json"
            assert download.data == b'{"A": "1"}'
            assert download.released is False

    def test_released_after_trigger(self):
        with offered_download("Parameter,Value", *CSV_EXPORT) as download:
            assert download.filename == "data.csv"
            assert download.mime == "text/csv"
        assert download.released is True

    def test_released_when_trigger_raises(self):
        with pytest.raises(RuntimeError):
            with offered_download("x", "data.csv", "text/csv") as download:
                raise RuntimeError("trigger failed")
        assert download.released is True

    def test_utf8_encoded(self):
        with offered_download("Straße", "data.csv", "text/csv") as download:
            assert download.data == "Straße".encode("utf-8")
