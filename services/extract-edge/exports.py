"""Local export of the field-map as JSON or CSV.

Nothing here touches the network: exports are serialized in memory and
handed to the page as a download.
"""

import io
import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

JSON_EXPORT = ("data.json", "application/json")
CSV_EXPORT = ("data.csv", "text/csv")
CSV_HEADER = "Parameter,Value"


def to_json(fields: dict[str, str]) -> str:
    return json.dumps(fields, indent=4, ensure_ascii=False)


def to_csv(fields: dict[str, str]) -> str:
    """Two-column CSV with a Parameter,Value header.

    Keys and values are wrapped in quotes as-is; embedded quotes are not
    escaped. The header line always ends in a newline, so an empty map
    exports as just the header line.
    """
    rows = "\n".join(f'"{key}","{value}"' for key, value in fields.items())
    return f"{CSV_HEADER}\n{rows}"


@dataclass(frozen=True)
class Download:
    filename: str
    mime: str
    buffer: io.BytesIO

    @property
    def data(self) -> bytes:
        return self.buffer.getvalue()

    @property
    def released(self) -> bool:
        return self.buffer.closed


@contextmanager
def offered_download(content: str, filename: str, mime: str) -> Iterator[Download]:
    """Stage text content as a transient in-memory file for download.

    The buffer is released when the block exits, whether or not the
    trigger inside it raises.
    """
    data = content.encode("utf-8")
    buffer = io.BytesIO(data)
    logger.debug("Offering %s (%s, %d bytes)", filename, mime, len(data))
    try:
        yield Download(filename=filename, mime=mime, buffer=buffer)
    finally:
        buffer.close()
