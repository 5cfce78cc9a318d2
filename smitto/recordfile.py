"""Reading files whose lines are key/value records."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from .keyvalue import KeyValueRecord

# Lines longer than this many bytes are read in several pieces.
MAX_LINE_BYTES = 4095


def read_records_from_file(
    filepath: str | Path,
    record_class: Callable[[KeyValueRecord], Any] | None = None,
) -> list[Any]:
    """Build one record per line of a file; a missing file gives an empty list.

    Each line is parsed as a :class:`KeyValueRecord` and handed to
    ``record_class``; without it the parsed records themselves are returned.
    """
    build = record_class if record_class is not None else (lambda record: record)
    try:
        handle = open(filepath, "rb")
    except OSError:
        return []
    records = []
    with handle:
        while chunk := handle.readline(MAX_LINE_BYTES):
            records.append(build(KeyValueRecord(chunk.decode("utf-8", errors="replace"))))
    return records