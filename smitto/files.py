"""Whole-file reading and writing helpers."""

from __future__ import annotations

import logging
from pathlib import Path

_log = logging.getLogger(__name__)


def read_all_file(filepath: str | Path) -> bytes:
    """Return the whole content of a file, or empty bytes if it cannot be read."""
    try:
        return Path(filepath).read_bytes()
    except OSError:
        _log.warning("File %s not opened", filepath)
        return b""


def write_to_file(filepath: str | Path, data: bytes | str) -> None:
    """Replace the content of a file with ``data``; a failure to open is ignored."""
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    try:
        Path(filepath).write_bytes(payload)
    except OSError:
        _log.warning("File %s not opened for writing", filepath)