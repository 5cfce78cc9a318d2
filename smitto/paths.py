"""Standard locations used by applications."""

from __future__ import annotations

import sys
from pathlib import Path

import platformdirs


def tmp_path() -> str:
    """Return the directory for temporary files, with a trailing slash."""
    return "C:/tmp/" if sys.platform.startswith("win") else "/tmp/"


def _application_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


def app_data_path(app_name: str | None = None) -> str:
    """Return the per-user data directory of the application, creating it."""
    name = app_name or Path(sys.argv[0] or "app").stem or "app"
    path = Path(platformdirs.user_data_dir(name))
    path.mkdir(parents=True, exist_ok=True)
    return str(path)


def app_objects_path(app_dir: str | Path | None = None) -> str:
    """Return the ``Objects`` directory next to the application, creating it."""
    base = Path(app_dir) if app_dir is not None else _application_dir()
    path = base / "Objects"
    path.mkdir(parents=True, exist_ok=True)
    return str(path)