"""Platform-dependent sizes of icons and panels."""

from __future__ import annotations

import sys
from typing import NamedTuple


class Size(NamedTuple):
    """A width and height in pixels."""

    width: int
    height: int


class _Metrics(NamedTuple):
    icon: int
    panel_icon: int
    margin: int
    spacing: int


_PANEL_PADDING = 10

_DESKTOP = _Metrics(icon=32, panel_icon=24, margin=4, spacing=6)
_ANDROID = _Metrics(icon=128, panel_icon=96, margin=8, spacing=8)


def _is_android(android: bool | None) -> bool:
    if android is not None:
        return android
    return sys.platform == "android" or hasattr(sys, "getandroidapilevel")


def _metrics(android: bool | None) -> _Metrics:
    return _ANDROID if _is_android(android) else _DESKTOP


def icon_size(android: bool | None = None) -> Size:
    """Return the standard icon size."""
    side = _metrics(android).icon
    return Size(side, side)


def panel_size(android: bool | None = None) -> int:
    """Return the thickness of a panel: icon size plus padding."""
    return icon_size(android).height + _PANEL_PADDING


def panel_icon_size(android: bool | None = None) -> Size:
    """Return the size of icons shown on a panel."""
    side = _metrics(android).panel_icon
    return Size(side, side)


def panel_margin(android: bool | None = None) -> int:
    """Return the margin around panel contents."""
    return _metrics(android).margin


def panel_spacing(android: bool | None = None) -> int:
    """Return the spacing between panel items."""
    return _metrics(android).spacing