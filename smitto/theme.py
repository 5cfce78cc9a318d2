"""Light and dark UI themes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class Themes(IntEnum):
    """Available themes."""

    LIGHT = 0
    DARK = 1


_NAMES = {Themes.LIGHT: "Ligth", Themes.DARK: "Dark"}


def themes() -> list[Themes]:
    """Return all themes in display order."""
    return [Themes.LIGHT, Themes.DARK]


def theme_name(theme: Themes | int) -> str:
    """Return the display name of a theme, or an empty string if unknown."""
    return _NAMES.get(theme, "")


def next_theme(current: Themes) -> Themes:
    """Return the theme that follows ``current`` when cycling."""
    return Themes.DARK if current == Themes.LIGHT else Themes.LIGHT


@dataclass
class Theme:
    """A theme together with its colour palette."""

    theme: Themes = Themes.LIGHT
    palette: dict[str, Any] = field(default_factory=dict)

    def name(self) -> str:
        """Return the display name of this theme."""
        return theme_name(self.theme)