"""Widget style sheets for each background level of the palette."""

from __future__ import annotations

from .colors import SmittoBaseColors, scolor

EMPTY_STYLESHEET = ""

# Foreground colour paired with each background level; levels from 7 up set none.
_FOREGROUND: dict[int, SmittoBaseColors] = {
    1: SmittoBaseColors.LEVEL09,
    2: SmittoBaseColors.LEVEL10,
    3: SmittoBaseColors.LEVEL11,
    4: SmittoBaseColors.LEVEL12,
    5: SmittoBaseColors.LEVEL12,
    6: SmittoBaseColors.LEVEL12,
}

MAX_LEVEL = 12


def _build(level: int) -> str:
    background = scolor(SmittoBaseColors(level))
    foreground = _FOREGROUND.get(level)
    if foreground is None:
        return f"QWidget {{background: {background};}}"
    return f"QWidget {{background: {background}; color: {scolor(foreground)};}}"


_STYLESHEETS: tuple[str, ...] = (EMPTY_STYLESHEET,) + tuple(
    _build(level) for level in range(1, MAX_LEVEL + 1)
)


def level_stylesheet(level: int) -> str:
    """Return the style sheet for a level from 1 to 12, or the empty one for 0."""
    if not 0 <= level <= MAX_LEVEL:
        raise ValueError(f"style sheet level must be between 0 and {MAX_LEVEL}, got {level}")
    return _STYLESHEETS[level]