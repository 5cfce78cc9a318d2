"""Base palette and console colour mapping."""

from __future__ import annotations

from enum import IntEnum

_FALLBACK = "#000000"


class SmittoBaseColors(IntEnum):
    """Named entries of the base palette."""

    UNSET = 0
    LEVEL01 = 1
    LEVEL02 = 2
    LEVEL03 = 3
    LEVEL04 = 4
    LEVEL05 = 5
    LEVEL06 = 6
    LEVEL07 = 7
    LEVEL08 = 8
    LEVEL09 = 9
    LEVEL10 = 10
    LEVEL11 = 11
    LEVEL12 = 12
    RED = 13
    BOLD_RED = 14
    GREEN = 15
    BOLD_GREEN = 16
    YELLOW = 17
    BOLD_YELLOW = 18
    BLUE = 19
    BOLD_BLUE = 20
    PURPLE = 21
    BOLD_PURPLE = 22
    CYAN = 23
    BOLD_CYAN = 24


class ConsoleColors(IntEnum):
    """The eight classic terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7


_BASE_HEX: dict[SmittoBaseColors, str] = {
    SmittoBaseColors.UNSET: "#000000",
    SmittoBaseColors.LEVEL01: "#151c2a",
    SmittoBaseColors.LEVEL02: "#21293a",
    SmittoBaseColors.LEVEL03: "#313a4c",
    SmittoBaseColors.LEVEL04: "#414a5e",
    SmittoBaseColors.LEVEL05: "#606d88",
    SmittoBaseColors.LEVEL06: "#7281a0",
    SmittoBaseColors.LEVEL07: "#8996b0",
    SmittoBaseColors.LEVEL08: "#96a2b9",
    SmittoBaseColors.LEVEL09: "#a0acc4",
    SmittoBaseColors.LEVEL10: "#bfc7d9",
    SmittoBaseColors.LEVEL11: "#e8ebf0",
    SmittoBaseColors.LEVEL12: "#f6f7f9",
    SmittoBaseColors.RED: "#cc0000",
    SmittoBaseColors.BOLD_RED: "#ef2929",
    SmittoBaseColors.GREEN: "#4e9a06",
    SmittoBaseColors.BOLD_GREEN: "#8ae234",
    SmittoBaseColors.YELLOW: "#c4a000",
    SmittoBaseColors.BOLD_YELLOW: "#fce94f",
    SmittoBaseColors.BLUE: "#3465a4",
    SmittoBaseColors.BOLD_BLUE: "#739fcf",
    SmittoBaseColors.PURPLE: "#75507b",
    SmittoBaseColors.BOLD_PURPLE: "#ad7fa8",
    SmittoBaseColors.CYAN: "#06989a",
    SmittoBaseColors.BOLD_CYAN: "#34e2e2",
}

# (normal, bold) palette entries for each console colour.
_CONSOLE_PAIRS: dict[ConsoleColors, tuple[SmittoBaseColors, SmittoBaseColors]] = {
    ConsoleColors.BLACK: (SmittoBaseColors.LEVEL01, SmittoBaseColors.LEVEL03),
    ConsoleColors.RED: (SmittoBaseColors.RED, SmittoBaseColors.BOLD_RED),
    ConsoleColors.GREEN: (SmittoBaseColors.GREEN, SmittoBaseColors.BOLD_GREEN),
    ConsoleColors.YELLOW: (SmittoBaseColors.YELLOW, SmittoBaseColors.BOLD_YELLOW),
    ConsoleColors.BLUE: (SmittoBaseColors.BLUE, SmittoBaseColors.BOLD_BLUE),
    ConsoleColors.PURPLE: (SmittoBaseColors.PURPLE, SmittoBaseColors.BOLD_PURPLE),
    ConsoleColors.CYAN: (SmittoBaseColors.CYAN, SmittoBaseColors.BOLD_CYAN),
    ConsoleColors.WHITE: (SmittoBaseColors.LEVEL12, SmittoBaseColors.LEVEL09),
}


def scolor(color: SmittoBaseColors | int) -> str:
    """Return the hex code of a palette entry; unknown entries give black."""
    return _BASE_HEX.get(color, _FALLBACK)


def ccolor(color: ConsoleColors | int, bold: bool) -> str:
    """Return the hex code used to render a console colour."""
    pair = _CONSOLE_PAIRS.get(color)
    if pair is None:
        return _FALLBACK
    normal, strong = pair
    return scolor(strong if bold else normal)