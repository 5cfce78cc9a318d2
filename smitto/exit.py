"""Exit codes and translation of termination signals into application exits."""

from __future__ import annotations

import logging
import signal
import sys
from collections.abc import Callable
from types import FrameType
from typing import Any

_log = logging.getLogger(__name__)

APP_UPDATE_EXIT_CODE = 198
APP_RESTART_EXIT_CODE = 199
APP_NORMAL_EXIT_CODE = 200
APP_SIGINT_EXIT_CODE = 201  # Ctrl+C
APP_SIGTERM_EXIT_CODE = 202  # kill


def _sigusr1() -> int | None:
    if sys.platform.startswith("linux"):
        return getattr(signal, "SIGUSR1", None)
    return None


def signal_name(sig: int) -> str:
    """Return a readable name of a signal number."""
    if sig == signal.SIGINT:
        return "SIGINT"
    if sig == signal.SIGTERM:
        return "SIGTERM"
    usr1 = _sigusr1()
    if usr1 is not None and sig == usr1:
        return "SIGUSR1"
    return f"SIG-{int(sig)}"


def exit_code_for_signal(sig: int) -> int:
    """Return the application exit code that a signal leads to."""
    if sig == signal.SIGINT:
        return APP_SIGINT_EXIT_CODE
    if sig == signal.SIGTERM:
        return APP_SIGTERM_EXIT_CODE
    usr1 = _sigusr1()
    if usr1 is not None and sig == usr1:
        return APP_UPDATE_EXIT_CODE
    return 0


class ExitHelper:
    """Turns termination signals into a call of ``on_exit`` with an exit code."""

    def __init__(self, on_exit: Callable[[int], Any]) -> None:
        self.on_exit = on_exit

    def install(self) -> dict[int, Any]:
        """Register the handler; return the handlers it replaced, by signal."""
        signals = [signal.SIGINT, signal.SIGTERM]
        usr1 = _sigusr1()
        if usr1 is not None:
            signals.append(usr1)
        return {int(sig): signal.signal(sig, self.handle) for sig in signals}

    def handle(self, sig: int, frame: FrameType | None = None) -> None:
        """Log the signal and request the matching application exit."""
        _log.info("signal[%d]=%s", int(sig), signal_name(sig))
        self.on_exit(exit_code_for_signal(sig))