"""A diagnostic timer that reports when the event loop falls behind."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

_log = logging.getLogger(__name__)

# Lateness tolerated before a tick is reported, in seconds.
TOLERANCE = 0.005


class ShadowTimer:
    """Ticks every ``interval`` seconds and logs ticks that arrive late."""

    def __init__(
        self,
        interval: float = 0.010,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval = interval
        self.overruns = 0
        self._clock = clock
        self._last = clock()
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def running(self) -> bool:
        """Tell whether the background ticking is active."""
        return self._thread is not None

    def start(self) -> None:
        """Begin ticking in the background."""
        if self._thread is not None:
            return
        self._last = self._clock()
        self._stop_event = threading.Event()
        thread = threading.Thread(
            target=self._run, args=(self._stop_event,), name="ShadowTimer", daemon=True
        )
        self._thread = thread
        thread.start()

    def stop(self) -> None:
        """Stop ticking."""
        thread = self._thread
        if thread is None:
            return
        self._thread = None
        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join()

    def tick(self) -> float:
        """Record a tick; return the seconds since the previous one."""
        now = self._clock()
        elapsed = now - self._last
        if elapsed > self.interval + TOLERANCE:
            self.overruns += 1
            _log.debug(
                "[ShadowTimer] timeouted %d ms (%d ns)",
                int(elapsed * 1000),
                int(elapsed * 1_000_000_000),
            )
        self._last = now
        return elapsed

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            self.tick()

    def __enter__(self) -> ShadowTimer:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()