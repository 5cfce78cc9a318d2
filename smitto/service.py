"""Named background services that do their work periodically."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

_log = logging.getLogger(__name__)

DEFAULT_NOTIFY_TIMEOUT_NS = 200_000


class Service(ABC):
    """Runs :meth:`process_work` every ``interval`` seconds while started.

    Subclasses implement :meth:`process_work` and may override
    :meth:`prepare_start` (return ``False`` to refuse starting) and
    :meth:`process_stop`. Callables in ``active_changed_handlers`` are called
    with ``True`` after a start and ``False`` after a stop.
    """

    def __init__(self, name: str, interval: float = 1.0) -> None:
        self._name = name
        self.interval = interval
        self.dlog = False
        self.notify_timeout_ns = DEFAULT_NOTIFY_TIMEOUT_NS
        self.active_changed_handlers: list[Callable[[bool], Any]] = []
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def name(self) -> str:
        """The name given to the service."""
        return self._name

    def started(self) -> bool:
        """Tell whether the periodic work is running."""
        return self._thread is not None

    def start(self) -> None:
        """Start the periodic work unless already started or refused."""
        if self.started():
            return
        begin = time.perf_counter_ns()
        if self.prepare_start():
            self._stop_event = threading.Event()
            thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name=f"Service-{self._name}",
                daemon=True,
            )
            self._thread = thread
            thread.start()
            self._emit_active_changed(True)
        elapsed = time.perf_counter_ns() - begin
        if self.dlog and elapsed > 3 * self.notify_timeout_ns:
            _log.debug("[Service-%s] processStart - %d ns", self._name, elapsed)

    def stop(self) -> None:
        """Stop the periodic work and let the service clean up."""
        thread = self._thread
        if thread is None:
            return
        begin = time.perf_counter_ns()
        self._thread = None
        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self.process_stop()
        self._emit_active_changed(False)
        elapsed = time.perf_counter_ns() - begin
        if self.dlog and elapsed > 2 * self.notify_timeout_ns:
            _log.debug("[Service-%s] processStop - %d ns", self._name, elapsed)

    def toggle(self) -> None:
        """Stop a started service, start a stopped one."""
        if self.started():
            self.stop()
        else:
            self.start()

    def work(self) -> None:
        """Do one round of work, timing it."""
        begin = time.perf_counter_ns()
        self.process_work()
        elapsed = time.perf_counter_ns() - begin
        if self.dlog and elapsed > self.notify_timeout_ns:
            _log.debug("[Service-%s] processWork - %d ns", self._name, elapsed)

    def prepare_start(self) -> bool:
        """Prepare for starting; return ``False`` to stay stopped."""
        return True

    @abstractmethod
    def process_work(self) -> None:
        """Do the service's periodic work."""

    def process_stop(self) -> None:
        """Clean up after the periodic work has stopped."""

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self.work()
            except Exception:
                _log.exception("[Service-%s] work failed", self._name)

    def _emit_active_changed(self, active: bool) -> None:
        for handler in list(self.active_changed_handlers):
            handler(active)

    def __enter__(self) -> Service:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()