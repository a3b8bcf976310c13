"""Wall-clock tick source backed by a single worker thread."""

import threading
from typing import Optional

from .base import TickCallback, TickSource


class ThreadedTickSource(TickSource):
    """
    Delivers one tick per ``interval`` seconds from a daemon thread.

    The interval is measured between the end of one callback and the start
    of the next wait, so a slow callback delays subsequent ticks instead of
    stacking them. No catch-up is attempted for drift.
    """

    def __init__(self, interval: float = 1.0, name: str = "threaded"):
        super().__init__(name)
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive: {interval}")
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    def subscribe(self, callback: TickCallback) -> None:
        with self._lock:
            self._callback = callback
            if self._thread is not None and self._thread.is_alive() and not self._stop_event.is_set():
                return

            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name=f"tick-{self.name}",
                daemon=True,
            )
            self._thread.start()
            self.logger.debug("Tick source started", interval=self.interval)

    def cancel(self) -> None:
        with self._lock:
            if self._callback is None and self._thread is None:
                return
            self._callback = None
            self._stop_event.set()
            thread = self._thread
            self._thread = None

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.interval * 2)
        self.logger.debug("Tick source cancelled", tick_count=self._tick_count)

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self._deliver()
            except Exception:
                self.logger.exception("Tick callback failed")
                stop_event.set()
                self._callback = None
