"""Polling watcher that re-runs extraction when the input changes."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Callable, Optional, Tuple

from .logging import get_logger

Signature = Optional[Tuple[int, int]]


class FileWatcher:
    """Detects modifications to a single file by polling its stat signature."""

    def __init__(self, path: str | Path, interval: float = 1.0) -> None:
        if interval <= 0:
            raise ValueError("Watch interval must be positive")
        self.path = Path(path).expanduser()
        self.interval = interval
        self.logger = get_logger("watch")
        self._signature = self._stat()

    def _stat(self) -> Signature:
        try:
            stat = self.path.stat()
        except OSError:
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def poll(self) -> bool:
        """Return True when the file changed since the previous poll."""
        current = self._stat()
        if current == self._signature:
            return False
        self._signature = current
        return current is not None

    def run(
        self,
        callback: Callable[[], object],
        stop_event: threading.Event | None = None,
        *,
        max_events: int | None = None,
    ) -> int:
        """Invoke ``callback`` after every detected change until stopped.

        Returns the number of changes handled. ``max_events`` bounds the loop
        for callers that only need a fixed number of re-runs.
        """
        stop = stop_event or threading.Event()
        handled = 0
        self.logger.info("Watching for changes in: %s", self.path.resolve())
        while not stop.is_set():
            if self.poll():
                self.logger.info("File changes detected, processing...")
                try:
                    callback()
                except Exception as exc:
                    self.logger.error("Re-run after change failed: %s", exc)
                handled += 1
                if max_events is not None and handled >= max_events:
                    break
                continue
            stop.wait(self.interval)
        return handled


__all__ = ["FileWatcher"]
