"""Thread-safe holder of the state of a long-running operation."""

from __future__ import annotations

import threading

__all__ = ["ProgressData"]


class ProgressData:
    """Progress value, status text and marquee flag, shared between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._progress = 0
        self._status = ""
        self._marquee = False

    def set(self, progress: int, status: str, marquee: bool = False) -> None:
        """Replace all three fields at once."""
        with self._lock:
            self._progress = progress
            self._status = status
            self._marquee = marquee

    @property
    def progress(self) -> int:
        with self._lock:
            return self._progress

    @property
    def status(self) -> str:
        with self._lock:
            return self._status

    @property
    def marquee(self) -> bool:
        with self._lock:
            return self._marquee

    def snapshot(self) -> tuple[int, str, bool]:
        """Return ``(progress, status, marquee)`` read together."""
        with self._lock:
            return self._progress, self._status, self._marquee