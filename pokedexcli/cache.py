"""A small thread-safe response cache whose entries are reaped periodically."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

# Entries older than this (in seconds) are dropped on every reap tick.
_MAX_AGE = 5e-9


@dataclass
class _Entry:
    val: bytes
    created_at: float = field(default_factory=time.monotonic)


class Cache:
    """Maps keys to raw bytes; a background thread drops entries every ``interval`` seconds."""

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self.interval = float(interval)
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._thread.start()

    def add(self, key: str, val: bytes) -> None:
        """Store ``val`` under ``key``, replacing any earlier entry."""
        with self._lock:
            self._entries[key] = _Entry(bytes(val))

    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or ``None`` when absent."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.val

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def close(self) -> None:
        """Stop the background reaper."""
        self._stop.set()
        if self._thread.is_alive() and threading.current_thread() is not self._thread:
            self._thread.join()

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _reap_loop(self) -> None:
        while not self._stop.wait(self.interval):
            self._reap(time.monotonic())

    def _reap(self, now: float) -> None:
        with self._lock:
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > _MAX_AGE
            ]
            for key in expired:
                del self._entries[key]