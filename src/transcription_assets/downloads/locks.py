"""Per-path advisory locks for downloads."""

import threading
import typing as t
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class _PathLock:
    lock: threading.RLock = field(default_factory=threading.RLock)
    # Threads holding or waiting for the lock
    holders: int = 0


class PathLockRegistry:
    """Hands out one lock per cached asset path.

    Serializes downloads of the same asset within a process so two calls
    cannot interleave their copies into the final path. Locks are reentrant,
    so a thread already holding a path may hold it again. An entry is
    dropped once nobody holds or waits for it.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[Path, _PathLock] = {}

    def _acquire_entry(self, key: Path) -> _PathLock:
        with self._guard:
            entry = self._locks.setdefault(key, _PathLock())
            entry.holders += 1
            return entry

    def _release_entry(self, key: Path, entry: _PathLock) -> None:
        with self._guard:
            entry.holders -= 1
            if entry.holders == 0:
                del self._locks[key]

    @contextmanager
    def hold(self, path: Path) -> t.Iterator[None]:
        """Block until no other thread holds ``path``, then hold it."""
        key = path.absolute()
        entry = self._acquire_entry(key)
        try:
            with entry.lock:
                yield
        finally:
            self._release_entry(key, entry)

    def __len__(self) -> int:
        """Number of paths currently held or waited on."""
        with self._guard:
            return len(self._locks)
