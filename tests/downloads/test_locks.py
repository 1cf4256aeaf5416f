"""Tests for per-path advisory locks."""

import threading
import time
from pathlib import Path

from transcription_assets.downloads.locks import PathLockRegistry


def test_same_path_shares_lock(tmp_path: Path) -> None:
    registry = PathLockRegistry()

    with registry.hold(tmp_path / "a"):
        with registry.hold(tmp_path / "a"):
            assert len(registry) == 1


def test_distinct_paths_get_distinct_locks(tmp_path: Path) -> None:
    registry = PathLockRegistry()

    with registry.hold(tmp_path / "a"):
        with registry.hold(tmp_path / "b"):
            assert len(registry) == 2


def test_entries_dropped_after_release(tmp_path: Path) -> None:
    registry = PathLockRegistry()

    for name in ("a", "b", "c"):
        with registry.hold(tmp_path / name):
            pass

    assert len(registry) == 0


def test_same_thread_may_hold_twice(tmp_path: Path) -> None:
    """Reentrant holds from one thread do not block."""
    registry = PathLockRegistry()
    path = tmp_path / "audio.m4a"
    done = threading.Event()

    def hold_twice() -> None:
        with registry.hold(path):
            with registry.hold(path):
                done.set()

    thread = threading.Thread(target=hold_twice)
    thread.start()
    thread.join(timeout=5)

    assert done.is_set()
    assert len(registry) == 0


def test_same_path_is_serialized(tmp_path: Path) -> None:
    """A second holder waits until the first releases."""
    registry = PathLockRegistry()
    path = tmp_path / "audio.m4a"
    order: list[str] = []
    first_holding = threading.Event()

    def first() -> None:
        with registry.hold(path):
            first_holding.set()
            time.sleep(0.05)
            order.append("first released")

    def second() -> None:
        first_holding.wait()
        with registry.hold(path):
            order.append("second acquired")

    threads = [threading.Thread(target=first), threading.Thread(target=second)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert order == ["first released", "second acquired"]


def test_lock_released_on_error(tmp_path: Path) -> None:
    registry = PathLockRegistry()
    path = tmp_path / "audio.m4a"

    try:
        with registry.hold(path):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    acquired = threading.Event()

    def acquire() -> None:
        with registry.hold(path):
            acquired.set()

    thread = threading.Thread(target=acquire)
    thread.start()
    thread.join(timeout=5)

    assert acquired.is_set()


def test_waiting_holder_keeps_entry(tmp_path: Path) -> None:
    """An entry survives while another thread waits for it."""
    registry = PathLockRegistry()
    path = tmp_path / "audio.m4a"
    waiting = threading.Event()
    acquired = threading.Event()

    def wait_for_lock() -> None:
        waiting.set()
        with registry.hold(path):
            acquired.set()

    with registry.hold(path):
        thread = threading.Thread(target=wait_for_lock)
        thread.start()
        waiting.wait(timeout=5)
        time.sleep(0.05)
        assert len(registry) == 1
        assert not acquired.is_set()

    thread.join(timeout=5)
    assert acquired.is_set()
    assert len(registry) == 0
