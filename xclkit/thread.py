"""Thread handles that can be joined, joined with a timeout or detached."""

from __future__ import annotations

import threading
from typing import Callable


class ThreadHandle:
    """Handle to a started thread; it is closed by a join or a detach."""

    def __init__(self, thread: threading.Thread) -> None:
        self._thread = thread
        self._closed = False
        self._lock = threading.Lock()

    @property
    def ident(self) -> int:
        ident = self._thread.ident
        assert ident is not None
        return ident

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("thread handle is closed")

    def join(self) -> None:
        """Wait for the thread to finish and close the handle."""
        with self._lock:
            self._check_open()
            self._closed = True
        self._thread.join()

    def join_timeout(self, millis: int) -> bool:
        """Wait up to ``millis`` ms; True (and handle closed) if the thread finished."""
        if millis < 0:
            raise ValueError(f"timeout must not be negative: {millis}")
        self._check_open()
        self._thread.join(millis / 1000)
        if self._thread.is_alive():
            return False
        with self._lock:
            self._check_open()
            self._closed = True
        return True

    def detach(self) -> None:
        """Let the thread run on its own and close the handle."""
        with self._lock:
            self._check_open()
            self._closed = True

    def alive(self) -> bool:
        """Whether the thread is still running."""
        self._check_open()
        return self._thread.is_alive()


def create_thread(target: Callable[[], object]) -> ThreadHandle:
    """Start a thread that calls ``target`` and return its handle."""
    if not callable(target):
        raise TypeError(f"thread target must be callable, got {type(target).__name__}")
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return ThreadHandle(thread)


def current_thread_id() -> int:
    """Operating-system id of the calling thread."""
    return threading.get_native_id()