"""Clocks, sleeping, exit handlers and page-sized memory."""

from __future__ import annotations

import atexit
import mmap
import threading
import time
from typing import Callable, List, NamedTuple

SDK_STD = 202501
SDK_VERSION = "2.2.2"
MAX_EXIT_HANDLER = 256


class TimeVal(NamedTuple):
    """Seconds and microseconds since the Unix epoch."""

    tv_sec: int
    tv_usec: int


class ExitHandlerLimitError(RuntimeError):
    """Raised when more than ``MAX_EXIT_HANDLER`` exit handlers are posted."""


_exit_handlers: List[Callable[[], object]] = []
_exit_lock = threading.Lock()


def current_millis() -> int:
    """Wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def nanos() -> int:
    """Wall-clock time in nanoseconds since the Unix epoch."""
    return time.time_ns()


def msleep(millis: int) -> None:
    """Suspend the calling thread for ``millis`` milliseconds."""
    if millis < 0:
        raise ValueError(f"sleep time must not be negative: {millis}")
    time.sleep(millis / 1000)


def gettimeofday() -> TimeVal:
    """Current time split into whole seconds and microseconds."""
    us = time.time_ns() // 1000
    sec, usec = divmod(us, 1_000_000)
    return TimeVal(sec, usec)


def post_exit(func: Callable[[], object]) -> None:
    """Register ``func`` to run when the process exits, after those posted earlier."""
    if not callable(func):
        raise TypeError(f"exit handler must be callable, got {type(func).__name__}")
    with _exit_lock:
        if len(_exit_handlers) >= MAX_EXIT_HANDLER:
            raise ExitHandlerLimitError(
                f"at most {MAX_EXIT_HANDLER} exit handlers may be posted"
            )
        _exit_handlers.append(func)


def run_exit_handlers() -> None:
    """Run every posted exit handler in posting order and forget them."""
    with _exit_lock:
        handlers = list(_exit_handlers)
        _exit_handlers.clear()
    for handler in handlers:
        handler()


atexit.register(run_exit_handlers)


def page_size() -> int:
    """Size in bytes of a memory page on this system."""
    return mmap.PAGESIZE


def alloc_pages(pages: int) -> mmap.mmap:
    """Map ``pages`` zeroed, readable and writable anonymous pages.

    Close the returned map (or use it as a context manager) to free them.
    """
    if pages <= 0:
        raise ValueError(f"page count must be positive: {pages}")
    return mmap.mmap(-1, pages * page_size())