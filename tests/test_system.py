import time

import pytest

from xclkit import system


def test_current_millis_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = system.current_millis()
    after = int(time.time() * 1000)
    assert before - 5 <= value <= after + 5


def test_nanos_consistent_with_millis():
    ms = system.current_millis()
    ns = system.nanos()
    assert abs(ns // 1_000_000 - ms) < 1000


def test_msleep_waits_at_least_requested_time():
    start = system.nanos()
    system.msleep(20)
    elapsed_ms = (system.nanos() - start) / 1_000_000
    assert elapsed_ms >= 15


def test_msleep_rejects_negative():
    with pytest.raises(ValueError):
        system.msleep(-1)


def test_gettimeofday_fields():
    tv = system.gettimeofday()
    assert 0 <= tv.tv_usec < 1_000_000
    assert abs(tv.tv_sec - int(time.time())) <= 1
    assert tv == (tv.tv_sec, tv.tv_usec)


def test_exit_handlers_run_in_order_and_clear():
    system.run_exit_handlers()
    calls = []
    system.post_exit(lambda: calls.append("a"))
    system.post_exit(lambda: calls.append("b"))
    system.run_exit_handlers()
    assert calls == ["a", "b"]
    system.run_exit_handlers()
    assert calls == ["a", "b"]


def test_post_exit_rejects_non_callable():
    with pytest.raises(TypeError):
        system.post_exit(None)


def test_post_exit_limit():
    system.run_exit_handlers()
    calls = []
    try:
        for _ in range(system.MAX_EXIT_HANDLER):
            system.post_exit(lambda: calls.append(1))
        with pytest.raises(system.ExitHandlerLimitError):
            system.post_exit(lambda: None)
    finally:
        system.run_exit_handlers()
    assert len(calls) == system.MAX_EXIT_HANDLER


def test_page_size_is_power_of_two():
    size = system.page_size()
    assert size > 0
    assert size & (size - 1) == 0


def test_alloc_pages_is_zeroed_and_writable():
    with system.alloc_pages(2) as mem:
        assert len(mem) == 2 * system.page_size()
        assert mem[:16] == bytes(16)
        mem[0:5] = b"hello"
        assert mem[0:5] == b"hello"


def test_alloc_pages_rejects_zero():
    with pytest.raises(ValueError):
        system.alloc_pages(0)