import threading
import time

from l2utils.orchannel import merge, signal_after


def test_signal_after_is_set_later():
    event = signal_after(0.2)
    assert not event.is_set()
    assert event.wait(2)


def test_signal_after_waits_at_least_delay():
    start = time.monotonic()
    assert signal_after(0.1).wait(2)
    assert time.monotonic() - start >= 0.09


def test_merge_waits_for_every_input():
    first, second = threading.Event(), threading.Event()
    merged = merge(first, second)
    first.set()
    assert not merged.wait(0.1)
    second.set()
    assert merged.wait(2)


def test_merge_of_nothing_is_set():
    assert merge().wait(1)


def test_merge_of_signals():
    start = time.monotonic()
    merged = merge(signal_after(0.05), signal_after(0.2))
    assert merged.wait(2)
    assert time.monotonic() - start >= 0.19