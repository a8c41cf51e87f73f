"""Combining several done signals into one."""

from __future__ import annotations

import argparse
import threading
import time


def signal_after(seconds: float) -> threading.Event:
    """Return an event that becomes set after ``seconds``."""
    event = threading.Event()
    timer = threading.Timer(seconds, event.set)
    timer.daemon = True
    timer.start()
    return event


def merge(*args: threading.Event) -> threading.Event:
    """Return an event that becomes set once every given event is set."""
    merged = threading.Event()

    def wait_all() -> None:
        for event in args:
            event.wait()
        merged.set()

    threading.Thread(target=wait_all, daemon=True).start()
    return merged


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(prog="orchannel", description="Wait on merged signals.").parse_args(argv)
    print("start")
    start = time.monotonic()
    merge(
        signal_after(1),
        signal_after(5),
        signal_after(7),
        signal_after(9),
    ).wait()
    print(f"done after {time.monotonic() - start:.3f}s", end="")
    return 0