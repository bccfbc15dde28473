# src/gridmaze/timing.py
"""
Pacing helpers for stepping generation at a watchable rate. Pacing only
delays between events; it never reorders or alters them.
"""

import time
from typing import Callable, Iterable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")

Sleep = Callable[[float], None]


def paced(
    events: Iterable[T],
    step_delay: float,
    initial_delay: float = 0.0,
    sleep: Sleep = time.sleep,
) -> Iterator[T]:
    """
    Yield each event, sleeping `initial_delay` before the first one is pulled
    and `step_delay` after each one is handed out.
    """
    if initial_delay > 0:
        sleep(initial_delay)
    for ev in events:
        yield ev
        if step_delay > 0:
            sleep(step_delay)


def make_recording_sleep() -> Tuple[Sleep, List[float]]:
    """
    Deterministic sleep for tests: records requested durations instead of
    blocking. Returns (sleep, calls).
    """
    calls: List[float] = []

    def sleep(seconds: float) -> None:
        calls.append(seconds)

    return sleep, calls
