"""Deadline-bounded polling."""

import time
from typing import Callable, Optional

from .errors import TimeoutExceeded


def wait_until(
    predicate: Callable[[], bool],
    timeout: float,
    interval: float = 1.0,
    on_tick: Optional[Callable[[], None]] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Call predicate once per interval until it returns True.

    The deadline is checked before every predicate call, so a condition
    that only becomes true at or after the deadline counts as a timeout.

    Args:
        predicate: Completion check
        timeout: Overall bound in seconds
        interval: Pause between checks in seconds
        on_tick: Called after each unsuccessful check, before sleeping
        clock: Monotonic time source
        sleep: Blocking wait function

    Raises:
        TimeoutExceeded: predicate did not succeed before the deadline
    """
    start = clock()
    while True:
        if clock() - start >= timeout:
            raise TimeoutExceeded(f"Timed out after {timeout}s", timeout=timeout)
        if predicate():
            return
        if on_tick is not None:
            on_tick()
        sleep(interval)
