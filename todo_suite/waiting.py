"""Bounded retry-with-timeout primitive shared by resolution and assertions."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class PollResult(Generic[T]):
    """Outcome of a poll_until() call."""

    satisfied: bool
    value: Optional[T]
    attempts: int
    error: Optional[BaseException] = None

    @property
    def observed(self):
        """Last value read, or the last transient error if the final probe raised."""
        if self.error is not None:
            return f"{type(self.error).__name__}: {self.error}"
        return self.value


def poll_until(
    probe: Callable[[], T],
    predicate: Callable[[T], bool],
    *,
    timeout: float,
    interval: float,
    transient: tuple[type[BaseException], ...] = (),
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> PollResult[T]:
    """
    Re-run ``probe`` until ``predicate`` accepts its result or time runs out.

    The probe always runs at least once, even with a zero timeout.
    Exceptions listed in ``transient`` are treated as "not yet" and kept
    as the observed value; anything else propagates immediately.

    Args:
        probe: Reads the current state.
        predicate: Decides whether the state is acceptable.
        timeout: Seconds to keep trying.
        interval: Seconds between attempts.
        transient: Exception types to retry on.
        clock: Monotonic time source.
        sleep: Sleep function.

    Returns:
        PollResult with the last value read.
    """
    deadline = clock() + timeout
    attempts = 0
    value: Optional[T] = None
    error: Optional[BaseException] = None

    while True:
        attempts += 1
        try:
            value = probe()
            error = None
        except transient as exc:
            error = exc
        else:
            if predicate(value):
                return PollResult(True, value, attempts)

        remaining = deadline - clock()
        if remaining <= 0:
            return PollResult(False, value, attempts, error)
        sleep(min(interval, remaining))
