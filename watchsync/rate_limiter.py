"""
Minimum-interval request pacing.
"""

from __future__ import annotations

import time
from collections.abc import Callable


class RequestPacer:
    """
    Enforces a minimum interval between consecutive outbound requests.
    """

    def __init__(
        self,
        *,
        min_interval_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._min_interval_seconds = max(0.0, min_interval_seconds)
        self._clock = clock
        self._sleep = sleep
        self._last_request: float | None = None

    @property
    def min_interval_seconds(self) -> float:
        return self._min_interval_seconds

    def wait(self) -> float:
        """
        Sleep as needed before the next request and return the seconds slept.
        """

        waited = 0.0
        if self._last_request is not None and self._min_interval_seconds > 0:
            elapsed = self._clock() - self._last_request
            remaining = self._min_interval_seconds - elapsed
            if remaining > 0:
                self._sleep(remaining)
                waited = remaining
        self._last_request = self._clock()
        return waited
