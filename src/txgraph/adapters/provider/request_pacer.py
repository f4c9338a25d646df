import time
from typing import Callable


class RequestPacer:
    """Spaces consecutive requests at least 1/requests_per_sec apart. 0 disables pacing."""

    def __init__(
        self,
        requests_per_sec: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if requests_per_sec < 0:
            raise ValueError("requests_per_sec must be >= 0")
        self._min_interval = 1.0 / requests_per_sec if requests_per_sec else 0.0
        self._clock = clock
        self._sleep = sleep
        self._last_ts = None

    def wait(self) -> None:
        if not self._min_interval:
            return
        if self._last_ts is not None:
            remaining = self._min_interval - (self._clock() - self._last_ts)
            if remaining > 0:
                self._sleep(remaining)
        self._last_ts = self._clock()
