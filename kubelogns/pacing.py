"""
Upload pacing.

Upload endpoints such as 0x0.st rate limit anonymous clients, so the router
pauses for a fixed interval after every upload attempt. The sleep function is
injectable so the pacing can be observed without waiting.
"""

import time
from typing import Callable

from .constants import UPLOAD_PACING_SECONDS
from .log import log


class RateLimiter:
    """
    Fixed pause after each paced operation.

    Attributes:
        interval: Seconds to pause after each operation
        paused: Total seconds paused so far

    Example:
        ```python
        limiter = RateLimiter(interval=1.0)
        upload(...)
        limiter.pause()
        ```
    """

    def __init__(self, interval: float = UPLOAD_PACING_SECONDS, sleep: Callable[[float], None] = time.sleep):
        if interval < 0:
            raise ValueError(f"Pacing interval cannot be negative, got: {interval}")
        self.interval = interval
        self.paused = 0.0
        self._sleep = sleep

    def pause(self) -> None:
        if self.interval <= 0:
            return
        log.debug(f"[pacing] sleeping {self.interval}s")
        self._sleep(self.interval)
        self.paused += self.interval
