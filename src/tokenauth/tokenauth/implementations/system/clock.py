# ABOUTME: Wall-clock implementation of AbstractClock
# ABOUTME: Returns current UTC time in integer milliseconds since the Unix epoch

import time

from tokenauth.interfaces.clock import AbstractClock


class SystemClock(AbstractClock):
    """Production clock backed by the operating system's wall clock."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"
