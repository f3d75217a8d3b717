# ABOUTME: In-memory implementation of AbstractClock with manually controlled time
# ABOUTME: Lets tests and simulations freeze, set and advance the current instant

import threading

from tokenauth.interfaces.clock import AbstractClock


class ManualClock(AbstractClock):
    """
    In-memory clock whose time only moves when told to.

    Designed for testing token expiry without sleeping. Time never goes
    backwards through `advance`; `set` may be used to jump anywhere.

    Features:
    - Deterministic now_millis()
    - Relative (advance) and absolute (set) updates
    - Thread-safe reads and writes
    """

    def __init__(self, start_millis: int = 0):
        """
        Initialize the manual clock.

        Args:
            start_millis: Initial instant in milliseconds since the Unix epoch.
        """
        self._now = int(start_millis)
        self._lock = threading.Lock()

    def now_millis(self) -> int:
        with self._lock:
            return self._now

    def advance(self, millis: int = 0, *, seconds: float = 0) -> int:
        """
        Move the clock forward.

        Args:
            millis: Milliseconds to add.
            seconds: Seconds to add, converted to whole milliseconds.

        Returns:
            The new current instant.

        Raises:
            ValueError: If the total step is negative.
        """
        step = int(millis) + int(seconds * 1000)
        if step < 0:
            raise ValueError(f"Cannot advance clock by a negative step: {step}ms")
        with self._lock:
            self._now += step
            return self._now

    def set(self, millis: int) -> None:
        """Jump to an absolute instant."""
        with self._lock:
            self._now = int(millis)

    def __repr__(self) -> str:
        return f"ManualClock(now_millis={self.now_millis()})"
