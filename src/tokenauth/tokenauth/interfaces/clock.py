# ABOUTME: Abstract clock interface supplying the current instant in milliseconds
# ABOUTME: Isolates wall-clock access so token expiry can be tested deterministically

from abc import ABC, abstractmethod


class AbstractClock(ABC):
    """
    Abstract source of the current time.

    The token manager reads time only through this interface. Implementations
    must be safe to call from many threads at once.
    """

    @abstractmethod
    def now_millis(self) -> int:
        """
        Returns the current instant as integer milliseconds since the Unix epoch (UTC).
        """
        pass
