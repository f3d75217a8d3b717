# ABOUTME: In-memory implementations package exports
# ABOUTME: Exports dependency-free implementations intended for tests and simulations

from .clock import ManualClock

__all__ = [
    "ManualClock",
]
