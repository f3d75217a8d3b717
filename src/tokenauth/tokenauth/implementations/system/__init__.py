# ABOUTME: System implementations package exports
# ABOUTME: Exports implementations backed by operating system facilities

from .clock import SystemClock

__all__ = [
    "SystemClock",
]
