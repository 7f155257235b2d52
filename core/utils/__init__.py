"""
Utility modules for core functionality.

Modules:
- decorators: Utility decorators (timer, log_timing)
"""

from .decorators import log_timing, timer

__all__ = [
    "timer",
    "log_timing",
]
