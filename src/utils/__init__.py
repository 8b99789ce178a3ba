"""
Utilities package - Common utilities for the Simon game
"""

from .timer_scheduler import TimerScheduler

__all__ = [
    'TimerScheduler'
]
