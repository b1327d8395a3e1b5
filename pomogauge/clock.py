"""Wall-clock source and time formatting."""

import time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def convert_millis_to_time(millis: int) -> str:
    """Format a millisecond count as MM:SS."""
    seconds = max(millis, 0) // 1000
    minutes = seconds // 60
    return f"{minutes:02d}:{seconds % 60:02d}"
