"""Invocation deadline shared by every blocking call in one run.

Contains:
- parse_duration: Parse "40s", "1m30s" or bare seconds into a float
- Deadline: A fixed expiry point with remaining-time queries
"""

import re
import time
from typing import Any, Callable, Optional

_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_DURATION = re.compile(r"(?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|µs|ms|s|m|h))+")


def parse_duration(value: Any) -> Optional[float]:
    """Parse a duration into seconds.

    Accepts "40s", "1m30s", "500ms", "1.5h", a bare integer string (seconds)
    or a number.

    Args:
        value: The raw value.

    Returns:
        Positive seconds, or None if the value is missing, invalid or <= 0.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if value > 0 else None

    text = str(value).strip()
    if not text:
        return None

    if text.isdigit():
        seconds = float(int(text))
    elif _DURATION.fullmatch(text):
        seconds = sum(
            float(amount) * _DURATION_UNITS[unit]
            for amount, unit in _DURATION_PART.findall(text)
        )
    else:
        return None

    return seconds if seconds > 0 else None


class Deadline:
    """A fixed point in time after which blocking work must stop.

    Args:
        timeout: Seconds from now until expiry. ``None`` means no deadline.
        clock: Monotonic clock, injectable for tests.
    """

    def __init__(self, timeout: Optional[float], clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.timeout = timeout
        self._expires_at = None if timeout is None else clock() + timeout

    def remaining(self) -> Optional[float]:
        """Seconds left (never negative), or None when unbounded."""
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - self._clock())

    def expired(self) -> bool:
        """Return True once the deadline has passed."""
        if self._expires_at is None:
            return False
        return self._clock() >= self._expires_at
