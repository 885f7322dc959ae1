"""
Wall-clock access for default timestamps.

Every timestamp the engine stamps (``lastContactDate``, ``scheduledFor``)
comes from a ``Clock`` so tests can pass a frozen one.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
