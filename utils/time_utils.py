"""
utils/time_utils.py

Purpose: Timestamp helpers

- ISO-8601 UTC timestamps for log rows
- Millisecond epoch values for fallback identifiers
"""

import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Returns the current time as an aware UTC datetime.
    """
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """
    Returns the current UTC time formatted as ISO-8601.
    """
    return utc_now().isoformat()


def epoch_millis() -> int:
    return int(time.time() * 1000)
