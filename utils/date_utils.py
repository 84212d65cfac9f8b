"""
RecipeGen Date Utilities
UTC timestamps and epoch-millisecond conversions used by the sync protocol
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Representable range of epoch milliseconds (0001-01-01 to 9999-12-31T23:59:59.999)
MIN_EPOCH_MS = -62135596800000
MAX_EPOCH_MS = 253402300799999


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to aware UTC

    Naive values are assumed to already be UTC (SQLite drops tzinfo on the way back).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_epoch_ms(value: datetime) -> int:
    """Convert a datetime to milliseconds since the Unix epoch"""
    return (as_utc(value) - EPOCH) // timedelta(milliseconds=1)


def from_epoch_ms(ms: Optional[int]) -> datetime:
    """Convert milliseconds since the Unix epoch to an aware UTC datetime; None means the epoch"""
    return EPOCH + timedelta(milliseconds=ms or 0)


def now_ms() -> int:
    return to_epoch_ms(utcnow())


def isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc(value).isoformat()
