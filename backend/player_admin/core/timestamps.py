"""Epoch-millisecond conversions for the wire format.

Birthdays travel as milliseconds since the Unix epoch and are stored as naive
UTC datetimes.
"""

from datetime import datetime, timedelta

EPOCH = datetime(1970, 1, 1)
_ONE_MS = timedelta(milliseconds=1)


def to_epoch_ms(value: datetime) -> int:
    if value.tzinfo is not None:
        value = value.replace(tzinfo=None) - value.utcoffset()
    return (value - EPOCH) // _ONE_MS


# Range representable as a datetime (years 1..9999).
MIN_EPOCH_MS = to_epoch_ms(datetime.min)
MAX_EPOCH_MS = to_epoch_ms(datetime.max)


def from_epoch_ms(value: int) -> datetime:
    if not MIN_EPOCH_MS <= value <= MAX_EPOCH_MS:
        raise ValueError(f"timestamp {value} ms is outside the supported date range")
    return EPOCH + timedelta(milliseconds=value)


def clamp_epoch_ms(value: int) -> datetime:
    """Like ``from_epoch_ms`` but saturates at the earliest/latest datetime."""
    return from_epoch_ms(min(max(value, MIN_EPOCH_MS), MAX_EPOCH_MS))
