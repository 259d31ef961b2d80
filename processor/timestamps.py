"""Timestamp unit normalization for records of unknown origin."""

MS_PER_SECOND = 1000
_SECONDS_DIGITS = 10


def normalize_timestamp(timestamp: int) -> int:
    """
    Return ``timestamp`` in milliseconds.

    A value with exactly 10 decimal digits (sign ignored) is taken to be in
    seconds and scaled by 1000; anything else is returned unchanged. This is a
    heuristic: millisecond values before 2001-09-09 also have 10 or fewer
    digits and are misread as seconds when they have exactly 10.
    """
    timestamp = int(timestamp)
    if len(str(abs(timestamp))) == _SECONDS_DIGITS:
        return timestamp * MS_PER_SECOND
    return timestamp


def to_seconds(timestamp_ms: int) -> int:
    """Floor-divide a millisecond timestamp down to seconds."""
    return int(timestamp_ms) // MS_PER_SECOND
