"""SBV timestamp normalization."""

import re

_TIMESTAMP_RE = re.compile(r"^(\d+):(\d{2}):(\d{2}\.\d{3})$", re.ASCII)


def normalize_timestamp(value: str) -> str:
    """Normalize an SBV timestamp to the ``HH:MM:SS.mmm`` form used by WebVTT.

    SBV writes single-digit hours (``0:00:02.000``); the hour is left-padded
    to two digits. Anything that does not look like a timestamp is returned
    unchanged.

    Args:
        value: Trimmed timestamp string

    Returns:
        Normalized timestamp, or ``value`` itself when it does not match
    """
    match = _TIMESTAMP_RE.match(value)
    if not match:
        return value

    hours, minutes, seconds = match.groups()
    return f"{hours.zfill(2)}:{minutes}:{seconds}"
