"""Helper utilities for the Posts API."""

import itertools
import os
import re
import threading
import time

POST_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

# Per-process random part and counter, as in 12-byte object ids
_PROCESS_UNIQUE = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))
_counter_lock = threading.Lock()


def new_post_id(timestamp: float | None = None) -> str:
    """Generate a time-ordered 24-character hex identifier.

    Layout: 4-byte big-endian seconds, 5-byte process unique value,
    3-byte counter. Ids created in a later second sort after earlier ones.

    Args:
        timestamp: Seconds since the epoch (defaults to now)

    Returns:
        Lowercase hex identifier
    """
    seconds = int(time.time() if timestamp is None else timestamp)
    with _counter_lock:
        count = next(_counter) & 0xFFFFFF
    raw = (
        (seconds & 0xFFFFFFFF).to_bytes(4, "big")
        + _PROCESS_UNIQUE
        + count.to_bytes(3, "big")
    )
    return raw.hex()


def is_valid_post_id(value: str) -> bool:
    """Check that a value is syntactically a post identifier."""
    return POST_ID_PATTERN.fullmatch(value) is not None


def truncate_text(text: str, max_length: int = 200) -> str:
    """Truncate text with ellipsis.

    Text of max_length characters or more keeps its first max_length
    characters followed by "...".

    Args:
        text: Text to truncate
        max_length: Number of characters kept

    Returns:
        Truncated text with ellipsis if needed
    """
    if len(text) < max_length:
        return text
    return text[:max_length] + "..."
