"""Entity identifier generation."""

import threading
import time

_lock = threading.Lock()
_last_timestamp = 0


def _monotonic_timestamp_ns() -> int:
    """Wall-clock nanoseconds, bumped by one when the clock does not advance."""
    global _last_timestamp

    with _lock:
        now = time.time_ns()
        if now <= _last_timestamp:
            now = _last_timestamp + 1
        _last_timestamp = now
        return now


def generate_entity_id(prefix: str, owner_id: str) -> str:
    """Build an identifier of the form ``<prefix>_<owner>_<timestamp_ns>``.

    Unique within the process and sortable by creation time for a given
    owner, which keeps ids readable in logs.

    Examples:
        >>> generate_entity_id("weight", "giada")
        'weight_giada_1760781234567890123'
    """
    return f"{prefix}_{owner_id}_{_monotonic_timestamp_ns()}"
