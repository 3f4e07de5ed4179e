# --- utils.py ---

import threading
from pathlib import PurePath


def format_bytes(size_bytes: int) -> str:
    """
Signature: `format_bytes(size_bytes: int) -> str`

Converts a size in bytes to a human-readable string (KB, MB, GB, TB).
Uses decimal (1000) instead of binary (1024) for storage representation.
"""
    if size_bytes < 0:
        return "0 B"

    units = ['B', 'KB', 'MB', 'GB', 'TB', 'PB']
    power = 1000.0  # Use decimal (base 1000)

    i = 0
    while size_bytes >= power and i < len(units) - 1:
        size_bytes /= power
        i += 1

    return f"{size_bytes:.2f} {units[i]}"


def relative_depth(path: str, base_path: str) -> int:
    """
Signature: `relative_depth(path: str, base_path: str) -> int`

Counts the path components of `path` below `base_path`.
Returns 0 for the base itself and -1 if `path` is not inside `base_path`.
Works on parsed components, so the separator style never matters.
"""
    try:
        rel = PurePath(path).relative_to(PurePath(base_path))
    except ValueError:
        return -1
    return len(rel.parts)


class AtomicCounter:
    """
    Integer guarded by a lock. One thread may bump it while another reads it.
    """

    def __init__(self, value: int = 0):
        self._value = value
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def add(self, delta: int) -> int:
        """Adds `delta` and returns the new value."""
        with self._lock:
            self._value += delta
            return self._value
