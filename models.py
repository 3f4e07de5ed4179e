# --- models.py ---

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class SearchStatus(str, Enum):
    NOT_STARTED = "not_started"
    WALKING = "walking"
    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class FileRecord:
    """
    A single file discovered during the walk.
    The stat result is kept exactly as the OS returned it.
    """
    name: str
    path: str  # Absolute path (parent directory joined with name)
    stat: os.stat_result

    @property
    def size_bytes(self) -> int:
        return self.stat.st_size

    @property
    def mtime(self) -> float:
        return self.stat.st_mtime

    @property
    def mode(self) -> int:
        return self.stat.st_mode

    def __hash__(self):
        return hash(self.path)

    def __eq__(self, other):
        if not isinstance(other, FileRecord):
            return False
        return self.path == other.path


@dataclass
class WalkStats:
    """
    Bookkeeping for a single start() call.
    """
    dirs_visited: int = 0
    dirs_skipped: int = 0  # Refused by the depth limit
    files_found: int = 0

    # Set when the walk stopped early without an error
    deadline_hit: bool = False
    cancelled: bool = False

    elapsed_seconds: float = 0.0

    # Nested listing failures that were logged and skipped
    errors: List[str] = field(default_factory=list)

    @property
    def stopped_early(self) -> bool:
        return self.deadline_hit or self.cancelled
