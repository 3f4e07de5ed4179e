# --- scanner.py ---

import logging
import os
import stat as stat_module
import threading
import time
from typing import Callable, List, Optional

from config import settings
from errors import (
    DirectoryListingError,
    EmptyPathError,
    MetadataReadError,
    NotADirectoryPathError,
    SearchError,
    StatError,
)
from models import FileRecord, SearchStatus, WalkStats
from utils import AtomicCounter, relative_depth
import filters

logger = logging.getLogger(__name__)


class Search:
    """
    Depth-bounded recursive file search rooted at a single directory.

    The walk runs on the calling thread. Another thread may call
    increase_depth() or cancel() while it is running; both are observed
    the next time the walk is about to enter a directory.
    """

    def __init__(self,
                 root_path: str,
                 max_depth: Optional[int] = None,
                 timeout: Optional[float] = None,
                 depth_step: Optional[int] = None,
                 on_progress: Optional[Callable[[str], None]] = None):

        if root_path == "":
            raise EmptyPathError()

        try:
            root_stat = os.stat(root_path)
        except (OSError, ValueError) as e:
            # ValueError: the OS refuses the path itself (embedded NUL)
            raise StatError(root_path, e) from e

        if not stat_module.S_ISDIR(root_stat.st_mode):
            raise NotADirectoryPathError(root_path)

        self._base_path = os.path.abspath(root_path)
        self._max_depth = AtomicCounter(settings.MAX_DEPTH if max_depth is None else max_depth)
        self.depth_step = settings.DEPTH_STEP if depth_step is None else depth_step
        self.timeout = settings.TIMEOUT if timeout is None else timeout

        # Called with every directory the walk enters
        self.on_progress = on_progress

        self.results: List[FileRecord] = []
        self.stats = WalkStats()
        self.status = SearchStatus.NOT_STARTED

        # Thread control
        self._running_event = threading.Event()
        self._running_event.set()

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def max_depth(self) -> int:
        return self._max_depth.value

    def start(self) -> WalkStats:
        """
        Walks the tree until it is exhausted, the time budget runs out or
        cancel() is called. Results from a previous run are discarded.

        Raises DirectoryListingError if the base directory cannot be listed
        and MetadataReadError if any file's metadata cannot be read.
        """
        self.results = []
        self.stats = WalkStats()
        self._running_event.set()
        self.status = SearchStatus.WALKING

        started = time.monotonic()
        deadline = started + self.timeout

        try:
            self._read_dir(self._base_path, deadline)
        except SearchError:
            self.status = SearchStatus.ABORTED
            raise
        finally:
            self.stats.elapsed_seconds = time.monotonic() - started

        self.status = SearchStatus.COMPLETED
        logger.debug(
            "Walk of %s finished in %.3fs: %d files, %d dirs visited, %d dirs beyond depth %d",
            self._base_path, self.stats.elapsed_seconds, self.stats.files_found,
            self.stats.dirs_visited, self.stats.dirs_skipped, self.max_depth
        )
        return self.stats

    def _read_dir(self, path: str, deadline: float):
        """Helper function to perform the recursive directory traversal."""

        # --- Step 1: stop quietly when time is up or a cancel arrived ---
        if not self._running_event.is_set():
            self.stats.cancelled = True
            return

        if time.monotonic() >= deadline:
            if not self.stats.deadline_hit:
                logger.info("Time budget of %.1fs used up, stopping walk at %s", self.timeout, path)
            self.stats.deadline_hit = True
            return

        # --- Step 2: depth limit, read fresh for every directory ---
        if not self.can_search_deeper(path):
            self.stats.dirs_skipped += 1
            return

        if self.on_progress:
            self.on_progress(path)

        # The whole listing is read before any entry is handled
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            raise DirectoryListingError(path, e) from e

        self.stats.dirs_visited += 1

        # --- Step 3: recurse into directories, record everything else ---
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise MetadataReadError(entry.path, e) from e

            if is_dir:
                try:
                    self._read_dir(entry.path, deadline)
                except DirectoryListingError as e:
                    logger.warning("%s", e)
                    self.stats.errors.append(str(e))
                continue

            try:
                entry_stat = entry.stat(follow_symlinks=False)
            except OSError as e:
                raise MetadataReadError(entry.path, e) from e

            self.add_file(entry.name, entry_stat, path)

    def can_search_deeper(self, path: str) -> bool:
        """
        True if the walk may list `path`. The base directory is always
        listed; any other directory only when the files inside it stay
        within max_depth components of the base.
        """
        depth = relative_depth(path, self._base_path)
        if depth < 0:
            return False
        if depth == 0:
            return True
        return depth + 1 <= self.max_depth

    def add_file(self, name: str, file_stat: os.stat_result, parent_path: str) -> FileRecord:
        """Record a discovered file."""
        record = FileRecord(
            name=name,
            path=os.path.join(parent_path, name),
            stat=file_stat
        )
        self.results.append(record)
        self.stats.files_found += 1
        return record

    def increase_depth(self) -> int:
        """Raises the depth limit by depth_step and returns the new limit."""
        new_depth = self._max_depth.add(self.depth_step)
        logger.info("Max search depth was increased by %d (now %d)", self.depth_step, new_depth)
        return new_depth

    def cancel(self):
        """Signals the walk to stop before entering another directory."""
        self._running_event.clear()

    def list(self) -> List[FileRecord]:
        return self.results

    def has_match(self, record: FileRecord, substring: str) -> bool:
        return filters.has_match(record, substring)

    def find(self, substring: str) -> List[FileRecord]:
        """Records whose name contains `substring`, in discovery order."""
        return filters.find_matches(self.results, substring)
