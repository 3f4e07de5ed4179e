# --- filters.py ---

import logging
from typing import Iterable, List

from models import FileRecord
from utils import format_bytes

logger = logging.getLogger(__name__)


def has_match(record: FileRecord, substring: str) -> bool:
    """
    Case-sensitive literal containment check against the file name only.
    The empty string matches every name.
    """
    return substring in record.name


def find_matches(records: Iterable[FileRecord], substring: str) -> List[FileRecord]:
    """
    Filters records by name substring.
    Keeps the order of `records`; the input is never modified.
    """
    matches = []
    for record in records:
        if has_match(record, substring):
            logger.info("find: %s (%s)", record.name, format_bytes(record.size_bytes))
            matches.append(record)
    return matches


def format_match_report(matches: List[FileRecord]) -> List[str]:
    """
    Lines printed for a query: the count first, then one line per match.
    """
    lines = [f"LEN: {len(matches)}"]
    for index, record in enumerate(matches):
        lines.append(f"RESULT: {index} {record.path}")
    return lines
