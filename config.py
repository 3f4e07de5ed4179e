# --- config.py ---

import logging
import os
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def env_value(name: str, default: T, convert: Callable[[str], T]) -> T:
    """
    Reads `name` from the environment. A value that does not convert is
    reported and replaced by `default`.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return convert(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s, using %r", name, raw, convert.__name__, default)
        return default


class Config:
    # 1. Traversal limits
    MAX_DEPTH: int = env_value("DEPTH_SEARCH_MAX_DEPTH", 2, int)
    DEPTH_STEP: int = env_value("DEPTH_SEARCH_DEPTH_STEP", 2, int)

    # 2. Time budget for one walk, in seconds
    TIMEOUT: float = env_value("DEPTH_SEARCH_TIMEOUT", 3.0, float)

    # 3. Default query used by the CLI
    PATTERN: str = os.getenv("DEPTH_SEARCH_PATTERN", "js")


settings = Config()
