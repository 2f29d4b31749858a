from __future__ import annotations

"""
Severity Level Ordering.

Defines the closed set of log levels and the total order used by every
filtering decision. Ordering is positional; the string values are only
labels and are never compared lexically.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Severity levels, declared in increasing order of severity."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    NONE = "NONE"

    def __str__(self) -> str:
        return self.value


# Fixed ordinal sequence; NONE is the threshold that silences everything
LEVEL_ORDER: Tuple[LogLevel, ...] = (
    LogLevel.DEBUG,
    LogLevel.INFO,
    LogLevel.WARN,
    LogLevel.ERROR,
    LogLevel.NONE,
)

DEFAULT_LEVEL: LogLevel = LogLevel.DEBUG

# Public self-mapping of level names
LogLevels: Mapping[str, str] = MappingProxyType({lvl.value: lvl.value for lvl in LEVEL_ORDER})


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_level(value: Any) -> Optional[LogLevel]:
    """
    Coerce a level or a case-insensitive level name into a LogLevel.

    Args:
        value: A LogLevel member or its name in any letter case.

    Returns:
        Optional[LogLevel]: The matching level, or None if unrecognized.
    """
    if isinstance(value, LogLevel):
        return value
    if not isinstance(value, str):
        return None
    try:
        return LogLevel(value.strip().upper())
    except ValueError:
        return None


def rank(level: Any) -> int:
    """
    Return the ordinal position of a level in LEVEL_ORDER.

    Unrecognized values rank as -1.
    """
    parsed = parse_level(level)
    if parsed is None:
        return -1
    return LEVEL_ORDER.index(parsed)


def should_emit(candidate: Any, threshold: Any) -> bool:
    """
    Decide whether a record at `candidate` passes the `threshold`.

    Both sides fail closed: an unrecognized candidate or threshold yields
    False rather than an arbitrary comparison of -1 against a real rank.

    Args:
        candidate: Level of the record being written.
        threshold: Minimum level currently accepted.

    Returns:
        bool: True if the record should be written.
    """
    candidate_rank = rank(candidate)
    threshold_rank = rank(threshold)
    if candidate_rank < 0 or threshold_rank < 0:
        logger.debug(f"Level check rejected unknown level: {candidate!r} vs {threshold!r}")
        return False
    return candidate_rank >= threshold_rank
