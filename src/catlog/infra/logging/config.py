from __future__ import annotations

"""
Diagnostics Configuration Model.

Describes how the library's own diagnostics (sink failures, rejected
overrides) are surfaced through the standard logging module. These are
separate from the records catlog writes on behalf of its callers.
"""

import logging
from dataclasses import dataclass
from typing import Dict

# Root of the stdlib logger hierarchy used by every catlog module
LIBRARY_LOGGER_NAME: str = "catlog"

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class DiagnosticsConfig:
    """
    Immutable specification for library diagnostics output.

    Attributes:
        level: Minimum severity of diagnostics to emit.
        fmt: Structural format for diagnostic lines.
        propagate: Forward diagnostics to the application's root logger.
    """
    level: str = "WARNING"
    fmt: str = "catlog | %(levelname)s | %(name)s | %(message)s"
    propagate: bool = False
