from __future__ import annotations

"""
Diagnostics Orchestrator.

Idempotent setup of the ``catlog`` stdlib logger. Library modules log
through logging.getLogger(__name__); applications opt in to visible
diagnostics by calling configure_diagnostics() once.
"""

import logging
import sys
from typing import Optional, TextIO

from catlog.infra.logging.config import _LEVEL_MAP, LIBRARY_LOGGER_NAME, DiagnosticsConfig
from catlog.infra.logging.handlers import _remove_our_handlers, _tag_handler

_CONFIGURED_FLAG_ATTR: str = "_catlog_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_diagnostics(
        cfg: Optional[DiagnosticsConfig] = None,
        *,
        stream: Optional[TextIO] = None,
        force: bool = False,
) -> logging.Logger:
    """
    Attach a single stderr handler to the library logger.

    Repeated calls are no-ops unless `force` is set, in which case only the
    handlers previously added here are replaced.

    Args:
        cfg: Diagnostics settings. Defaults to DiagnosticsConfig().
        stream: Output stream for diagnostics. Defaults to sys.stderr.
        force: Re-apply configuration even if already configured.

    Returns:
        logging.Logger: The configured ``catlog`` logger.
    """
    cfg = cfg or DiagnosticsConfig()
    lib_logger = logging.getLogger(LIBRARY_LOGGER_NAME)

    if getattr(lib_logger, _CONFIGURED_FLAG_ATTR, False) and not force:
        return lib_logger

    level_int = _parse_level(cfg.level)
    lib_logger.setLevel(level_int)
    lib_logger.propagate = cfg.propagate

    _remove_our_handlers(lib_logger)

    sh = logging.StreamHandler(stream or sys.stderr)
    sh.setLevel(level_int)
    sh.setFormatter(logging.Formatter(cfg.fmt))
    _tag_handler(sh)
    lib_logger.addHandler(sh)

    setattr(lib_logger, _CONFIGURED_FLAG_ATTR, True)
    return lib_logger


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger inside the library hierarchy.

    Args:
        name: Dotted module name (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)
