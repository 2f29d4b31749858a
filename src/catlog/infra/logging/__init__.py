from __future__ import annotations

from .config import LIBRARY_LOGGER_NAME, DiagnosticsConfig
from .core import configure_diagnostics, get_logger

__all__ = [
    "DiagnosticsConfig",
    "LIBRARY_LOGGER_NAME",
    "configure_diagnostics",
    "get_logger",
]
