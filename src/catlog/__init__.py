from __future__ import annotations

"""
catlog: per-category console/file logger.

Leveled, optionally colorized and timestamped output with an optional
fire-and-forget relay to a remote collector.

Usage:
    import catlog

    log = catlog.create("daemon", {"filename": "debug.log", "use_colors": False})
    log.info("listening on port %d", 8080)
"""

import logging
from typing import Any, Mapping, Optional

from catlog.core.dispatcher import SinkDispatcher
from catlog.core.events import EventEmitter
from catlog.core.logger import Logger
from catlog.core.registry import DATA_EVENT, GlobalRegistry, default_registry
from catlog.domain.colors import Color, Colors, TargetKind, palette_for
from catlog.domain.config import LoggerConfig, build_config
from catlog.domain.levels import LogLevel, LogLevels
from catlog.errors import CatlogError, ConfigurationError, SinkUnavailable
from catlog.infra.logging import DiagnosticsConfig, configure_diagnostics

__version__ = "1.0.0"

# Library diagnostics stay silent until the host application configures them
logging.getLogger(__name__).addHandler(logging.NullHandler())

events: EventEmitter = default_registry.events


def create(
        category: str,
        options: Optional[Mapping[str, Any]] = None,
        *,
        registry: Optional[GlobalRegistry] = None,
        dispatcher: Optional[SinkDispatcher] = None,
        **overrides: Any,
) -> Logger:
    """
    Create a logger for `category`.

    Args:
        category: Label rendered before each message.
        options: Partial configuration overlaid on the defaults.
        registry: Shared registry; defaults to the process-wide one.
        dispatcher: Sink dispatcher; defaults to the process streams,
            the local filesystem and the requests-based relay.
        **overrides: Keyword options applied after `options`.

    Returns:
        Logger: The configured logger.

    Raises:
        ConfigurationError: If an option is unknown or malformed.
    """
    config = build_config(options, **overrides)
    return Logger(
        category,
        config,
        registry or default_registry,
        dispatcher or SinkDispatcher(),
    )


def set_log_level(level: Any) -> None:
    """Set the process-wide threshold for every logger."""
    default_registry.set_global_level(level)


def set_logfile(filename: Optional[str]) -> None:
    """Set the process-wide fallback logfile."""
    default_registry.set_global_logfile(filename)


def force_markup_mode(force: bool = True) -> None:
    """Use markup decorations for loggers created from now on."""
    default_registry.force_markup_mode(force)


__all__ = [
    "CatlogError",
    "Color",
    "Colors",
    "ConfigurationError",
    "DATA_EVENT",
    "DiagnosticsConfig",
    "GlobalRegistry",
    "LogLevel",
    "LogLevels",
    "Logger",
    "LoggerConfig",
    "SinkDispatcher",
    "SinkUnavailable",
    "TargetKind",
    "configure_diagnostics",
    "create",
    "default_registry",
    "events",
    "force_markup_mode",
    "palette_for",
    "set_log_level",
    "set_logfile",
]
