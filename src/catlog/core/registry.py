from __future__ import annotations

"""
Process-Wide Logger Registry.

Holds the configuration shared by every logger: the global threshold,
the global logfile, the default output target and the ``data`` event
stream. Loggers receive the registry by reference and consult it on every
call, so changes apply to all subsequent calls but never retroactively.
"""

import logging
import os
from typing import Any, Optional, Union

from catlog.core.events import EventEmitter
from catlog.domain.colors import TargetKind
from catlog.domain.levels import DEFAULT_LEVEL, LogLevel, parse_level
from catlog.infra.env import LEVEL_OVERRIDE_VAR, EnvironmentReader

logger = logging.getLogger(__name__)

DATA_EVENT = "data"


class GlobalRegistry:
    """
    Shared mutable configuration context.

    Args:
        env: Environment seam used for the ``LOG`` override.
        events: Event stream; a fresh emitter is created when omitted.
    """

    def __init__(
            self,
            env: Optional[EnvironmentReader] = None,
            events: Optional[EventEmitter] = None,
    ) -> None:
        self.level: LogLevel = DEFAULT_LEVEL
        self.logfile: Optional[str] = None
        self.target: TargetKind = TargetKind.TERMINAL
        self.env = env or EnvironmentReader()
        self.events = events or EventEmitter()
        self._rejected_override: Optional[str] = None

    def set_global_level(self, level: Any) -> None:
        """
        Set the threshold applied by every logger without an env override.

        Raises:
            ValueError: If `level` is not one of the five level names.
        """
        parsed = parse_level(level)
        if parsed is None:
            raise ValueError(f"Unknown log level: {level!r}")
        self.level = parsed

    def set_global_logfile(self, path: Optional[Union[str, "os.PathLike[str]"]]) -> None:
        """Set the fallback logfile for loggers without their own filename."""
        self.logfile = os.fspath(path) if path else None

    def force_markup_mode(self, force: bool = True) -> None:
        """Select the markup target for loggers created from now on."""
        self.target = TargetKind.DISPLAY_MARKUP if force else TargetKind.TERMINAL

    def effective_threshold(self) -> Union[LogLevel, str]:
        """
        Resolve the threshold for the current call.

        The ``LOG`` environment variable wins over the global level and is
        matched case-insensitively. An unrecognized override is returned
        as-is so that the level check fails closed.
        """
        override = self.env.read(LEVEL_OVERRIDE_VAR)
        if override is None:
            return self.level or DEFAULT_LEVEL

        parsed = parse_level(override)
        if parsed is None:
            if override != self._rejected_override:
                logger.warning(f"Suppressing records: {LEVEL_OVERRIDE_VAR}={override!r} is not a known level.")
                self._rejected_override = override
            return override
        return parsed

    def publish(self, category: str, level: LogLevel, message: str) -> None:
        """Notify ``data`` subscribers of an accepted record."""
        self.events.emit(DATA_EVENT, category, level.value, message)

    def reset(self) -> None:
        """Restore defaults and drop every subscriber."""
        self.level = DEFAULT_LEVEL
        self.logfile = None
        self.target = TargetKind.TERMINAL
        self._rejected_override = None
        self.events.remove_all_listeners()


default_registry = GlobalRegistry()
