from __future__ import annotations

"""
Category Logger.

Leveled entry points for a single category. Every call resolves the
effective threshold from the registry, and only accepted calls are
interpolated, formatted and dispatched; filtered calls have no side
effects at all.
"""

from types import TracebackType
from typing import Any, Optional, Type

from catlog.core.dispatcher import FileSlot, SinkDispatcher
from catlog.core.formatter import MessageFormatter
from catlog.core.interpolation import format_message
from catlog.core.registry import GlobalRegistry
from catlog.domain.colors import TargetKind
from catlog.domain.config import LoggerConfig
from catlog.domain.levels import LogLevel, should_emit


class Logger:
    """
    Logger bound to a category and an immutable configuration.

    The output target is fixed at construction: the configured target if
    any, otherwise the registry's target at that moment.

    Args:
        category: Free-form label rendered before each message.
        config: Resolved configuration.
        registry: Shared registry consulted on every call.
        dispatcher: Sink dispatcher.
        formatter: Message formatter.
    """

    def __init__(
            self,
            category: str,
            config: LoggerConfig,
            registry: GlobalRegistry,
            dispatcher: SinkDispatcher,
            formatter: Optional[MessageFormatter] = None,
    ) -> None:
        self.category = category
        self.config = config
        self.registry = registry
        self.target: TargetKind = config.target or registry.target
        self.file_slot = FileSlot()
        self._dispatcher = dispatcher
        self._formatter = formatter or MessageFormatter()

    def __repr__(self) -> str:
        return f"Logger(category={self.category!r}, target={self.target.value})"

    # -------------------------------------------------------------------------
    # Leveled API
    # -------------------------------------------------------------------------

    def debug(self, fmt: Any, *args: Any) -> None:
        self._log(LogLevel.DEBUG, fmt, args)

    def log(self, fmt: Any, *args: Any) -> None:
        """Alias of debug()."""
        self._log(LogLevel.DEBUG, fmt, args)

    def info(self, fmt: Any, *args: Any) -> None:
        self._log(LogLevel.INFO, fmt, args)

    def warn(self, fmt: Any, *args: Any) -> None:
        self._log(LogLevel.WARN, fmt, args)

    def error(self, fmt: Any, *args: Any) -> None:
        self._log(LogLevel.ERROR, fmt, args)

    def is_enabled_for(self, level: Any) -> bool:
        """Check whether a record at `level` would currently be written."""
        return should_emit(level, self.registry.effective_threshold())

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        """Release the file handle. Later records go to the console only."""
        self.file_slot.close()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _log(self, level: LogLevel, fmt: Any, args: tuple) -> None:
        if not self.is_enabled_for(level):
            return

        message = format_message(fmt, args)
        formatted = self._formatter.format(self.category, level, message, self.config, self.target)
        self._dispatcher.dispatch(self, level, message, formatted)
