from __future__ import annotations

"""
Message Formatting.

Composes the raw (file) line and the decorated (console) line for a single
record. Decorations come from one of two strategies selected by target:
inline ANSI escape sequences for terminals, or ``%c`` placeholders paired
with an ordered list of CSS style arguments for markup-capable consoles.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from catlog.domain.colors import Color, TargetKind, level_to_palette_token, resolve
from catlog.domain.config import LoggerConfig
from catlog.domain.levels import LogLevel

ESC = "\u001b"
SEPARATOR = ": "
MARKUP_PLACEHOLDER = "%c"

# Levels padded with one extra space so their brackets align with DEBUG/ERROR
_PADDED_LEVELS = (LogLevel.INFO, LogLevel.WARN)


@dataclass(frozen=True)
class FormattedPieces:
    """Per-record decorations, consumed immediately by the assembler."""

    timestamp: str = ""
    level: str = ""
    category: str = ""
    text: str = SEPARATOR
    styles: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FormattedMessage:
    """
    Output of a formatting pass.

    Attributes:
        display_text: Console line, decorated for the target.
        raw_text: Undecorated line written to file sinks.
        style_args: Markup styles matching the ``%c`` markers, in order.
    """
    display_text: str
    raw_text: str
    style_args: Tuple[str, ...] = field(default_factory=tuple)


def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """Render a UTC ISO-8601 timestamp with millisecond precision."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MessageFormatter:
    """
    Builds display and raw text for log records.

    Args:
        clock: Source of the current time; injectable for tests.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def format(
            self,
            category: str,
            level: LogLevel,
            message: str,
            config: LoggerConfig,
            target: TargetKind,
    ) -> FormattedMessage:
        """
        Format a record for every sink.

        Args:
            category: Logger category label.
            level: Record level.
            message: Interpolated message text.
            config: Owning logger's configuration.
            target: Decoration strategy.

        Returns:
            FormattedMessage: Display text, raw text and markup styles.
        """
        timestamp = iso_timestamp(self._clock()) if config.show_timestamp else ""
        raw_text = self._assemble(category, level, message, timestamp, config, FormattedPieces())

        if not config.use_colors:
            return FormattedMessage(display_text=raw_text, raw_text=raw_text)

        pieces = self.build_pieces(level, config, target)
        display_text = self._assemble(category, level, message, timestamp, config, pieces)
        return FormattedMessage(display_text=display_text, raw_text=raw_text, style_args=pieces.styles)

    def build_pieces(self, level: LogLevel, config: LoggerConfig, target: TargetKind) -> FormattedPieces:
        """Compute the decorations for one record under `target`."""
        level_color = level_to_palette_token(level)

        if target is TargetKind.DISPLAY_MARKUP:
            return self._markup_pieces(level_color, config)
        return self._terminal_pieces(level_color, config)

    # -------------------------------------------------------------------------
    # Strategies
    # -------------------------------------------------------------------------

    @staticmethod
    def _terminal_pieces(level_color: Color, config: LoggerConfig) -> FormattedPieces:
        timestamp = ""
        level = ""
        if config.show_timestamp:
            timestamp = f"{ESC}[3{resolve(Color.Grey, TargetKind.TERMINAL)}m"
        if config.show_level:
            level = f"{ESC}[3{resolve(level_color, TargetKind.TERMINAL)};22m"

        return FormattedPieces(
            timestamp=timestamp,
            level=level,
            category=f"{ESC}[3{resolve(config.color, TargetKind.TERMINAL)};1m",
            text=f"{ESC}[0m{SEPARATOR}",
        )

    @staticmethod
    def _markup_pieces(level_color: Color, config: LoggerConfig) -> FormattedPieces:
        styles: List[str] = []
        timestamp = ""
        level = ""
        if config.show_timestamp:
            timestamp = MARKUP_PLACEHOLDER
            styles.append(f"color:{resolve(Color.Grey, TargetKind.DISPLAY_MARKUP)}")
        if config.show_level:
            level = MARKUP_PLACEHOLDER
            styles.append(f"color:{resolve(level_color, TargetKind.DISPLAY_MARKUP)}")

        styles.append(f"color:{resolve(config.color, TargetKind.DISPLAY_MARKUP)}; font-weight: bold")
        # Empty style resets decoration for the message body
        styles.append("")

        return FormattedPieces(
            timestamp=timestamp,
            level=level,
            category=MARKUP_PLACEHOLDER,
            text=f"{SEPARATOR}{MARKUP_PLACEHOLDER}",
            styles=tuple(styles),
        )

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    @staticmethod
    def _assemble(
            category: str,
            level: LogLevel,
            message: str,
            timestamp: str,
            config: LoggerConfig,
            pieces: FormattedPieces,
    ) -> str:
        result = ""
        if config.show_timestamp:
            result = f"{pieces.timestamp}{timestamp} "

        if config.show_level:
            pad = " " if level in _PADDED_LEVELS else ""
            result += f"{pieces.level}[{level.value}]{pad} "

        result += pieces.category + category
        result += pieces.text + message
        return result
