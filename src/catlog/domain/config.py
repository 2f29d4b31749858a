from __future__ import annotations

"""
Logger Configuration Model.

Defines the immutable per-logger configuration and the overlay routine
that merges caller-supplied partial options onto the documented defaults.
Option keys are tolerant: snake_case names and the historical camelCase
names are both accepted.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from catlog.domain.colors import Color, TargetKind
from catlog.errors import ConfigurationError


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable configuration owned by a single logger.

    Attributes:
        use_colors: Decorate console output for the target.
        color: Category color token.
        show_timestamp: Prefix records with an ISO-8601 timestamp.
        show_level: Render the ``[LEVEL]`` segment.
        filename: Per-logger log file; falls back to the global logfile.
        append_file: Append to an existing file instead of truncating it.
        use_remote_sink: Relay records to the remote collector.
        remote_url: Collector endpoint; the relay is skipped when unset.
        target: Decoration strategy; None defers to the registry default.
    """
    use_colors: bool = True
    color: Color = Color.Default
    show_timestamp: bool = True
    show_level: bool = True
    filename: Optional[str] = None
    append_file: bool = True
    use_remote_sink: bool = False
    remote_url: Optional[str] = None
    target: Optional[TargetKind] = None


DEFAULT_CONFIG = LoggerConfig()

# Historical option names
_ALIASES: Dict[str, str] = {
    "useColors": "use_colors",
    "showTimestamp": "show_timestamp",
    "showLevel": "show_level",
    "appendFile": "append_file",
    "useGraylog": "use_remote_sink",
    "graylogUrl": "remote_url",
    "useRemoteSink": "use_remote_sink",
    "remoteUrl": "remote_url",
}

_FIELD_NAMES = frozenset(f.name for f in fields(LoggerConfig))
_BOOL_FIELDS = frozenset(("use_colors", "show_timestamp", "show_level", "append_file", "use_remote_sink"))


def build_config(options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> LoggerConfig:
    """
    Overlay partial options onto the default configuration.

    Args:
        options: Partial mapping of option names to values.
        **overrides: Keyword options, applied after `options`.

    Returns:
        LoggerConfig: Fully populated configuration.

    Raises:
        ConfigurationError: On unknown keys or uncoercible values.
    """
    merged: Dict[str, Any] = {}
    for source in (options or {}, overrides):
        for key, value in source.items():
            name = _ALIASES.get(key, key)
            if name not in _FIELD_NAMES:
                raise ConfigurationError(f"Unknown logger option: {key!r}")
            merged[name] = _coerce(name, value)

    return replace(DEFAULT_CONFIG, **merged)


def _coerce(name: str, value: Any) -> Any:
    """Normalize a single option value for its field."""
    if name in _BOOL_FIELDS:
        return bool(value)

    if name == "color":
        try:
            return Color.coerce(value)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    if name == "target":
        if value is None or isinstance(value, TargetKind):
            return value
        try:
            return TargetKind(str(value).strip().lower())
        except ValueError as e:
            raise ConfigurationError(f"Unknown output target: {value!r}") from e

    # filename / remote_url: empty values disable the feature
    if value is None or value == "":
        return None
    return str(value)
