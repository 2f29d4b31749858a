from __future__ import annotations

"""
Library Exception Hierarchy.

Errors raised to callers of the public API. Remote sink failures are
never raised; they are reported as console diagnostics instead.
"""


class CatlogError(Exception):
    """Base class for every error raised by catlog."""


class SinkUnavailable(CatlogError):
    """
    A configured file sink could not be opened.

    Raised from the leveled call whose write triggered the lazy open, with
    the underlying OSError chained as the cause. The owning logger remembers
    the failure and raises it again on later writes instead of retrying.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Log file '{path}' is unavailable: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(CatlogError, ValueError):
    """Logger options could not be interpreted."""
