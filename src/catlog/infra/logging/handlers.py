from __future__ import annotations

"""
Diagnostics Handler Utilities.

Tagging helpers that let the library tell its own handlers apart from
handlers attached by the host application.
"""

import logging

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_catlog_handler"


def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by catlog."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """Check if a handler instance was created by this module."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _remove_our_handlers(target: logging.Logger) -> None:
    """Detach and close only the handlers tagged as ours."""
    for h in list(target.handlers):
        if _is_our_handler(h):
            target.removeHandler(h)
            h.close()
