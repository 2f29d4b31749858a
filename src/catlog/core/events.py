from __future__ import annotations

"""
Publish/Subscribe Channel.

Minimal event emitter used for the process-wide ``data`` stream. Handlers
run synchronously, in subscription order, on the emitting thread.
"""

import threading
from typing import Any, Callable, Dict, List, Optional

Handler = Callable[..., Any]


class EventEmitter:
    """Named-event emitter with on/off/once subscription."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Handler]] = {}
        self._lock = threading.Lock()

    def on(self, event: str, handler: Handler) -> "EventEmitter":
        """Subscribe `handler` to `event`. Returns self for chaining."""
        with self._lock:
            self._listeners.setdefault(event, []).append(handler)
        return self

    def once(self, event: str, handler: Handler) -> "EventEmitter":
        """Subscribe `handler` for the next emission of `event` only."""

        def _wrapper(*args: Any) -> None:
            self.off(event, _wrapper)
            handler(*args)

        _wrapper.listener = handler  # type: ignore[attr-defined]
        return self.on(event, _wrapper)

    def off(self, event: str, handler: Handler) -> "EventEmitter":
        """Remove the most recent subscription of `handler` to `event`."""
        with self._lock:
            handlers = self._listeners.get(event, [])
            for idx in range(len(handlers) - 1, -1, -1):
                registered = handlers[idx]
                if registered == handler or getattr(registered, "listener", None) == handler:
                    del handlers[idx]
                    break
            if not handlers:
                self._listeners.pop(event, None)
        return self

    def remove_all_listeners(self, event: Optional[str] = None) -> "EventEmitter":
        with self._lock:
            if event is None:
                self._listeners.clear()
            else:
                self._listeners.pop(event, None)
        return self

    def listener_count(self, event: str) -> int:
        with self._lock:
            return len(self._listeners.get(event, []))

    def emit(self, event: str, *args: Any) -> bool:
        """
        Call every handler subscribed to `event` with `args`.

        Handler exceptions propagate to the emitter's caller.

        Returns:
            bool: True if at least one handler was called.
        """
        with self._lock:
            handlers = list(self._listeners.get(event, []))
        for handler in handlers:
            handler(*args)
        return bool(handlers)
