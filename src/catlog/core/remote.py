from __future__ import annotations

"""
Remote Sink Relay.

Fire-and-forget delivery of records to a Graylog-style HTTP collector.
Records are posted from a small shared worker pool; the emitting call never
waits, and completion order relative to later log calls is unspecified.
Failures, including failures to schedule a delivery, are reported as
console diagnostics and never raised.
"""

import logging
import time
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Tuple

from catlog.domain.levels import LogLevel
from catlog.infra.console import Stream, StreamConsole
from catlog.infra.network import post_json

logger = logging.getLogger(__name__)

Transport = Callable[[str, Dict[str, Any]], Tuple[bool, Optional[int], str]]

# Upper bound on concurrent deliveries; further records queue behind them
MAX_RELAY_WORKERS = 4

_RELAY_POOL = ThreadPoolExecutor(max_workers=MAX_RELAY_WORKERS, thread_name_prefix="catlog-remote-sink")


def build_payload(message: str, level: LogLevel, timestamp: Optional[float] = None) -> Dict[str, Any]:
    """
    Build the JSON document sent to the collector.

    Args:
        message: Interpolated, undecorated message.
        level: Record level.
        timestamp: Seconds since the epoch; defaults to now.

    Returns:
        Dict[str, Any]: Wire payload.
    """
    return {
        "timestamp": time.time() if timestamp is None else timestamp,
        "short_message": message,
        "long_message": message,
        "level": level.value,
    }


class RemoteSink:
    """
    Background sender for the remote collector.

    Args:
        console: Console used for failure diagnostics.
        transport: JSON POST primitive; defaults to the requests client.
        executor: Worker pool; defaults to the shared bounded relay pool.
    """

    def __init__(
            self,
            console: StreamConsole,
            transport: Optional[Transport] = None,
            executor: Optional[Executor] = None,
    ) -> None:
        self._console = console
        self._transport = transport or post_json
        self._executor = executor or _RELAY_POOL

    def send(self, url: str, payload: Dict[str, Any]) -> Optional[Future]:
        """
        Queue delivery of `payload` to `url`.

        Returns:
            Optional[Future]: The pending delivery, for callers that need to
            wait on it (tests); None if it could not be scheduled. The
            logging path never waits.
        """
        try:
            return self._executor.submit(self._deliver, url, payload)
        except RuntimeError as e:
            # Pool shut down or no thread could be started
            self._report(url, f"could not schedule delivery: {e}")
            return None

    def _deliver(self, url: str, payload: Dict[str, Any]) -> None:
        try:
            ok, status, detail = self._transport(url, payload)
        except Exception as e:
            # Transport errors are reported below, never raised
            ok, status, detail = False, None, f"{type(e).__name__}: {e}"

        if not ok:
            self._report(url, detail)

    def _report(self, url: str, detail: str) -> None:
        logger.warning(f"Remote sink delivery to {url} failed: {detail}")
        self._console.write_line(Stream.STDERR, f"Remote sink communication failed ({url}): {detail}")
