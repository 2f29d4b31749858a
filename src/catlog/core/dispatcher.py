from __future__ import annotations

"""
Sink Dispatch.

Routes a formatted record to the file, console and remote sinks of its
logger and then publishes it on the registry's event stream. Console and
file writes are synchronous; the remote relay is detached.
"""

import logging
from typing import TYPE_CHECKING, Callable, Optional, TextIO

from catlog.core.formatter import FormattedMessage
from catlog.core.remote import RemoteSink, build_payload
from catlog.domain.levels import LogLevel
from catlog.errors import SinkUnavailable
from catlog.infra.console import Stream, StreamConsole
from catlog.infra.fs import open_log_file, write_record

if TYPE_CHECKING:
    from catlog.core.logger import Logger

logger = logging.getLogger(__name__)

FileOpener = Callable[[str, bool], TextIO]


class FileSlot:
    """
    Lazily-opened file handle exclusively owned by one logger.

    The handle is opened at most once. An open failure is kept and reported
    again on later writes instead of retrying, until the slot is closed.
    """

    def __init__(self) -> None:
        self.handle: Optional[TextIO] = None
        self.path: Optional[str] = None
        self.error: Optional[OSError] = None
        self.closed = False

    def close(self) -> None:
        self.closed = True
        self.error = None
        if self.handle is not None:
            self.handle.close()
            self.handle = None


class SinkDispatcher:
    """
    Writes finished records to every configured sink.

    Args:
        console: Console collaborator. Defaults to the process streams.
        file_opener: Opens a log file given (path, append).
        remote: Remote relay; built on top of `console` when omitted.
    """

    def __init__(
            self,
            console: Optional[StreamConsole] = None,
            file_opener: Optional[FileOpener] = None,
            remote: Optional[RemoteSink] = None,
    ) -> None:
        self.console = console or StreamConsole()
        self._open_file = file_opener or open_log_file
        self.remote = remote or RemoteSink(self.console)

    def dispatch(self, owner: "Logger", level: LogLevel, message: str, formatted: FormattedMessage) -> None:
        """
        Deliver one accepted record.

        Order: file, console, remote relay, event publication.

        Args:
            owner: Logger emitting the record.
            level: Record level.
            message: Interpolated message, used for the relay and events.
            formatted: Display and raw renderings of the record.

        Raises:
            SinkUnavailable: If the logger's file sink cannot be opened.
        """
        # 1-2. File sink (raw text only)
        handle = self._ensure_file(owner)
        if handle is not None:
            write_record(handle, formatted.raw_text)

        # 3. Console
        stream = Stream.STDERR if level is LogLevel.ERROR else Stream.STDOUT
        self.console.write_line(stream, formatted.display_text, formatted.style_args)

        # 4. Remote relay; a missing URL disables it
        config = owner.config
        if config.use_remote_sink and config.remote_url:
            self.remote.send(config.remote_url, build_payload(message, level))

        # 5. Subscribers
        owner.registry.publish(owner.category, level, message)

    def _ensure_file(self, owner: "Logger") -> Optional[TextIO]:
        slot = owner.file_slot
        if slot.closed:
            return None
        if slot.error is not None:
            raise SinkUnavailable(slot.path or "", str(slot.error)) from slot.error
        if slot.handle is not None:
            return slot.handle

        path = owner.config.filename or owner.registry.logfile
        if not path:
            return None

        slot.path = path
        try:
            slot.handle = self._open_file(path, owner.config.append_file)
        except OSError as e:
            slot.error = e
            logger.error(f"File sink for '{owner.category}' unavailable at {path}: {e}")
            raise SinkUnavailable(path, str(e)) from e

        logger.debug(f"File sink for '{owner.category}' opened at {path}")
        return slot.handle
