from __future__ import annotations

"""
Console Output Primitive.

Writes finished lines to the process standard streams. Markup style
arguments are consumed the way a plain terminal treats CSS placeholders:
each ``%c`` marker swallows one style and prints nothing.
"""

import re
import sys
from enum import Enum
from typing import Optional, Sequence, TextIO

_STYLE_MARKER = re.compile(r"%c")


class Stream(Enum):
    """Console stream selector."""

    STDOUT = "stdout"
    STDERR = "stderr"


class StreamConsole:
    """
    Console collaborator backed by text streams.

    Streams are looked up on every write when not pinned, so that
    redirections of sys.stdout/sys.stderr (e.g. pytest capture) apply.

    Args:
        stdout: Optional fixed stream for regular output.
        stderr: Optional fixed stream for error output.
    """

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        self._stdout = stdout
        self._stderr = stderr

    def write_line(self, stream: Stream, text: str, styles: Sequence[str] = ()) -> None:
        """
        Write one line of text to the selected stream.

        Args:
            stream: Target stream.
            text: Line content, without a trailing newline.
            styles: Markup style arguments paired with ``%c`` markers.
        """
        if styles:
            text = strip_style_markers(text, len(styles))

        target = self._resolve(stream)
        target.write(f"{text}\n")
        target.flush()

    def _resolve(self, stream: Stream) -> TextIO:
        if stream is Stream.STDERR:
            return self._stderr or sys.stderr
        return self._stdout or sys.stdout


def strip_style_markers(text: str, count: int) -> str:
    """Remove the first `count` ``%c`` markers from text."""
    return _STYLE_MARKER.sub("", text, count=count)
