from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Opens log files for the file sink and appends undecorated records to them.
Parent directories are created on demand, mirroring how diagnostics files
are prepared elsewhere in the codebase.
"""

import os
from typing import TextIO


def open_log_file(path: str, append: bool = True) -> TextIO:
    """
    Open a log file for writing UTF-8 text records.

    Args:
        path: Target file path.
        append: Append to existing content; otherwise truncate.

    Returns:
        TextIO: Open, exclusively owned file handle.

    Raises:
        OSError: If the file or its parent directory cannot be created.
    """
    _ensure_parent_dir(path)
    return open(path, "a" if append else "w", encoding="utf-8")


def write_record(handle: TextIO, text: str) -> None:
    """Append one line to an open log file and flush it to the OS."""
    handle.write(f"{text}\n")
    handle.flush()


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    """Recursively create the directory structure for a file path."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
