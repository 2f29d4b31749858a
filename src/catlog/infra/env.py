from __future__ import annotations

"""
Environment Lookup Seam.

Wraps process environment access so that level overrides can be injected
in tests without mutating os.environ.
"""

import os
from typing import Mapping, Optional

# Name of the variable that overrides the global threshold
LEVEL_OVERRIDE_VAR = "LOG"


class EnvironmentReader:
    """
    Read-only view over environment variables.

    Args:
        source: Mapping to read from. Defaults to the live os.environ.
    """

    def __init__(self, source: Optional[Mapping[str, str]] = None) -> None:
        self._source = source

    def read(self, name: str) -> Optional[str]:
        """Return the variable's value, treating empty strings as unset."""
        source = os.environ if self._source is None else self._source
        value = source.get(name)
        if not value:
            return None
        return value
