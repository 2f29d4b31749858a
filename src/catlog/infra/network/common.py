from __future__ import annotations

USER_AGENT = "catlog-remote-sink/1.0.0"
DEFAULT_TIMEOUT = 10
