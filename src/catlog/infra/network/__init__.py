from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP primitives used by the remote sink.
"""

from catlog.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT
from catlog.infra.network.relay_client import post_json

__all__ = [
    "post_json",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
]
