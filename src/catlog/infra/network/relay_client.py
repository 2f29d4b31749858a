from __future__ import annotations

"""
Remote Collector HTTP Client.

Single JSON POST primitive used by the remote sink. Errors are returned
to the caller as values; nothing is raised from here.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import requests

from catlog.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


def post_json(url: str, payload: Dict[str, Any]) -> Tuple[bool, Optional[int], str]:
    """
    POST a JSON document to a remote collector.

    Args:
        url: Collector endpoint.
        payload: JSON-serializable body.

    Returns:
        Tuple[bool, Optional[int], str]: Success flag, HTTP status (None on
        transport failure) and a short description of the outcome.
    """
    headers = {
        "User-Agent": USER_AGENT,
        "Content-Type": "application/json",
    }
    try:
        response = requests.post(url, json=payload, headers=headers, timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.Timeout:
        return False, None, f"timed out after {DEFAULT_TIMEOUT}s"
    except requests.exceptions.RequestException as e:
        return False, None, str(e)

    if not response.ok:
        return False, response.status_code, f"HTTP {response.status_code} {response.reason or ''}".strip()

    logger.debug(f"Relay: Delivered record to {url} (HTTP {response.status_code}).")
    return True, response.status_code, "Success"
