"""Reachability checks for the hosted target site, run before launching browsers."""

from __future__ import annotations

import logging

import requests

from todo_suite.errors import NavigationFailure
from todo_suite.waiting import poll_until

logger = logging.getLogger(__name__)


def is_target_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the entry page answers without a server error."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 500


def wait_for_target(url: str, timeout: int = 30, interval: int = 2) -> None:
    """Poll the entry page until it is reachable or raise NavigationFailure."""
    result = poll_until(
        lambda: is_target_reachable(url),
        bool,
        timeout=timeout,
        interval=interval,
    )
    if not result.satisfied:
        raise NavigationFailure(f"Target at {url} not reachable after {timeout}s")
    logger.info("Target %s is reachable", url)
