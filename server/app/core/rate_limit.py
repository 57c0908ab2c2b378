"""SummaNote - Rate Limiting

Fixed-window request counters per client, kept in process memory.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from threading import Lock
from typing import Dict, Optional, Tuple

from fastapi import Request

from .errors import RateLimitedError
from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class _Window:
    count: int
    reset_at: float


_windows: Dict[Tuple[str, str], _Window] = {}
_lock = Lock()

# Expired windows are swept once the table grows past this size
EVICTION_THRESHOLD = 1024


def _evict_expired(now: float) -> None:
    """Drop windows whose period has ended. Caller holds _lock."""
    expired = [key for key, window in _windows.items() if now > window.reset_at]
    for key in expired:
        del _windows[key]
    if expired:
        logger.debug(f"Evicted {len(expired)} expired rate-limit windows")


def check_rate_limit(
    client_id: str,
    max_requests: int,
    window_seconds: float,
    scope: str = "default",
    now: Optional[float] = None,
) -> bool:
    """
    Count one request for a client and report whether it is allowed.

    The first request opens a window of ``window_seconds``; up to
    ``max_requests`` are allowed inside it. Rejected requests are not counted.
    Once more than ``EVICTION_THRESHOLD`` windows are tracked, expired ones
    are dropped.

    Args:
        client_id: Client identifier (usually the IP address)
        max_requests: Allowed requests per window
        window_seconds: Window length
        scope: Separate counter namespace (e.g., route name)
        now: Current time in seconds (defaults to time.monotonic())

    Returns:
        True if the request is allowed
    """
    if now is None:
        now = time.monotonic()
    key = (scope, client_id)

    with _lock:
        if len(_windows) >= EVICTION_THRESHOLD:
            _evict_expired(now)

        window = _windows.get(key)
        if window is None or now > window.reset_at:
            _windows[key] = _Window(count=1, reset_at=now + window_seconds)
            return True

        if window.count >= max_requests:
            return False

        window.count += 1
        return True


def reset_rate_limits() -> None:
    """Forget all counters."""
    with _lock:
        _windows.clear()


def get_client_ip(request: Request) -> str:
    """Client IP from x-forwarded-for, x-real-ip, or the socket peer."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client is not None:
        return request.client.host
    return "unknown"


def enforce_rate_limit(request: Request, scope: str, max_requests: int, window_seconds: float) -> None:
    """
    Apply the rate limit for a route.

    Raises:
        RateLimitedError: If the client exceeded its quota
    """
    client_ip = get_client_ip(request)
    if not check_rate_limit(client_ip, max_requests, window_seconds, scope=scope):
        logger.info(f"Rate limit hit: scope={scope} client={client_ip}")
        raise RateLimitedError()
