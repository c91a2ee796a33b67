"""
HTTP session for the routing oracles.

A radial search issues its oracle calls one after another on each bearing,
so one slow or dropped request stalls that whole bearing. The session here
keeps that bounded: a couple of quick retries on rate limits and gateway
errors, then a hard per-request timeout. Errors that survive the retries
surface through ``raise_for_status`` in the oracle, which turns them into
"no answer".
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from farthest_reach import __version__

DEFAULT_RETRY = Retry(
    total=2,
    backoff_factor=0.5,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"farthest-reach/{__version__}"


class TimeoutAdapter(HTTPAdapter):
    """Retrying adapter that fills in ``timeout`` when the caller left it unset."""

    def __init__(self, timeout: float, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(**kwargs)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        # Session.request passes timeout=None explicitly
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """Session for oracle requests, identified by ``user_agent``."""
    s = requests.Session()
    adapter = TimeoutAdapter(timeout, max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = user_agent
    return s


#: Used by the oracles unless one is injected.
session: requests.Session = create_session()
