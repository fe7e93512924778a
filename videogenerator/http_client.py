"""Shared HTTP client for outbound REST calls.

Each request is a single attempt: no retry adapter is mounted, callers pass
an explicit timeout.
"""

import requests
from requests.adapters import HTTPAdapter

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a shared requests.Session with a pooled adapter and no retries."""
    global _session
    if _session is None:
        _session = requests.Session()
        adapter = HTTPAdapter(max_retries=0)
        _session.mount("http://", adapter)
        _session.mount("https://", adapter)
    return _session
