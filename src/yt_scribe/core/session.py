"""HTTP session construction shared by the page fetcher and the Innertube client."""

from typing import Callable, Dict, Optional

import requests

SessionFactory = Callable[[], requests.Session]


def new_session(headers: Optional[Dict[str, str]] = None) -> requests.Session:
    """
    Create a fresh session for one pipeline call.

    No retry adapter is mounted: throttling and transient failures surface to
    the caller unchanged.
    """
    s = requests.Session()
    if headers:
        s.headers.update(headers)
    return s
