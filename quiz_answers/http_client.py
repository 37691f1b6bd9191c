"""
Shared httpx client handling for the outbound requests.
"""
import contextlib
from typing import Optional

import httpx

# InvalidURL is raised while building a request and is not an HTTPError
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def client_context(client: Optional[httpx.Client] = None):
    """
    Context manager yielding a client for one operation.

    An injected client is left open for its owner; otherwise a new client
    is created and closed on exit.
    """
    if client is not None:
        return contextlib.nullcontext(client)
    return httpx.Client()
