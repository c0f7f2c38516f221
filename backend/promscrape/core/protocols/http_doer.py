"""HttpDoer protocols for the caller-owned HTTP transport.

The scraper never builds or owns a client; it only needs something that
sends a prepared request.  ``httpx.Client`` and ``httpx.AsyncClient``
satisfy these protocols structurally, so production code passes its own
configured client (auth, TLS, proxies) and tests pass one backed by
``httpx.MockTransport``.
"""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class HttpDoer(Protocol):
    """Protocol for executing a single synchronous HTTP request."""

    def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        """Send *request* and return the response.

        Args:
            request: Fully built request (method, URL, headers).
            stream: When True the body is left unread so the caller can
                read it separately.
        """
        ...


@runtime_checkable
class AsyncHttpDoer(Protocol):
    """Protocol for executing a single asynchronous HTTP request."""

    async def send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        """Send *request* and return the response."""
        ...
