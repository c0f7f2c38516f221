"""Fake metrics exporter for testing.

Serves canned responses through ``httpx.MockTransport`` and records every
request it receives, so scrape tests run against a real httpx client
without any network.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Optional

import httpx


class TruncatedStream(httpx.SyncByteStream, httpx.AsyncByteStream):
    """Body stream that yields its first chunk then drops the connection."""

    def __init__(self, first_chunk: bytes = b"# TYPE up gauge\n") -> None:
        self._first_chunk = first_chunk

    def __iter__(self) -> Iterator[bytes]:
        yield self._first_chunk
        raise httpx.ReadError("connection closed mid-body")

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield self._first_chunk
        raise httpx.ReadError("connection closed mid-body")


class FakeExporter:
    """Test implementation of a Prometheus exporter endpoint.

    Returns the seeded body and status for every request. Configure via
    seed methods.

    Usage:
        exporter = FakeExporter()
        exporter.seed_body(b"up 1\\n")
        client = httpx.Client(transport=exporter.transport())
    """

    def __init__(self) -> None:
        self._status_code: int = 200
        self._body: bytes = b""
        self._stream: Optional[httpx.SyncByteStream] = None
        self._error: Optional[Exception] = None
        self.requests: list[httpx.Request] = []

    def seed_body(self, body: bytes | str, status_code: int = 200) -> None:
        self._body = body.encode("utf-8") if isinstance(body, str) else body
        self._status_code = status_code
        self._stream = None

    def seed_status(self, status_code: int) -> None:
        self._status_code = status_code

    def seed_truncated_body(self) -> None:
        self._stream = TruncatedStream()

    def set_error(self, error: Exception) -> None:
        self._error = error

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._stream is not None:
            return httpx.Response(self._status_code, stream=self._stream)
        return httpx.Response(self._status_code, content=self._body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    # -- test helpers --

    @property
    def last_request(self) -> httpx.Request | None:
        return self.requests[-1] if self.requests else None
