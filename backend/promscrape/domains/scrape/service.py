"""Scrape service.

Fetches a target's metrics endpoint through a caller-owned HTTP client and
decodes the Prometheus text exposition payload into metric families:

1. build a GET request for the target URL,
2. attach the ``Accept`` and ``X-Prometheus-Scrape-Timeout-Seconds`` headers,
3. send it (no retries),
4. reject status codes below 200 or above 300,
5. read the full body,
6. decode every family (all or nothing),
7. record the payload size per target and add it to the cumulative total.

Only step 7 touches process state, and only once everything else has
succeeded.  The timeout header is advisory; enforcing deadlines and
cancellation belongs to the client passed in.
"""

from __future__ import annotations

import httpx

from promscrape.core.config import (
    ACCEPT_HEADER,
    X_PROMETHEUS_SCRAPE_TIMEOUT_HEADER,
    settings,
)
from promscrape.core.logging import logger
from promscrape.core.metrics import get_scrape_metrics
from promscrape.core.protocols.http_doer import AsyncHttpDoer, HttpDoer
from promscrape.core.protocols.scrape_metrics import ScrapeMetrics
from promscrape.domains.scrape.decoder import decode_metric_families
from promscrape.domains.scrape.exceptions import (
    BodyReadError,
    DecodeError,
    HTTPStatusError,
    RequestConstructionError,
    TransportError,
)
from promscrape.domains.scrape.types import MetricFamiliesByName

_SCHEMES = ("http", "https")


def build_request(url: str, accept_header: str, fetch_timeout: str) -> httpx.Request:
    """Build the scrape GET request for *url*.

    Raises:
        RequestConstructionError: If *url* is not an absolute http(s) URL.
    """
    try:
        request = httpx.Request(
            "GET",
            url,
            headers={
                ACCEPT_HEADER: accept_header,
                X_PROMETHEUS_SCRAPE_TIMEOUT_HEADER: fetch_timeout,
            },
        )
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestConstructionError(f"invalid scrape URL {url!r}: {exc}", url=url) from exc

    if request.url.scheme not in _SCHEMES or not request.url.host:
        raise RequestConstructionError(
            f"invalid scrape URL {url!r}: expected an absolute http(s) URL", url=url
        )
    return request


def check_status(status_code: int, url: str) -> None:
    """Reject status codes outside [200, 300].

    300 itself is accepted: the upper bound is inclusive.
    """
    if status_code < 200 or status_code > 300:
        raise HTTPStatusError(status_code, url=url)


def decode_body(body: bytes, url: str) -> MetricFamiliesByName:
    """Decode *body*, converting UTF-8 and parser failures into DecodeError."""
    try:
        return decode_metric_families(body)
    except (UnicodeDecodeError, ValueError, IndexError) as exc:
        raise DecodeError(f"failed to decode metrics payload: {exc!r}", url=url) from exc


class _ScrapeBase:
    """Shared argument handling and payload accounting."""

    def __init__(self, metrics: ScrapeMetrics | None = None) -> None:
        self._metrics = metrics if metrics is not None else get_scrape_metrics()

    @property
    def metrics(self) -> ScrapeMetrics:
        return self._metrics

    @staticmethod
    def _request_for(url: str, accept_header: str | None, fetch_timeout: str | None) -> httpx.Request:
        if accept_header is None:
            accept_header = settings.ACCEPT_HEADER
        if fetch_timeout is None:
            fetch_timeout = settings.SCRAPE_TIMEOUT_SECONDS
        return build_request(url, accept_header, fetch_timeout)

    def _record(self, url: str, body: bytes) -> None:
        size = float(len(body))
        self._metrics.set_target_size(url, size)
        self._metrics.add_scraped_bytes(size)


class ScrapeService(_ScrapeBase):
    """Scrapes Prometheus text exposition endpoints synchronously.

    Usage:
        with httpx.Client(timeout=5.0) as client:
            families = ScrapeService(client).scrape("http://exporter:9100/metrics")
    """

    def __init__(self, client: HttpDoer, metrics: ScrapeMetrics | None = None) -> None:
        super().__init__(metrics)
        self._client = client

    def scrape(
        self,
        url: str,
        accept_header: str | None = None,
        fetch_timeout: str | None = None,
    ) -> MetricFamiliesByName:
        """Scrape *url* and decode its payload.

        Args:
            url: Target metrics endpoint.
            accept_header: ``Accept`` header value; defaults to the
                configured text exposition accept header.
            fetch_timeout: Value of the advisory scrape timeout header, in
                seconds, sent verbatim.

        Returns:
            Metric families keyed by name.

        Raises:
            RequestConstructionError: Invalid URL.
            TransportError: The client failed to send the request.
            HTTPStatusError: Status below 200 or above 300.
            BodyReadError: The body could not be read completely.
            DecodeError: The body is not valid text exposition format.
        """
        log = logger.with_context(target=url)
        request = self._request_for(url, accept_header, fetch_timeout)

        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise TransportError(f"scrape request failed: {exc!r}", url=url) from exc

        try:
            check_status(response.status_code, url)
            try:
                body = response.read()
            except (httpx.RequestError, httpx.StreamError) as exc:
                raise BodyReadError(f"failed to read scrape body: {exc!r}", url=url) from exc
        finally:
            response.close()

        families = decode_body(body, url)
        self._record(url, body)
        log.debug(f"Scraped {len(families)} metric families ({len(body)} bytes)")
        return families


class AsyncScrapeService(_ScrapeBase):
    """Asyncio variant of ScrapeService over an ``httpx.AsyncClient``."""

    def __init__(self, client: AsyncHttpDoer, metrics: ScrapeMetrics | None = None) -> None:
        super().__init__(metrics)
        self._client = client

    async def scrape(
        self,
        url: str,
        accept_header: str | None = None,
        fetch_timeout: str | None = None,
    ) -> MetricFamiliesByName:
        """Scrape *url* and decode its payload. Same contract as ScrapeService.scrape."""
        log = logger.with_context(target=url)
        request = self._request_for(url, accept_header, fetch_timeout)

        try:
            response = await self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise TransportError(f"scrape request failed: {exc!r}", url=url) from exc

        try:
            check_status(response.status_code, url)
            try:
                body = await response.aread()
            except (httpx.RequestError, httpx.StreamError) as exc:
                raise BodyReadError(f"failed to read scrape body: {exc!r}", url=url) from exc
        finally:
            await response.aclose()

        families = decode_body(body, url)
        self._record(url, body)
        log.debug(f"Scraped {len(families)} metric families ({len(body)} bytes)")
        return families
