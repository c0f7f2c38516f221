"""Scrape errors.

Every failure is terminal for the call and surfaces as a ``ScrapeError``.
``result`` mirrors what the caller is left holding: an empty mapping when
the call failed before the body was read, ``None`` when the response was
rejected or the payload could not be decoded.  Decoding never yields a
partial mapping.
"""

from __future__ import annotations

from promscrape.domains.scrape.types import MetricFamiliesByName


class ScrapeError(Exception):
    """Base class for scrape failures."""

    def __init__(self, message: str, *, url: str, result: MetricFamiliesByName | None) -> None:
        super().__init__(message)
        self.url = url
        self.result = result


class RequestConstructionError(ScrapeError):
    """The target URL is not a valid http(s) URL."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message, url=url, result={})


class TransportError(ScrapeError):
    """The transport failed to execute the request."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message, url=url, result={})


class HTTPStatusError(ScrapeError):
    """The target answered with a status code outside the accepted range."""

    def __init__(self, status_code: int, *, url: str) -> None:
        super().__init__(
            "status code returned by the prometheus exporter indicates an error "
            f"occurred: {status_code}",
            url=url,
            result=None,
        )
        self.status_code = status_code


class BodyReadError(ScrapeError):
    """Reading the response body failed part way."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message, url=url, result={})


class DecodeError(ScrapeError):
    """The body is not valid Prometheus text exposition format."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message, url=url, result=None)
