"""Scrape domain: fetch and decode Prometheus text exposition payloads."""

from promscrape.domains.scrape.exceptions import (
    BodyReadError,
    DecodeError,
    HTTPStatusError,
    RequestConstructionError,
    ScrapeError,
    TransportError,
)
from promscrape.domains.scrape.service import AsyncScrapeService, ScrapeService
from promscrape.domains.scrape.types import MetricFamiliesByName

__all__ = [
    "AsyncScrapeService",
    "BodyReadError",
    "DecodeError",
    "HTTPStatusError",
    "MetricFamiliesByName",
    "RequestConstructionError",
    "ScrapeError",
    "ScrapeService",
    "TransportError",
]
