"""Core protocols for dependency injection.

Cross-cutting infrastructure protocols only; the scrape domain depends on
these rather than on httpx clients or prometheus-client directly.
"""

from promscrape.core.protocols.http_doer import AsyncHttpDoer, HttpDoer
from promscrape.core.protocols.metrics_renderer import MetricsRenderer
from promscrape.core.protocols.scrape_metrics import ScrapeMetrics

__all__ = [
    "AsyncHttpDoer",
    "HttpDoer",
    "MetricsRenderer",
    "ScrapeMetrics",
]
