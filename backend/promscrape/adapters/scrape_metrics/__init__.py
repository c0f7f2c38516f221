"""Scrape metrics adapters."""

from promscrape.adapters.scrape_metrics.fake import FakeScrapeMetrics
from promscrape.adapters.scrape_metrics.prometheus import PrometheusScrapeMetrics

__all__ = ["PrometheusScrapeMetrics", "FakeScrapeMetrics"]
