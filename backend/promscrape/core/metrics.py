"""Process-wide scrape accumulators.

``get_scrape_metrics()`` lazily builds one PrometheusScrapeMetrics bound to
the global prometheus-client REGISTRY.  Services fall back to it when no
handle is injected; tests should inject their own.
"""

from functools import lru_cache

from prometheus_client import REGISTRY

from promscrape.adapters.scrape_metrics.prometheus import PrometheusScrapeMetrics


@lru_cache(maxsize=1)
def get_scrape_metrics() -> PrometheusScrapeMetrics:
    """Return the shared, lazily created scrape metrics handle."""
    return PrometheusScrapeMetrics(registry=REGISTRY)


def reset_total_scraped_payload() -> None:
    """Reset the shared cumulative scraped-bytes counter."""
    get_scrape_metrics().reset_total_scraped()


def reset_target_size() -> None:
    """Reset the shared per-target payload size gauge."""
    get_scrape_metrics().reset_target_sizes()
