"""Prometheus implementation of the ScrapeMetrics protocol.

Uses a caller-supplied CollectorRegistry so the scraper's own metrics are
served alongside whatever else the host process exports (rendered by
PrometheusMetricsRenderer).  Value updates rely on prometheus-client's
per-value locks, so concurrent scrapes never lose an update.
"""

from prometheus_client import CollectorRegistry, Counter, Gauge

from promscrape.core.protocols.scrape_metrics import ScrapeMetrics


class PrometheusScrapeMetrics(ScrapeMetrics):
    """Prometheus-backed scrape payload accounting."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()

        self._target_size = Gauge(
            "promscrape_target_size_bytes",
            "Payload size in bytes of the last successful scrape of a target",
            ["target"],
            registry=self._registry,
        )

        # Exported as promscrape_scraped_payload_bytes_total.
        self._scraped_payload = Counter(
            "promscrape_scraped_payload_bytes",
            "Cumulative payload bytes scraped across all targets",
            registry=self._registry,
        )

    # -- ScrapeMetrics protocol methods --

    def set_target_size(self, target: str, size: float) -> None:
        self._target_size.labels(target=target).set(size)

    def add_scraped_bytes(self, size: float) -> None:
        self._scraped_payload.inc(size)

    def reset_target_sizes(self) -> None:
        self._target_size.clear()

    def reset_total_scraped(self) -> None:
        self._scraped_payload.reset()
