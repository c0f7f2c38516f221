"""ScrapeMetrics protocol for scraper self-observability.

Abstracts the two process-wide accumulators (payload size per target and
cumulative scraped bytes) so the scrape service depends on a protocol
rather than a concrete library.  Production uses Prometheus; tests inject
a fake that records values in memory.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScrapeMetrics(Protocol):
    """Protocol for scrape payload accounting."""

    def set_target_size(self, target: str, size: float) -> None:
        """Replace the last-scrape payload size recorded for *target*.

        Args:
            target: Scraped URL, used verbatim as the ``target`` label.
            size: Body size in bytes.
        """
        ...

    def add_scraped_bytes(self, size: float) -> None:
        """Add *size* bytes to the cumulative scraped-bytes counter."""
        ...

    def reset_target_sizes(self) -> None:
        """Drop the size series of every target."""
        ...

    def reset_total_scraped(self) -> None:
        """Set the cumulative counter back to zero.

        Breaks counter monotonicity; meant for test isolation.
        """
        ...
