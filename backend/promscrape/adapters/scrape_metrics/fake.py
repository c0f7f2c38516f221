"""Fake ScrapeMetrics for testing.

Records the accumulator state in memory so tests can assert on payload
accounting without reaching into prometheus-client internals.
"""

from promscrape.core.protocols.scrape_metrics import ScrapeMetrics


class FakeScrapeMetrics(ScrapeMetrics):
    """In-memory spy implementing the ScrapeMetrics protocol.

    Usage:
        fake = FakeScrapeMetrics()
        # … inject into ScrapeService …
        assert fake.target_sizes == {"http://exporter:9100/metrics": 512.0}
        assert fake.total_scraped == 512.0
    """

    def __init__(self) -> None:
        self.target_sizes: dict[str, float] = {}
        self.total_scraped: float = 0.0
        self.set_calls: int = 0
        self.add_calls: int = 0

    def set_target_size(self, target: str, size: float) -> None:
        self.target_sizes[target] = size
        self.set_calls += 1

    def add_scraped_bytes(self, size: float) -> None:
        if size < 0:
            raise ValueError("Counters can only be incremented by non-negative amounts.")
        self.total_scraped += size
        self.add_calls += 1

    def reset_target_sizes(self) -> None:
        self.target_sizes.clear()

    def reset_total_scraped(self) -> None:
        self.total_scraped = 0.0

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.target_sizes.clear()
        self.total_scraped = 0.0
        self.set_calls = 0
        self.add_calls = 0
