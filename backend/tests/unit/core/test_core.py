"""Unit tests for settings, logging and the shared metrics handle."""

import logging

from promscrape.adapters.scrape_metrics import PrometheusScrapeMetrics
from promscrape.core import metrics as shared
from promscrape.core.config import TEXT_EXPOSITION_ACCEPT, Settings
from promscrape.core.logging import ContextualLogger, logger


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ACCEPT_HEADER", "SCRAPE_TIMEOUT_SECONDS"):
            monkeypatch.delenv(f"PROMSCRAPE_{name}", raising=False)

        s = Settings(_env_file=None)

        assert s.ACCEPT_HEADER == TEXT_EXPOSITION_ACCEPT
        assert s.SCRAPE_TIMEOUT_SECONDS == "5"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("PROMSCRAPE_SCRAPE_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("PROMSCRAPE_ACCEPT_HEADER", "text/plain")

        s = Settings(_env_file=None)

        assert s.SCRAPE_TIMEOUT_SECONDS == "12.5"
        assert s.ACCEPT_HEADER == "text/plain"

    def test_has_no_log_level_setting(self):
        assert "LOG_LEVEL" not in Settings.model_fields


class TestContextualLogger:
    def test_with_context_merges_fields(self):
        child = logger.with_context(target="http://a/metrics").with_context(attempt=1)

        assert isinstance(child, ContextualLogger)
        assert child.context == {"target": "http://a/metrics", "attempt": 1}
        assert logger.context == {}

    def test_installs_no_handlers(self):
        assert logging.getLogger("promscrape").handlers == []

    def test_records_carry_context(self, caplog):
        caplog.set_level(logging.DEBUG, logger="promscrape")

        logger.with_context(target="http://a/metrics").debug("scraped")

        record = caplog.records[-1]
        assert record.target == "http://a/metrics"
        assert "target=http://a/metrics" in record.getMessage()


class TestSharedScrapeMetrics:
    def test_is_lazily_created_once(self):
        first = shared.get_scrape_metrics()

        assert isinstance(first, PrometheusScrapeMetrics)
        assert shared.get_scrape_metrics() is first

    def test_reset_helpers(self):
        from prometheus_client import REGISTRY

        handle = shared.get_scrape_metrics()
        handle.set_target_size("http://shared.local/metrics", 9.0)
        handle.add_scraped_bytes(9.0)

        shared.reset_target_size()
        shared.reset_total_scraped_payload()

        assert REGISTRY.get_sample_value(
            "promscrape_target_size_bytes", {"target": "http://shared.local/metrics"}
        ) is None
        assert REGISTRY.get_sample_value("promscrape_scraped_payload_bytes_total") == 0.0
