"""Metrics renderer adapters."""

from promscrape.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer"]
