"""Decoded scrape payload types."""

from typing import Dict

from prometheus_client import Metric

# Family name as written in the payload -> decoded family (name, documentation, type, samples).
# A name repeated in the payload keeps the last decoded family.
MetricFamiliesByName = Dict[str, Metric]
