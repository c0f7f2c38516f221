"""Text exposition format decoding.

Decoding is delegated to prometheus-client's text parser, which yields
one metric family at a time.  The parser renames counter families
(``http_requests_total`` comes back as ``http_requests``), so families
are keyed by the name declared on their ``# TYPE`` line instead.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from prometheus_client import Metric
from prometheus_client.parser import text_string_to_metric_families

from promscrape.domains.scrape.types import MetricFamiliesByName

_TOTAL_SUFFIX = "_total"


def _declared_counter_names(text: str) -> deque[str]:
    """Counter names in ``# TYPE <name> counter`` order, as written."""
    names: deque[str] = deque()
    for line in text.splitlines():
        parts = line.strip().split(None, 3)
        if len(parts) != 4 or parts[:2] != ["#", "TYPE"]:
            continue
        if parts[3].strip() == "counter":
            if not names or names[-1] != parts[2]:
                names.append(parts[2])
    return names


def _written_name(family: Metric, declared_counters: deque[str]) -> str:
    if family.type != "counter":
        return family.name
    while declared_counters:
        written = declared_counters.popleft()
        if written == family.name:
            return written
        if written.endswith(_TOTAL_SUFFIX) and written[: -len(_TOTAL_SUFFIX)] == family.name:
            return written
    return family.name


def iter_metric_families(body: bytes) -> Iterator[tuple[str, Metric]]:
    """Lazily decode *body* into ``(name, family)`` pairs.

    ``name`` is the family name as written in the payload.

    Raises:
        UnicodeDecodeError: If the body is not UTF-8.
        ValueError: On the first malformed line; families before it have
            already been yielded.
    """
    text = body.decode("utf-8")
    declared_counters = _declared_counter_names(text)
    for family in text_string_to_metric_families(text):
        yield _written_name(family, declared_counters), family


def decode_metric_families(body: bytes) -> MetricFamiliesByName:
    """Decode the whole body into a mapping keyed by written family name.

    A family name seen twice keeps the later family; the two are not
    merged.  Any error discards everything decoded so far.
    """
    families: MetricFamiliesByName = {}
    for name, family in iter_metric_families(body):
        families[name] = family
    return families
