"""Contextual logger for promscrape.

``logger.with_context(target=url)`` returns a child logger whose fields are
attached to every record as ``extra``.  Handlers and levels are left to
the host process.
"""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

_LOGGER_NAME = "promscrape"


class ContextualLogger(logging.LoggerAdapter):
    """LoggerAdapter that accumulates context fields."""

    def __init__(self, base: logging.Logger, context: dict[str, Any] | None = None) -> None:
        super().__init__(base, context or {})

    @property
    def context(self) -> dict[str, Any]:
        return dict(self.extra or {})

    def with_context(self, **fields: Any) -> "ContextualLogger":
        """Return a new logger carrying the current fields plus *fields*."""
        return ContextualLogger(self.logger, {**self.context, **fields})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.context, **kwargs.get("extra", {})}
        if self.extra:
            pairs = " ".join(f"{k}={v}" for k, v in self.extra.items())
            msg = f"[{pairs}] {msg}"
        return msg, kwargs


logger = ContextualLogger(logging.getLogger(_LOGGER_NAME))
