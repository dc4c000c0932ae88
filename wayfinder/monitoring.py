from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("wayfinder")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including fields passed via ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Install a root handler according to the observability settings."""
    config = config or get_config().observability

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(config.level.upper())


@contextmanager
def timed(operation: str, **context: Any) -> Iterator[Dict[str, Any]]:
    """Log how long the wrapped block took.

    The yielded dict can be filled with extra fields to log once the
    block finishes.
    """
    fields: Dict[str, Any] = dict(context)
    start = time.perf_counter()
    try:
        yield fields
    finally:
        fields["duration_ms"] = round((time.perf_counter() - start) * 1000, 2)
        logger.info(operation, extra=fields)
