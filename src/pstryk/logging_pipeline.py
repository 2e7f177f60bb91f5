"""Structured JSON logging for applications embedding the Pstryk client."""

from __future__ import annotations

import json
import logging
import logging.handlers
from collections.abc import Iterable
from datetime import datetime, timezone
from queue import Full, Queue
from typing import override
from uuid import uuid4

__all__ = [
    "BoundedQueueHandler",
    "JsonFormatter",
    "configure_structured_logging",
    "shutdown_listeners",
]

LOGGER = logging.getLogger(__name__)

# Attributes present on every LogRecord; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES: frozenset[str] = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def __init__(self, *, default_trace_id: str | None = None) -> None:
        super().__init__()
        self._default_trace_id = default_trace_id

    @override
    def format(self, record: logging.LogRecord) -> str:
        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and key != "trace_id"
        }
        payload: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "trace_id": getattr(record, "trace_id", None) or self._default_trace_id,
            "context": context,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        elif record.exc_text:
            payload["exception"] = record.exc_text
        return json.dumps(payload, default=str)


class BoundedQueueHandler(logging.handlers.QueueHandler):
    """Queue handler that drops records instead of blocking when full."""

    @override
    def enqueue(self, record: logging.LogRecord) -> None:
        try:
            self.queue.put_nowait(record)
        except Full:
            self.handleError(record)

    @override
    def handleError(self, record: logging.LogRecord) -> None:
        return


def configure_structured_logging(
    logger: logging.Logger | str = "pstryk",
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    max_queue_size: int = 1024,
) -> logging.handlers.QueueListener:
    """Attach a JSON stream handler to ``logger`` behind a bounded queue.

    Args:
        logger: Logger instance or name. Defaults to the package logger, so
            request records from :class:`pstryk.client.PstrykClient` are
            included once ``level`` is ``logging.DEBUG``.
        trace_id: Static trace identifier stamped on records that do not
            carry their own. A random one is generated when omitted.
        level: Logging verbosity level.
        max_queue_size: Records held before new ones are dropped.

    Returns:
        The started queue listener. Stop it with :func:`shutdown_listeners`.
    """

    target = logging.getLogger(logger) if isinstance(logger, str) else logger
    target.setLevel(level)

    record_queue: Queue[logging.LogRecord] = Queue(maxsize=max_queue_size)
    target.addHandler(BoundedQueueHandler(record_queue))

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(
        JsonFormatter(default_trace_id=trace_id or str(uuid4()))
    )

    listener = logging.handlers.QueueListener(record_queue, stream_handler)
    listener.start()
    return listener


def shutdown_listeners(listeners: Iterable[logging.handlers.QueueListener]) -> None:
    """Stop queue listeners, logging rather than raising on failure."""

    for listener in listeners:
        try:
            listener.stop()
        except Exception as exc:  # pragma: no cover - defensive logging cleanup
            LOGGER.warning("Failed to stop logging listener", exc_info=exc)
