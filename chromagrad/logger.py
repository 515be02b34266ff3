"""
Log record buffer.

Keeps the most recent log records in a bounded, thread-safe queue so that an
application can display them later (a debug console, a status panel...).

The buffer is an ordinary object: create one, hand it to a ``BufferHandler``,
and keep it wherever the rest of the application can reach it.

>>> import logging
>>> buffer = LogBuffer()
>>> handler = init(buffer, logging.getLogger("demo"))
>>> logging.getLogger("demo").info("hello")
>>> buffer.records()[-1].message
'hello'
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Deque, List, Optional

__all__ = [
    "DEFAULT_LOG_CAPACITY",
    "LogRecord",
    "LogBuffer",
    "BufferHandler",
    "get_handler",
    "init",
]

DEFAULT_LOG_CAPACITY = 1_000

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogRecord:
    level: int
    time: datetime
    message: str

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)


class LogBuffer:
    """Circular buffer of ``LogRecord``; the oldest record goes first when full."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._lock = Lock()
        self._records: Deque[LogRecord] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._records.maxlen or 0

    def reserve(self, n: int) -> None:
        """Add room for ``n`` more records."""
        if n < 0:
            raise ValueError("n must be non-negative")
        with self._lock:
            self._records = deque(self._records, maxlen=self.capacity + n)

    def push(self, level: int, message: str) -> LogRecord:
        record = LogRecord(level=level, time=datetime.now(timezone.utc), message=message)
        with self._lock:
            # deque drops from the left once maxlen is reached
            self._records.append(record)
        return record

    def records(self) -> List[LogRecord]:
        with self._lock:
            return list(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class BufferHandler(logging.Handler):
    """``logging.Handler`` storing every accepted record in a ``LogBuffer``."""

    def __init__(self, buffer: LogBuffer, level: int = logging.DEBUG) -> None:
        super().__init__(level)
        self.buffer = buffer

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        self.buffer.push(record.levelno, message)


def get_handler(buffer: LogBuffer, level: int = logging.DEBUG) -> BufferHandler:
    """
    Return a handler that stores records in ``buffer``.

    Reserves ``DEFAULT_LOG_CAPACITY`` entries in the buffer first.
    """
    buffer.reserve(DEFAULT_LOG_CAPACITY)
    return BufferHandler(buffer, level)


def init(
    buffer: LogBuffer,
    target: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> BufferHandler:
    """
    Attach a buffer handler to ``target`` (the root logger by default).

    The target logger is opened down to DEBUG; filtering happens on the
    handler.

    Returns:
        The attached handler, so the caller can remove it later.
    """
    target = target if target is not None else logging.getLogger()
    handler = get_handler(buffer, level)
    target.addHandler(handler)
    target.setLevel(logging.DEBUG)
    logger.debug("Log buffer attached to %r with capacity %d", target.name, buffer.capacity)
    return handler
