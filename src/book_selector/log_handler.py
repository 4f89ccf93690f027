"""In-memory log buffer behind the ``L`` menu command.

Recent formatted records are kept in a bounded ``collections.deque`` so a
user can see why a ballot or a book list load went wrong without the log
lines scrolling through the voting screens.
"""
import logging
from collections import deque
from typing import List, Optional

DEFAULT_CAPACITY = 200

_installed: Optional["InMemoryLogHandler"] = None


class InMemoryLogHandler(logging.Handler):
    """Logging handler that keeps the last *capacity* records."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY, level: int = logging.NOTSET):
        super().__init__(level)
        self.records: deque[str] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.records.append(self.format(record))
        except Exception:
            self.handleError(record)

    def recent(self, n: int = 50) -> List[str]:
        """Return the last *n* lines, oldest first."""
        if n <= 0:
            return []
        return list(self.records)[-n:]


def install_log_buffer(
    logger: Optional[logging.Logger] = None,
    capacity: int = DEFAULT_CAPACITY,
) -> InMemoryLogHandler:
    """Attach a buffer handler to *logger* (the root logger by default)."""
    global _installed
    target = logger or logging.getLogger()
    if _installed is not None and _installed in target.handlers:
        return _installed
    handler = InMemoryLogHandler(capacity)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        datefmt='%H:%M:%S',
    ))
    target.addHandler(handler)
    _installed = handler
    return handler


def get_recent_logs(n: int = 50) -> List[str]:
    """Return the last *n* lines from the installed buffer, if any."""
    if _installed is None:
        return []
    return _installed.recent(n)
