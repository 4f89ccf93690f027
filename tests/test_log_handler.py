import logging

from book_selector import log_handler
from book_selector.log_handler import InMemoryLogHandler, install_log_buffer


def test_handler_keeps_last_records():
    logger = logging.getLogger("test_log_handler.capacity")
    logger.propagate = False
    logger.setLevel(logging.INFO)
    handler = InMemoryLogHandler(capacity=3)
    logger.addHandler(handler)
    try:
        for i in range(5):
            logger.info("message %d", i)
    finally:
        logger.removeHandler(handler)

    assert handler.recent() == ["message 2", "message 3", "message 4"]
    assert handler.recent(1) == ["message 4"]
    assert handler.recent(0) == []


def test_install_log_buffer_feeds_get_recent_logs():
    logger = logging.getLogger("test_log_handler.install")
    logger.propagate = False
    logger.setLevel(logging.INFO)
    handler = install_log_buffer(logger)
    try:
        logger.warning("catalog line skipped")
        recent = log_handler.get_recent_logs()
    finally:
        logger.removeHandler(handler)

    assert len(recent) == 1
    assert recent[0].endswith("test_log_handler.install WARNING catalog line skipped")


def test_install_log_buffer_twice_reuses_handler():
    logger = logging.getLogger("test_log_handler.reinstall")
    logger.propagate = False
    first = install_log_buffer(logger)
    try:
        second = install_log_buffer(logger)
        assert second is first
        assert logger.handlers.count(first) == 1
    finally:
        logger.removeHandler(first)
