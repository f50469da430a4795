"""Tests for logging setup."""

import logging

from loguru import logger

from src.catalog.api.utils.app_startup import InterceptHandler, configure_logging
from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import with_context


def test_stdlib_logging_is_forwarded_to_loguru():
    configure_logging()
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]))
    try:
        logging.getLogger("some.library").warning("from stdlib")
    finally:
        logger.remove(sink_id)

    assert "from stdlib" in messages
    assert any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers)


def test_file_sink_writes_json(tmp_path):
    log_file = tmp_path / "logs" / "catalog.log"
    config = ConfigData()
    config.logging.file = str(log_file)
    config.logging.format = "json"

    with with_context(config):
        configure_logging()
        logger.info("written to file")
        logger.complete()

    configure_logging()

    content = log_file.read_text()
    assert "written to file" in content
    assert '"record"' in content
