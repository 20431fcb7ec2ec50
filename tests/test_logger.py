import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import structlog
from structlog.testing import capture_logs

from utils.logger import LoggerFactory, get_logger


def test_logger_factory_binds_context():
    factory = LoggerFactory("INFO")

    with capture_logs() as logs:
        logger = factory.create("gamma", client="test")
        logger.info("api_not_found", operation="Get event by ID")

    assert logs == [{
        "event": "api_not_found",
        "client": "test",
        "operation": "Get event by ID",
        "log_level": "info",
    }]


def test_console_rendering_is_configurable():
    LoggerFactory("DEBUG", json_output=False)
    renderer = structlog.get_config()["processors"][-1]
    assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    LoggerFactory("INFO")
    renderer = structlog.get_config()["processors"][-1]
    assert isinstance(renderer, structlog.processors.JSONRenderer)


def test_get_logger():
    logger = get_logger("transformer")
    assert hasattr(logger, "warning")
