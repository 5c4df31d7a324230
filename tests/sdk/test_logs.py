import logging
from typing import Generator

import httpx
import pytest

from flyweight import LoggingStyle, setup_logging
from flyweight._utils import log_response


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    logger = logging.getLogger("flyweight")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestLogResponse:
    def test_normal(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.INFO, logger="flyweight")
        request = httpx.Request("PUT", "https://api.example.com/ships/1")

        log_response(LoggingStyle.NORMAL, request, httpx.Response(204))

        assert caplog.messages == ["PUT: https://api.example.com/ships/1, Status: 204"]

    def test_none(self, caplog: pytest.LogCaptureFixture):
        caplog.set_level(logging.DEBUG, logger="flyweight")
        request = httpx.Request("GET", "https://api.example.com/ships")

        log_response(LoggingStyle.NONE, request, httpx.Response(200))

        assert caplog.records == []


class TestSetupLogging:
    def test_adds_single_handler(self, package_logger: logging.Logger):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)

        named = [h for h in package_logger.handlers if h.get_name() == "flyweight"]
        assert len(named) == 1
        assert package_logger.level == logging.DEBUG
