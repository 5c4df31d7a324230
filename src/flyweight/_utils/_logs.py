import logging
import sys
from typing import Union

from httpx import Request, Response

from ..models.enums import LoggingStyle
from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Send the package's log records to stderr.

    Meant for scripts; library code never configures logging itself.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)
    if not any(h.get_name() == LOGGER_NAME for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        package_logger.addHandler(handler)
    return package_logger


def log_response(style: LoggingStyle, request: Request, response: Response) -> None:
    if style == LoggingStyle.NONE:
        return

    logger.info(f"{request.method}: {request.url}, Status: {response.status_code}")
