"""Typed HTTP calls: build a request, send it, decode the JSON response."""

from ._config import Config
from ._services import Network
from ._utils import RequestSpec, setup_logging
from .models import (
    APIError,
    DecodingError,
    InvalidURLError,
    LoggingStyle,
    Method,
    OtherError,
    ResultEnvelope,
    StatusCodeError,
)

__all__ = [
    "APIError",
    "Config",
    "DecodingError",
    "InvalidURLError",
    "LoggingStyle",
    "Method",
    "Network",
    "OtherError",
    "RequestSpec",
    "ResultEnvelope",
    "setup_logging",
    "StatusCodeError",
]
