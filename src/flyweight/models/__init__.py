from .enums import LoggingStyle, Method
from .errors import (
    APIError,
    DecodingError,
    InvalidURLError,
    OtherError,
    StatusCodeError,
)
from .result import ResultEnvelope

__all__ = [
    "APIError",
    "DecodingError",
    "InvalidURLError",
    "LoggingStyle",
    "Method",
    "OtherError",
    "ResultEnvelope",
    "StatusCodeError",
]
