from enum import Enum


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class LoggingStyle(str, Enum):
    """Whether a summary line is logged after a successful status check."""

    NONE = "none"
    NORMAL = "normal"
