from logging import getLogger
from typing import Optional

from .._utils.constants import LOGGER_NAME

logger = getLogger(LOGGER_NAME)


class APIError(Exception):
    """Base class of every error a `Network` call can fail with.

    The taxonomy is flat: a failure is always exactly one of
    `InvalidURLError`, `DecodingError`, `StatusCodeError` or `OtherError`.
    """

    def __init__(self, message: str = "API error"):
        self.message = message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    @staticmethod
    def map(error: BaseException) -> "APIError":
        """Classify an arbitrary error.

        Errors that already belong to the taxonomy are returned unchanged;
        anything else is wrapped in an `OtherError`.

        Args:
            error: The error to classify.

        Returns:
            APIError: `error` itself, or an `OtherError` wrapping it.
        """
        if isinstance(error, APIError):
            return error

        logger.debug(f"mapping {error}")
        return OtherError(error)


class InvalidURLError(APIError):
    """The base URL and/or query parameters do not form a valid URL."""

    def __init__(self, message: str = "Invalid URL"):
        super().__init__(message)


class DecodingError(APIError):
    """A request body could not be encoded or a response could not be decoded."""

    def __init__(
        self, message: str = "Decoding failed", cause: Optional[BaseException] = None
    ):
        self.cause = cause
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class StatusCodeError(APIError):
    """The server answered with a status code outside 200-299.

    The actual status code and response body are not retained.
    """

    def __init__(self, message: str = "Unexpected status code"):
        super().__init__(message)


class OtherError(APIError):
    """Wraps any failure that is not otherwise classified, e.g. transport errors."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)
