from contextlib import contextmanager
from typing import Generator

from ..models.errors import APIError


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager classifying every error raised inside it.

    Errors that already are `APIError` instances propagate unchanged; any
    other `Exception` is re-raised as an `OtherError` wrapping it.
    Cancellation and other `BaseException`s are left alone.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        APIError: The classified error.
    """
    try:
        yield
    except APIError:
        raise
    except Exception as e:
        raise APIError.map(e) from e
