from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import APIError

T = TypeVar("T")

_MISSING = object()


@dataclass(frozen=True)
class ResultEnvelope(Generic[T]):
    """Outcome of a single call: a decoded value or a classified error, never both.

    Use `success` and `failure` to build instances.
    """

    _value: object = _MISSING
    error: Optional[APIError] = None

    def __post_init__(self) -> None:
        has_value = self._value is not _MISSING
        if has_value == (self.error is not None):
            raise ValueError("ResultEnvelope holds exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "ResultEnvelope[T]":
        return cls(_value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "ResultEnvelope[T]":
        return cls(error=APIError.map(error))

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def value(self) -> Optional[T]:
        if self._value is _MISSING:
            return None
        return self._value  # type: ignore[return-value]

    def unwrap(self) -> T:
        """Return the value, or raise the error held by a failed result."""
        if self.error is not None:
            raise self.error
        return self._value  # type: ignore[return-value]
