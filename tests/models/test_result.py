import pytest

from flyweight import OtherError, ResultEnvelope, StatusCodeError


class TestResultEnvelope:
    def test_success(self):
        result = ResultEnvelope.success([1, 2])

        assert result.ok
        assert result.value == [1, 2]
        assert result.error is None
        assert result.unwrap() == [1, 2]

    def test_success_may_hold_none(self):
        result = ResultEnvelope.success(None)

        assert result.ok
        assert result.unwrap() is None

    def test_failure(self):
        error = StatusCodeError()
        result: ResultEnvelope[int] = ResultEnvelope.failure(error)

        assert not result.ok
        assert result.value is None
        assert result.error is error
        with pytest.raises(StatusCodeError):
            result.unwrap()

    def test_failure_classifies_foreign_errors(self):
        result: ResultEnvelope[int] = ResultEnvelope.failure(OSError("reset"))

        assert isinstance(result.error, OtherError)

    def test_requires_exactly_one_outcome(self):
        with pytest.raises(ValueError):
            ResultEnvelope()

        with pytest.raises(ValueError):
            ResultEnvelope(_value=1, error=StatusCodeError())
