"""Tests for the retry combinator."""

import pytest

from pipeline.errors import InvalidOrderError, MissingInputError
from utils.retry import RetryExhausted, RetryPolicy, is_transient, retry_call


class TestRetryCall:
    def test_succeeds_after_transient_failures(self) -> None:
        call_count = 0

        def flaky_operation() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 3:
                raise ConnectionError("Transient error")
            return "success"

        result = retry_call(flaky_operation, RetryPolicy(max_attempts=3, wait=0))

        assert result == "success"
        assert call_count == 3

    def test_exhaustion_reports_attempts_and_last_error(self) -> None:
        call_count = 0

        def always_fails() -> None:
            nonlocal call_count
            call_count += 1
            raise TimeoutError(f"failure {call_count}")

        with pytest.raises(RetryExhausted) as exc_info:
            retry_call(always_fails, RetryPolicy(max_attempts=2, wait=0))

        assert call_count == 2
        assert exc_info.value.attempts == 2
        assert str(exc_info.value.last_error) == "failure 2"

    def test_fatal_error_is_not_retried(self) -> None:
        call_count = 0

        def fatal() -> None:
            nonlocal call_count
            call_count += 1
            raise InvalidOrderError("bad order")

        with pytest.raises(InvalidOrderError):
            retry_call(fatal, RetryPolicy(max_attempts=5, wait=0))

        assert call_count == 1

    def test_on_retry_sees_each_failed_attempt(self) -> None:
        seen: list[int] = []
        outcomes = iter([ValueError("one"), ValueError("two"), "ok"])

        def operation() -> str:
            outcome = next(outcomes)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        result = retry_call(
            operation,
            RetryPolicy(max_attempts=3, wait=0),
            on_retry=lambda attempt, error: seen.append(attempt),
        )

        assert result == "ok"
        assert seen == [1, 2]

    def test_single_attempt_policy_does_not_retry(self) -> None:
        call_count = 0

        def fails() -> None:
            nonlocal call_count
            call_count += 1
            raise OSError("disk")

        with pytest.raises(RetryExhausted):
            retry_call(fails, RetryPolicy())

        assert call_count == 1

    def test_waits_fixed_interval_between_attempts(self, retry_sleeps) -> None:
        def always_fails() -> None:
            raise ConnectionError("down")

        with pytest.raises(RetryExhausted):
            retry_call(always_fails, RetryPolicy(max_attempts=4, wait=2.5))

        assert retry_sleeps == [2.5, 2.5, 2.5]

    def test_no_wait_after_success_or_fatal_error(self, retry_sleeps) -> None:
        outcomes = iter([TimeoutError("slow"), "ok"])

        def operation() -> str:
            outcome = next(outcomes)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        assert retry_call(operation, RetryPolicy(max_attempts=3, wait=7)) == "ok"
        assert retry_sleeps == [7]

        def fatal() -> None:
            raise InvalidOrderError("bad order")

        with pytest.raises(InvalidOrderError):
            retry_call(fatal, RetryPolicy(max_attempts=3, wait=7))
        assert retry_sleeps == [7]


class TestRetryPolicy:
    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=0)

    def test_rejects_negative_wait(self) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(max_attempts=1, wait=-1)


def test_is_transient_classification() -> None:
    assert is_transient(ConnectionError())
    assert is_transient(ValueError("bad yaml"))
    assert not is_transient(MissingInputError("files"))
    assert not is_transient(InvalidOrderError("dup"))
