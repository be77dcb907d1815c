"""
Retry combinator for step computations, built on tenacity.

A single policy object (attempt count + fixed wait) and a classifier decide
whether a failed call is tried again. Fatal errors pass straight through on
the first failure; transient ones are retried until the budget runs out.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from tenacity import RetryError, Retrying, retry_if_exception, stop_after_attempt, wait_fixed

from pipeline.errors import PipelineError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryExhausted(Exception):
    """Raised when every attempt allowed by the policy has failed."""

    def __init__(self, attempts: int, last_error: BaseException):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"Retries exhausted after {attempts} attempt(s): {last_error}")


@dataclass(frozen=True)
class RetryPolicy:
    """
    max_attempts is the TOTAL number of tries, so 3 means try, retry, retry.
    wait is a fixed pause in seconds between attempts.
    """

    max_attempts: int = 1
    wait: float = 0.0

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.wait < 0:
            raise ValueError("wait must be >= 0")


def is_transient(exc: BaseException) -> bool:
    """Pipeline errors signal broken invariants; everything else may pass on retry."""
    return not isinstance(exc, PipelineError)


def retry_call(
    operation: Callable[[], T],
    policy: RetryPolicy,
    *,
    is_retryable: Callable[[BaseException], bool] = is_transient,
    on_retry: Callable[[int, BaseException], None] | None = None,
) -> T:
    """
    Run operation() under the given retry policy.

    Args:
        operation: Zero-argument callable to execute
        policy: Attempt budget and wait between attempts
        is_retryable: Classifier; a False result re-raises the error at once
        on_retry: Called as on_retry(attempt, error) before each new attempt,
                  where attempt is the 1-based number of the failed try

    Returns:
        Whatever operation() returned on its first successful attempt

    Raises:
        RetryExhausted: if every attempt failed with a retryable error
        Exception: the original error when it is not retryable
    """
    attempt = 0
    last_error: BaseException | None = None

    try:
        for attempt_state in Retrying(
            stop=stop_after_attempt(policy.max_attempts),
            wait=wait_fixed(policy.wait),
            retry=retry_if_exception(is_retryable),
            reraise=False,
        ):
            with attempt_state:
                attempt = attempt_state.retry_state.attempt_number
                try:
                    return operation()
                except Exception as e:
                    last_error = e
                    if is_retryable(e) and attempt < policy.max_attempts:
                        logger.warning(
                            "Attempt %d/%d failed (%s: %s), retrying in %ss",
                            attempt, policy.max_attempts, type(e).__name__, e, policy.wait,
                        )
                        if on_retry:
                            on_retry(attempt, e)
                    raise
    except RetryError as e:
        final_error = last_error or e.last_attempt.exception()
        raise RetryExhausted(attempt, final_error) from final_error

    raise RuntimeError("Unexpected state in retry loop")  # pragma: no cover
