"""
================================================================================
STEP / BATCHSTEP
================================================================================
The PocketFlow node contract with retries and error reporting made uniform.

    prep(shared)                     - READ required fields from SharedState
         ↓
    exec(prep_res)                   - COMPUTE from prep_res only (retried)
         ↓
    post(shared, prep_res, exec_res) - WRITE results back to SharedState

exec() never touches the shared state, so a retry always sees the same input.
Retries go through utils.retry: PipelineErrors fail immediately, anything else
is retried up to max_retries attempts with a fixed wait in between.

A BatchStep's prep() returns a list of items. exec() runs once per item and
post() receives the results in item order.
================================================================================
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from pocketflow import Node

from utils.retry import RetryExhausted, RetryPolicy, is_transient, retry_call

from .errors import ComputeExhaustedError, PipelineError

logger = logging.getLogger(__name__)


class Step(Node):
    """One unit of pipeline work with a retry-wrapped compute phase."""

    def __init__(self, max_retries: int = 1, wait: float = 0):
        super().__init__(max_retries=max_retries, wait=wait)
        # Attempt index per thread, so parallel batch items do not reset each other
        self._attempt = threading.local()

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def cur_retry(self) -> int:
        """0 on the first attempt of the current exec() call, then 1, 2, ..."""
        return getattr(self._attempt, "index", 0)

    @cur_retry.setter
    def cur_retry(self, value: int) -> None:
        self._attempt.index = value

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(max_attempts=self.max_retries, wait=self.wait)

    def is_retryable(self, exc: BaseException) -> bool:
        return is_transient(exc)

    def _exec_with_retry(self, prep_res):
        self.cur_retry = 0

        def on_retry(attempt, error):
            # exec() reads cur_retry to skip the LLM cache on later attempts
            self.cur_retry = attempt

        try:
            return retry_call(
                lambda: self.exec(prep_res),
                self.retry_policy,
                is_retryable=self.is_retryable,
                on_retry=on_retry,
            )
        except RetryExhausted as e:
            raise ComputeExhaustedError(e.attempts, e.last_error, step=self.name) from e.last_error

    def _exec(self, prep_res):
        return self._exec_with_retry(prep_res)

    def _run(self, shared):
        logger.info("Running step %s", self.name)
        try:
            result = super()._run(shared)
        except PipelineError as e:
            if e.step is None:
                e.step = self.name
            logger.error("Step %s failed: %s", self.name, e)
            raise
        logger.info("Finished step %s", self.name)
        return result


class BatchStep(Step):
    """
    Step whose prep() returns an ordered list of independent items.

    With max_workers > 1 the items are dispatched to a thread pool; results are
    still collected in item order. Keep the default (sequential) for steps
    whose items build on each other's output.
    """

    def __init__(self, max_retries: int = 1, wait: float = 0, max_workers: int = 1):
        super().__init__(max_retries=max_retries, wait=wait)
        self.max_workers = max_workers

    def _exec(self, items):
        items = list(items or [])
        if not items:
            return []
        if self.max_workers > 1 and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                return list(pool.map(self._exec_with_retry, items))
        return [self._exec_with_retry(item) for item in items]
