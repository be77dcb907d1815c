"""Tests for the Step / BatchStep contract."""
from __future__ import annotations

import threading
import time

import pytest
from pocketflow import Flow

from pipeline.errors import ComputeExhaustedError, InvalidOrderError, MissingInputError
from pipeline.state import SharedState
from pipeline.step import BatchStep, Step


class CountingStep(Step):
    """Reads files, counts them, stores the count as project_name."""

    def __init__(self, failures: int = 0, **kwargs) -> None:
        super().__init__(**kwargs)
        self.failures = failures
        self.exec_calls = 0
        self.seen_retries: list[int] = []

    def prep(self, shared):
        return shared.require("files")

    def exec(self, prep_res):
        self.exec_calls += 1
        self.seen_retries.append(self.cur_retry)
        if self.exec_calls <= self.failures:
            raise ConnectionError("provider unavailable")
        return str(len(prep_res))

    def post(self, shared, prep_res, exec_res):
        shared.project_name = exec_res


class EchoBatch(BatchStep):
    def __init__(self, fail_on=None, fail_times: int = 0, delay_for=None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.fail_on = fail_on
        self.fail_times = fail_times
        self.delay_for = delay_for or {}
        self.calls: dict[str, int] = {}
        self._lock = threading.Lock()

    def prep(self, shared):
        return [path for path, _ in shared.require("files")]

    def exec(self, item):
        with self._lock:
            self.calls[item] = self.calls.get(item, 0) + 1
            count = self.calls[item]
        time.sleep(self.delay_for.get(item, 0))
        if item == self.fail_on and count <= self.fail_times:
            raise TimeoutError(f"timeout on {item}")
        return item.upper()

    def post(self, shared, prep_res, exec_res):
        shared.chapters = exec_res


class AttemptRecordingBatch(EchoBatch):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.attempts_seen: list[tuple[str, int]] = []

    def exec(self, item):
        with self._lock:
            self.attempts_seen.append((item, self.cur_retry))
        return super().exec(item)


def _state(*paths: str) -> SharedState:
    return SharedState(files=[(p, "") for p in paths])


class TestStep:
    def test_prepare_missing_input_never_reaches_compute(self) -> None:
        step = CountingStep()
        with pytest.raises(MissingInputError) as exc_info:
            step.run(SharedState())

        assert step.exec_calls == 0
        assert exc_info.value.key == "files"
        assert exc_info.value.step == "CountingStep"
        assert str(exc_info.value).startswith("[CountingStep]")

    def test_retries_until_success(self) -> None:
        step = CountingStep(failures=2, max_retries=3, wait=0)
        state = _state("a.py")

        step.run(state)

        assert step.exec_calls == 3
        assert state.project_name == "1"
        assert step.seen_retries == [0, 1, 2]

    def test_fixed_wait_between_attempts(self, retry_sleeps) -> None:
        step = CountingStep(failures=2, max_retries=3, wait=10)

        step.run(_state("a.py"))

        assert step.exec_calls == 3
        assert retry_sleeps == [10, 10]

    def test_exhausted_retries_leave_state_untouched(self) -> None:
        step = CountingStep(failures=3, max_retries=3, wait=0)
        state = _state("a.py")

        with pytest.raises(ComputeExhaustedError) as exc_info:
            step.run(state)

        assert step.exec_calls == 3
        assert exc_info.value.attempts == 3
        assert isinstance(exc_info.value.last_error, ConnectionError)
        assert exc_info.value.step == "CountingStep"
        assert state.project_name is None

    def test_fatal_compute_error_is_raised_unwrapped(self) -> None:
        class Fatal(CountingStep):
            def exec(self, prep_res):
                self.exec_calls += 1
                raise InvalidOrderError("not a permutation")

        step = Fatal(max_retries=3, wait=0)
        with pytest.raises(InvalidOrderError) as exc_info:
            step.run(_state("a.py"))

        assert step.exec_calls == 1
        assert exc_info.value.step == "Fatal"


class TestBatchStep:
    def test_outputs_follow_item_order(self) -> None:
        step = EchoBatch()
        state = _state("a", "b", "c")

        step.run(state)

        assert state.chapters == ["A", "B", "C"]

    def test_empty_batch_skips_compute(self) -> None:
        step = EchoBatch()
        state = _state()

        step.run(state)

        assert state.chapters == []
        assert step.calls == {}

    def test_item_retry_budget(self) -> None:
        step = EchoBatch(fail_on="b", fail_times=2, max_retries=3, wait=0)
        state = _state("a", "b", "c")

        step.run(state)

        assert state.chapters == ["A", "B", "C"]
        assert step.calls == {"a": 1, "b": 3, "c": 1}

    def test_exhausted_item_writes_nothing(self) -> None:
        step = EchoBatch(fail_on="b", fail_times=3, max_retries=3, wait=0)
        state = _state("a", "b", "c")

        with pytest.raises(ComputeExhaustedError):
            step.run(state)

        assert step.calls["b"] == 3
        assert "c" not in step.calls
        assert state.chapters is None

    def test_parallel_dispatch_keeps_input_order(self) -> None:
        # The first item finishes last
        step = EchoBatch(max_workers=3, delay_for={"a": 0.05})
        state = _state("a", "b", "c")

        step.run(state)

        assert state.chapters == ["A", "B", "C"]

    def test_parallel_retry_keeps_its_own_attempt_index(self) -> None:
        # "a" waits to retry while "b" finishes and "c" starts on the freed worker
        step = AttemptRecordingBatch(
            fail_on="a", fail_times=1, delay_for={"b": 0.02},
            max_workers=2, max_retries=2, wait=0.2,
        )
        state = _state("a", "b", "c")

        step.run(state)

        assert state.chapters == ["A", "B", "C"]
        assert sorted(step.attempts_seen) == [("a", 0), ("a", 1), ("b", 0), ("c", 0)]


def test_flow_runs_steps_in_sequence_and_stops_on_failure() -> None:
    first = CountingStep()
    second = CountingStep(failures=1)
    third = EchoBatch()
    first >> second >> third
    state = _state("a", "b")

    with pytest.raises(ComputeExhaustedError) as exc_info:
        Flow(start=first).run(state)

    assert exc_info.value.step == "CountingStep"
    assert state.project_name == "2"
    assert state.chapters is None
