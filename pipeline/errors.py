"""
================================================================================
PIPELINE ERRORS
================================================================================
Every error that can stop a tutorial run.

FATAL (subclasses of PipelineError, never retried):
    MissingInputError      - a step could not find a field it needs (wiring bug)
    ComputeExhaustedError  - a step's exec() failed on every allowed attempt
    InvalidOrderError      - the chapter order is not a permutation of [0, N)

TRANSIENT (retried by the step that raised them):
    MalformedResponseError - the LLM answered, but not in the requested shape
    LLMProviderError       - the provider request itself failed
================================================================================
"""


class PipelineError(Exception):
    """Base class for errors that abort the pipeline."""

    def __init__(self, message: str, step: str | None = None):
        super().__init__(message)
        self.message = message
        self.step = step

    def __str__(self) -> str:
        if self.step:
            return f"[{self.step}] {self.message}"
        return self.message


class MissingInputError(PipelineError):
    """A required shared-state field was absent when a step prepared."""

    def __init__(self, key: str, step: str | None = None):
        super().__init__(f"Required input '{key}' is missing from shared state", step)
        self.key = key


class ComputeExhaustedError(PipelineError):
    """A step's compute phase failed on every attempt of its retry budget."""

    def __init__(self, attempts: int, last_error: BaseException, step: str | None = None):
        super().__init__(
            f"Gave up after {attempts} attempt(s): "
            f"{type(last_error).__name__}: {last_error}",
            step,
        )
        self.attempts = attempts
        self.last_error = last_error


class InvalidOrderError(PipelineError):
    """A chapter order that does not cover every abstraction exactly once."""

    def __init__(self, message: str, order=None, expected: int | None = None, step: str | None = None):
        super().__init__(message, step)
        self.order = order
        self.expected = expected


class MalformedResponseError(ValueError):
    """LLM output that could not be parsed into the requested structure."""


class LLMProviderError(Exception):
    """The LLM provider could not be reached or returned an error status."""
