"""
Tutorial Flow - Pipeline Engine Package
"""

from .errors import (
    PipelineError,
    MissingInputError,
    ComputeExhaustedError,
    InvalidOrderError,
    MalformedResponseError,
    LLMProviderError,
)
from .state import SharedState, Abstraction, Relationship, RelationshipMap
from .step import Step, BatchStep

__all__ = [
    'PipelineError',
    'MissingInputError',
    'ComputeExhaustedError',
    'InvalidOrderError',
    'MalformedResponseError',
    'LLMProviderError',
    'SharedState',
    'Abstraction',
    'Relationship',
    'RelationshipMap',
    'Step',
    'BatchStep',
]
