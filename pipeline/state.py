"""
================================================================================
SHARED STATE
================================================================================
The single object every step reads from and writes to during one run.

It replaces the free-form ``shared`` dictionary with a closed set of typed
fields. Configuration fields are filled by the driver before the run starts;
output fields start as ``None`` and are written by exactly one step's post():

    files            <- FetchRepo             [(path, content), ...]
    abstractions     <- IdentifyAbstractions  [Abstraction, ...]
    relationships    <- AnalyzeRelationships  RelationshipMap
    chapter_order    <- OrderChapters         [abstraction_index, ...]
    chapters         <- WriteChapters         [markdown, ...]
    final_output_dir <- CombineTutorial       str
================================================================================
"""

from dataclasses import dataclass, field

from constants.defaults import (
    DEFAULT_EXCLUDE_PATTERNS,
    DEFAULT_INCLUDE_PATTERNS,
    DEFAULT_LANGUAGE,
    DEFAULT_MAX_ABSTRACTIONS,
    DEFAULT_MAX_FILE_SIZE,
)
from constants.paths import DEFAULT_OUTPUT_DIR

from .errors import MissingInputError


@dataclass(frozen=True)
class Abstraction:
    """A core concept of the codebase and the files that implement it."""

    name: str
    description: str
    files: tuple[int, ...] = ()


@dataclass(frozen=True)
class Relationship:
    """Directed edge between two abstractions, by index."""

    source: int
    target: int
    label: str


@dataclass(frozen=True)
class RelationshipMap:
    summary: str
    details: tuple[Relationship, ...] = ()


@dataclass
class SharedState:
    # Configuration (set by run.py)
    local_dir: str | None = None
    repo_url: str | None = None
    project_name: str | None = None
    github_token: str | None = None
    output_dir: str = DEFAULT_OUTPUT_DIR
    include_patterns: set[str] = field(default_factory=lambda: set(DEFAULT_INCLUDE_PATTERNS))
    exclude_patterns: set[str] = field(default_factory=lambda: set(DEFAULT_EXCLUDE_PATTERNS))
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    language: str = DEFAULT_LANGUAGE
    use_cache: bool = True
    max_abstraction_num: int = DEFAULT_MAX_ABSTRACTIONS

    # Outputs (populated by the steps)
    files: list[tuple[str, str]] | None = None
    abstractions: list[Abstraction] | None = None
    relationships: RelationshipMap | None = None
    chapter_order: list[int] | None = None
    chapters: list[str] | None = None
    final_output_dir: str | None = None

    def require(self, name: str):
        """
        Return a field that an earlier step must have produced.

        Raises:
            MissingInputError: if the field is unset (None)
        """
        value = getattr(self, name, None)
        if value is None:
            raise MissingInputError(name)
        return value
