"""Data models for release notes generation."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, TypeAdapter, field_validator

from release_notes_manager.utils.constants import SEMANTIC_VERSION_PATTERN
from release_notes_manager.utils.helpers import parse_timestamp


class CommitType(str, Enum):
    """Category assigned to a commit message by the generator."""

    FEAT = "feat"
    FIX = "fix"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    CHORE = "chore"
    DOCS = "docs"
    TEST = "test"
    BREAKING = "BREAKING"
    OTHER = "other"


class BumpKind(str, Enum):
    """Semantic version component to increment."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class ReleaseNotesStatus(str, Enum):
    """Status of release notes generation."""

    UP_TO_DATE = "up_to_date"
    SUCCESS = "success"
    DRY_RUN = "dry_run"
    NO_CONTENT = "no_content"


@dataclass(frozen=True)
class Commit:
    """A single commit reported by the version-control history query."""

    hash: str
    author: str
    email: str
    date: str
    message: str


class ReleaseNote(BaseModel):
    """A persisted release note covering one developer's commits in one run."""

    version: str
    date: str
    developer: str
    changes: list[str]

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: str) -> str:
        """Ensure the version is a major.minor.patch string."""
        if not SEMANTIC_VERSION_PATTERN.match(value):
            raise ValueError(f"Version must be in major.minor.patch form, got {value!r}")
        return value

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        """Ensure the date is an ISO-8601 timestamp."""
        parse_timestamp(value)
        return value


ReleaseNotesAdapter: TypeAdapter[list[ReleaseNote]] = TypeAdapter(list[ReleaseNote])
"""Validates and dumps the release notes collection stored in the notes file."""


@dataclass(frozen=True)
class BuildState:
    """Accumulator threaded through the per-author build loop."""

    notes: tuple[ReleaseNote, ...]
    version: str


@dataclass(frozen=True)
class AuthorRelease:
    """Summary of the release note produced for one author."""

    author: str
    commit_count: int
    highest_priority_type: str
    bump_kind: BumpKind
    version: str


@dataclass(frozen=True)
class BuildResult:
    """Outcome of building release notes for a batch of new commits."""

    state: BuildState
    authors: tuple[AuthorRelease, ...] = ()


class ReleaseNotesResult(BaseModel):
    """Result of release notes generation."""

    status: ReleaseNotesStatus
    previous_version: str | None = None
    version: str | None = None
    new_notes: int = 0
    authors: list[str] = []
    commit_created: bool = False
    error: str | None = None
