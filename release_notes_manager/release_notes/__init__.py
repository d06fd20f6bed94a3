"""Release notes generation module."""

from .builder import build_release_notes, commit_exists, filter_commits, find_new_commits, group_commits_by_author, should_filter_commit
from .classifier import detect_commit_type, detect_display_type
from .exceptions import InvalidVersionError, ManifestError
from .models import (
    AuthorRelease,
    BuildResult,
    BuildState,
    BumpKind,
    Commit,
    CommitType,
    ReleaseNote,
    ReleaseNotesResult,
    ReleaseNotesStatus,
)
from .storage import load_manifest, load_release_notes, manifest_version, save_manifest, save_release_notes
from .versioning import bump_version, highest_priority_type, resolve_bump_kind, should_bump_minor

__all__ = [
    "AuthorRelease",
    "BuildResult",
    "BuildState",
    "BumpKind",
    "Commit",
    "CommitType",
    "ReleaseNote",
    "ReleaseNotesResult",
    "ReleaseNotesStatus",
    "InvalidVersionError",
    "ManifestError",
    "detect_commit_type",
    "detect_display_type",
    "bump_version",
    "highest_priority_type",
    "resolve_bump_kind",
    "should_bump_minor",
    "should_filter_commit",
    "filter_commits",
    "commit_exists",
    "find_new_commits",
    "group_commits_by_author",
    "build_release_notes",
    "load_release_notes",
    "save_release_notes",
    "load_manifest",
    "manifest_version",
    "save_manifest",
]
