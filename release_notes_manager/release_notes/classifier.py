"""Commit message classification.

Two classifiers live here. ``detect_commit_type`` is the authoritative one used
when building release notes and resolving version bumps. ``detect_display_type``
is a lighter pass used only to tag already persisted messages in the viewer, so
the same message may be tagged differently by the two.
"""

from release_notes_manager.release_notes.models import CommitType
from release_notes_manager.utils.constants import CONVENTIONAL_COMMIT_PATTERN

# Checked in order, first matching group wins.
PREFIX_GROUPS: list[tuple[CommitType, tuple[str, ...]]] = [
    (CommitType.FEAT, ("feat", "feature", "add", "implement")),
    (CommitType.FIX, ("fix", "bugfix", "bug", "hotfix")),
    (CommitType.CHORE, ("chore", "maintenance", "cleanup")),
    (CommitType.STYLE, ("style", "format", "css", "ui")),
    (CommitType.REFACTOR, ("refactor", "restructure")),
    (CommitType.PERF, ("perf", "performance", "optimize")),
    (CommitType.TEST, ("test", "testing", "spec")),
    (CommitType.DOCS, ("docs", "documentation", "doc")),
]

BREAKING_MARKERS = ("breaking change", "breaking!")

DISPLAY_PREFIX_GROUPS: list[tuple[str, tuple[str, ...]]] = [
    ("feat", ("feat", "feature")),
    ("fix", ("fix", "bugfix")),
    ("style", ("style",)),
    ("refactor", ("refactor",)),
    ("perf", ("perf", "performance")),
    ("chore", ("chore",)),
    ("docs", ("docs", "documentation")),
    ("test", ("test", "testing")),
]


def detect_commit_type(message: str) -> CommitType:
    """Classify a commit message into a single commit type."""
    lower_message = message.lower()

    conventional_match = CONVENTIONAL_COMMIT_PATTERN.match(lower_message)
    if conventional_match:
        keyword = conventional_match.group(1)
        if keyword == "breaking change":
            return CommitType.BREAKING
        return CommitType(keyword)

    for commit_type, prefixes in PREFIX_GROUPS:
        if lower_message.startswith(prefixes):
            return commit_type

    if any(marker in lower_message for marker in BREAKING_MARKERS):
        return CommitType.BREAKING

    return CommitType.OTHER


def detect_display_type(message: str) -> str:
    """Tag a persisted commit message for display in the viewer."""
    lower_message = message.lower()

    for tag, prefixes in DISPLAY_PREFIX_GROUPS:
        if lower_message.startswith(prefixes):
            return tag

    if "breaking" in lower_message:
        return "breaking"

    return "other"
