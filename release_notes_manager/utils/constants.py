"""Shared constants used across the application."""

import re

# Generator Constants
# -------------------

COMMIT_LIMIT = 30
"""Number of most recent commits inspected on each run."""

DAYS_THRESHOLD = 7
"""Minimum number of days between two minor version bumps."""

VERSION_BUMP_RULES: dict[str, str] = {
    "feat": "minor",
    "feature": "minor",
    "fix": "patch",
    "bugfix": "patch",
    "hotfix": "patch",
    "patch": "patch",
    "style": "patch",
    "refactor": "patch",
    "perf": "patch",
    "performance": "patch",
    "chore": "patch",
    "docs": "patch",
    "documentation": "patch",
    "test": "patch",
    "testing": "patch",
    "BREAKING": "major",
    "BREAKING CHANGE": "major",
    "other": "patch",
}
"""Bump kind applied for each commit type. Unknown types fall back to a patch bump."""

BUMP_PRIORITY: dict[str, int] = {"major": 3, "minor": 2, "patch": 1}
"""Relative priority of bump kinds when several commits disagree."""

DEFAULT_FILTER_PHRASES: tuple[str, ...] = (
    "merge",
    "rebase",
    "release note",
    "release-note",
    "releasenote",
    "merge branch",
    "rebase branch",
    "pull request",
    "pr #",
    "merge pull request",
)
"""Lower-case phrases marking housekeeping commits that never become release notes."""

RELEASE_COMMIT_MESSAGE = "release note"
"""Message of the commit created after the notes and manifest are written."""

DEFAULT_VERSION = "0.0.0"
"""Version assumed when the manifest has no version field."""

# Regex Patterns
CONVENTIONAL_COMMIT_PATTERN = re.compile(r"^(feat|fix|style|refactor|perf|chore|docs|test|breaking change)(!?):")
"""Pattern to match conventional commit prefixes on a lower-cased message (e.g., feat!: ...)."""

SEMANTIC_VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")
"""Pattern to match a well-formed major.minor.patch version."""

# Git Constants
# -------------

GIT_LOG_FIELD_SEPARATOR = "|"
"""Separator between fields of a single commit record in git log output."""

GIT_LOG_FORMAT = GIT_LOG_FIELD_SEPARATOR.join(["%h", "%an", "%ae", "%ad", "%s"])
"""Pretty format requesting short hash, author name, author email, date and subject."""

# Default File Settings
DEFAULT_RELEASE_NOTES_PATH = "release-notes.json"
"""Default path to the release notes file."""

DEFAULT_MANIFEST_PATH = "package.json"
"""Default path to the project manifest holding the version field."""

JSON_INDENT = 2
"""Indentation used when pretty-printing the notes and manifest files."""

# Viewer Constants
# ----------------

VIEWER_CANDIDATE_PATHS: tuple[str, ...] = (
    "./release-notes.json",
    "release-notes.json",
    "./release-notes.json?t={timestamp}",
)
"""Relative locations tried in order when loading the notes. {timestamp} is a cache buster."""

VIEWER_FETCH_TIMEOUT = 30.0
"""Timeout in seconds for each HTTP fetch attempt."""

DEFAULT_VIEWER_OUTPUT_PATH = "release-notes.html"
"""Default path of the rendered viewer page."""
