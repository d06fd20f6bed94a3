"""Version-control access for release notes generation."""

from .abc import VersionControlClientBase
from .client import GitCLIClient, parse_git_log
from .exceptions import GitCommandError

__all__ = ["VersionControlClientBase", "GitCLIClient", "GitCommandError", "parse_git_log"]
