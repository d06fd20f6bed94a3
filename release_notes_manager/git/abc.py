"""Base ABC for version-control clients."""

from abc import ABC, abstractmethod

from release_notes_manager.release_notes.models import Commit


class VersionControlClientBase(ABC):
    """Base ABC for version-control clients."""

    @abstractmethod
    def fetch_recent_history(self, limit: int) -> list[Commit]:
        """Fetch the most recent ``limit`` commits, newest first."""
        pass

    @abstractmethod
    def commit_all(self, message: str) -> None:
        """Stage every working-tree change and create a commit with ``message``."""
        pass
