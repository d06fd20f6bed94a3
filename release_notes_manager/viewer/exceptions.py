"""Custom exceptions for the viewer module."""


class NotesLoadError(Exception):
    """Raised when no candidate location yields the release notes file."""

    def __init__(self, attempted: list[str], status_code: int | None = None, last_error: str | None = None) -> None:
        """Initializes the exception with the attempted locations and the last failure seen."""
        status = status_code if status_code is not None else "unknown"
        super().__init__(f"Failed to load release notes (status: {status}). {last_error or 'Failed to load JSON file'}")
        self.attempted = attempted
        self.status_code = status_code
        self.last_error = last_error
