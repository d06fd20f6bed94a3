"""Contains exceptions raised when invoking git."""


class GitCommandError(Exception):
    """Raised when a git command cannot be run or exits with a non-zero status."""

    def __init__(self, command: list[str], reason: str) -> None:
        """Initializes the exception with the failed command and the reason it failed."""
        super().__init__(f"Git command failed ({' '.join(command)}): {reason}")
        self.command = command
        self.reason = reason
