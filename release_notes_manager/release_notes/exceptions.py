"""Custom exceptions for the release notes module."""


class InvalidVersionError(ValueError):
    """Raised when a version string is not in major.minor.patch form."""

    def __init__(self, version: str) -> None:
        """Initializes the exception with the offending version string."""
        super().__init__(f"Invalid semantic version: {version!r}")
        self.version = version


class ManifestError(Exception):
    """Raised when the project manifest cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        """Initializes the exception with the manifest path and the failure reason."""
        super().__init__(f"Unable to load manifest {path}: {reason}")
        self.path = path
        self.reason = reason
