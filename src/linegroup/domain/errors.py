class LineGroupError(Exception):
    """Base exception for domain-specific errors."""


class SourceNotFoundError(LineGroupError, FileNotFoundError):
    """Input is neither a file on disk nor a bundled resource."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"File {identifier} not found.")
        self.identifier = identifier


class ConfigurationError(LineGroupError):
    """Bad CLI args or unusable config (e.g., unknown report format)."""
