"""Exception classes for confdir operations."""


class ConfdirError(Exception):
    """Base exception for confdir operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional file or format name that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ConfigParseError(ConfdirError, ValueError):
    """Raised when file contents cannot be decoded by their format."""

    error_prefix = "Parse failed"


class UnknownFormatError(ConfdirError, KeyError):
    """Raised when a format id is not in the registry."""

    error_prefix = "Unknown format"

    def __str__(self) -> str:
        """Return formatted error message.

        KeyError would otherwise repr() the message.
        """
        return ConfdirError.__str__(self)
