"""Exception classes for marktoc.

The renderer itself never raises on malformed event streams; these
exceptions cover configuration and the external event source.
"""

from __future__ import annotations


class MarktocError(Exception):
    """Base exception for all marktoc errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(MarktocError):
    """Invalid render configuration.

    Raised for unknown policy names, wrongly typed values, and config files
    that cannot be read or decoded.
    """

    def __init__(self, message: str, source_file: str | None = None) -> None:
        """Initialize config error with optional file context.

        Args:
            message: Error description
            source_file: Path of the config file being loaded (optional)
        """
        self.message = message
        self.source_file = source_file

        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")


class EventSourceError(MarktocError):
    """Failure inside the external markdown-to-event collaborator."""

    def __init__(self, source_name: str, message: str) -> None:
        """Initialize event source error.

        Args:
            source_name: Name of the failing event source
            message: Description of the error
        """
        self.source_name = source_name
        super().__init__(f"Event source '{source_name}': {message}")
