"""
Textprep exception hierarchy.

The text pipeline itself never raises: every operation is total over its
input. These exceptions cover the configuration layer that feeds it.
"""


class TextprepError(Exception):
    """Base exception class for all textprep errors."""


class ConfigurationError(TextprepError):
    """Raised for configuration errors (invalid values, malformed stop-word files)."""


class FileIOError(TextprepError):
    """Raised when a configured file cannot be read."""
