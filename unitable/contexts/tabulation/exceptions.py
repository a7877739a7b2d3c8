"""Custom exceptions for the tabulation context."""

from typing import Any, Optional


class ConfigurationError(ValueError):
    """
    Exception raised when a table configuration value is invalid.

    Attributes:
        message: Error description
        key: Configuration key that failed validation (e.g., 'header_interval')
        value: The offending value
    """

    def __init__(self, message: str, key: Optional[str] = None, value: Any = None):
        self.message = message
        self.key = key
        self.value = value

        parts = [message]
        if key is not None:
            parts.append(f"Key: {key}")
            parts.append(f"Value: {value!r}")

        super().__init__("\n".join(parts))


class UnknownColumnError(ConfigurationError):
    """Exception raised when a column name does not match any Column member."""

    def __init__(self, name: str):
        super().__init__(f"Unknown column: {name!r}", key="columns", value=name)
        self.name = name
