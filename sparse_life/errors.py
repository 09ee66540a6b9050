"""Custom exceptions used throughout the sparse_life package."""

from typing import Any, Optional


class LifeError(Exception):
    """Base exception for all sparse_life errors.

    The engine itself never raises for coordinates; these errors come from
    configuration and the outer layers built on top of it.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeError):
    """Raised when a configuration value is missing or invalid."""

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class PatternError(LifeError):
    """Raised when a named seed pattern does not exist."""

    def __init__(self, name: str, available: Optional[list[str]] = None):
        self.name = name
        self.available = available or []
        message = f"Unknown pattern '{name}'"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message, details={"name": name})
