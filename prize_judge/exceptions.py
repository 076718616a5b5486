"""
Exception classes for the prize judge system.

Centralized location for all custom exceptions to avoid circular imports.
The candidate tracking core never raises; these belong to the layers around it.
"""


class ValidationError(Exception):
    """Base exception for validation-related errors."""
    pass


class ConfigurationError(Exception):
    """Base exception for configuration-related errors."""
    pass


class StorageError(Exception):
    """Base exception for winner storage errors."""
    pass


class DuplicateWinnerError(StorageError):
    """Raised when a prize receives a second winner between two resets."""
    pass
