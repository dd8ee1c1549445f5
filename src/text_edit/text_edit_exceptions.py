"""Custom exceptions for text edit operations."""

from typing import Any


class TextEditError(Exception):
    """Base exception for text edit operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class TextEditValidationError(TextEditError):
    """Raised when a selection or line range is out of bounds (e.g., bad occurrence index)."""


class TextEditPatternError(TextEditError):
    """Raised when a search pattern cannot be compiled."""


class TextEditApplicationError(TextEditError):
    """Raised when an edit cannot be spliced into the buffer it was computed against."""
