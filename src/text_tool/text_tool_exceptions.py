"""Exception classes for the text tool framework."""

from typing import Any


class TextToolExecutionError(Exception):
    """Exception raised when tool execution fails."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize tool execution error.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details
