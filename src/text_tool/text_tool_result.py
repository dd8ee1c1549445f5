"""Text tool result representation."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TextToolResult:
    """
    Result of a tool operation.

    A result with success=False is a diagnostic the caller can act on (for
    example, pass an occurrence index and retry); hard failures are raised as
    TextToolExecutionError instead.
    """
    id: str
    name: str
    success: bool
    message: str
    data: Dict[str, Any] | None = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the tool result to a dictionary.

        Returns:
            Dictionary representation of the tool result
        """
        result: Dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'success': self.success,
            'message': self.message
        }

        if self.data is not None:
            result['data'] = self.data

        return result
