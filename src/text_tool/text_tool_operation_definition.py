"""Text tool operation definition."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Set

from text_tool.text_tool_exceptions import TextToolExecutionError


@dataclass
class TextToolOperationDefinition:
    """Definition of a tool operation (sub-command)."""
    name: str
    handler: Callable
    allowed_parameters: Set[str]
    required_parameters: Set[str]
    description: str

    def check_arguments(self, arguments: Dict[str, Any]) -> None:
        """
        Check that a call supplies only allowed parameters and every required one.

        The 'operation' key itself is always accepted.

        Args:
            arguments: Tool call arguments

        Raises:
            TextToolExecutionError: If a parameter is not allowed or a required one is missing
        """
        provided = set(arguments) - {"operation"}

        invalid = provided - self.allowed_parameters
        if invalid:
            raise TextToolExecutionError(
                f"Parameter(s) {', '.join(sorted(invalid))} not valid for operation '{self.name}'",
                {"invalid_parameters": sorted(invalid)}
            )

        missing = self.required_parameters - provided
        if missing:
            raise TextToolExecutionError(
                f"Required parameter(s) {', '.join(sorted(missing))} missing for operation '{self.name}'",
                {"missing_parameters": sorted(missing)}
            )
