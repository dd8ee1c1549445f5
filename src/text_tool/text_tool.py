"""Abstract base class for text tools."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from text_tool.text_tool_call import TextToolCall
from text_tool.text_tool_definition import TextToolDefinition
from text_tool.text_tool_exceptions import TextToolExecutionError
from text_tool.text_tool_operation_definition import TextToolOperationDefinition
from text_tool.text_tool_parameter import TextToolParameter
from text_tool.text_tool_result import TextToolResult
from text_tool.text_tool_session import TextToolSession


class TextTool(ABC):
    """Abstract base class for text tools."""

    @abstractmethod
    def get_definition(self) -> TextToolDefinition:
        """
        Get the tool definition for registration.

        Returns:
            TextToolDefinition describing this tool's interface
        """

    def get_operation_definitions(self) -> Dict[str, TextToolOperationDefinition]:
        """
        Get operation definitions for this tool.

        Returns:
            Dictionary mapping operation names to their definitions.
        """
        return {}

    def execute(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """
        Run the operation a tool call names.

        The operation's parameters are checked before its handler runs.
        Handlers raise TextToolExecutionError for problems the caller caused;
        anything else they raise is logged and wrapped in one.

        Args:
            tool_call: Tool call containing arguments and metadata
            session: Session the call runs in

        Returns:
            TextToolResult describing the outcome

        Raises:
            TextToolExecutionError: If the call is malformed or the operation fails
        """
        operation = self._resolve_operation(tool_call.arguments)
        operation.check_arguments(tool_call.arguments)

        logger = self.get_logger()
        logger.debug("%s operation requested: %s", self.get_tool_name(), operation.name)

        try:
            return operation.handler(tool_call, session)

        except TextToolExecutionError:
            raise

        except Exception as e:
            logger.error(
                "Unexpected error in %s operation '%s': %s",
                self.get_tool_name(), operation.name, str(e), exc_info=True
            )
            raise TextToolExecutionError(f"{self.get_tool_name()} operation failed: {str(e)}") from e

    def _resolve_operation(self, arguments: Dict[str, Any]) -> TextToolOperationDefinition:
        """
        Look up the operation named in a call's arguments.

        Raises:
            NotImplementedError: If the tool defines no operations
            TextToolExecutionError: If the operation is missing or unknown
        """
        operations = self.get_operation_definitions()
        if not operations:
            raise NotImplementedError(
                f"{self.__class__.__name__} must either define operations or override execute()"
            )

        name = arguments.get("operation")
        if not name:
            raise TextToolExecutionError("No 'operation' argument provided")

        if not isinstance(name, str):
            raise TextToolExecutionError("'operation' must be a string")

        operation = operations.get(name)
        if operation is None:
            raise TextToolExecutionError(
                f"Unsupported operation: {name}. Available operations: {', '.join(sorted(operations))}"
            )

        return operation

    def get_logger(self) -> logging.Logger:
        """
        Get logger for this tool.

        Subclasses can override to provide custom logger.

        Returns:
            Logger instance for this tool
        """
        return logging.getLogger(self.__class__.__name__)

    def get_tool_name(self) -> str:
        """
        Get tool name for logging and error messages.

        Returns:
            Tool name string
        """
        # Default: remove "TextTool" suffix and convert to lowercase
        class_name = self.__class__.__name__
        if class_name.endswith("TextTool"):
            return class_name[:-8].lower()

        return class_name.lower()

    def _build_definition_from_operations(
        self,
        name: str,
        description_prefix: str,
        additional_parameters: List[TextToolParameter] | None = None
    ) -> TextToolDefinition:
        """
        Build tool definition from operation definitions.

        Args:
            name: Tool name
            description_prefix: Description text before operation list
            additional_parameters: Optional additional parameters beyond standard 'operation' parameter

        Returns:
            Complete tool definition
        """
        operations = self.get_operation_definitions()
        operation_names = list(operations.keys())

        operation_list = []
        for op_name, op_def in operations.items():
            operation_list.append(f"- {op_name}: {op_def.description}")

        description = f"{description_prefix}\n\nAvailable operations:\n\n" + "\n".join(operation_list)

        parameters = [
            TextToolParameter(
                name="operation",
                type="string",
                description=f"{name.capitalize()} operation to perform",
                required=True,
                enum=operation_names
            )
        ]

        if additional_parameters:
            parameters.extend(additional_parameters)

        return TextToolDefinition(
            name=name,
            description=description,
            parameters=parameters
        )
