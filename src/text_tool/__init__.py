"""Operation-based text tool framework."""

from text_tool.text_tool import TextTool
from text_tool.text_tool_argument_decoder import TextToolArgumentDecoder
from text_tool.text_tool_call import TextToolCall
from text_tool.text_tool_definition import TextToolDefinition
from text_tool.text_tool_exceptions import TextToolExecutionError
from text_tool.text_tool_file_view import TextToolFileView
from text_tool.text_tool_manager import TextToolManager
from text_tool.text_tool_operation_definition import TextToolOperationDefinition
from text_tool.text_tool_parameter import TextToolParameter
from text_tool.text_tool_registered import TextToolRegistered
from text_tool.text_tool_result import TextToolResult
from text_tool.text_tool_session import TextToolHistoryEntry, TextToolSession


__all__ = [
    "TextTool",
    "TextToolArgumentDecoder",
    "TextToolCall",
    "TextToolDefinition",
    "TextToolExecutionError",
    "TextToolFileView",
    "TextToolHistoryEntry",
    "TextToolManager",
    "TextToolOperationDefinition",
    "TextToolParameter",
    "TextToolRegistered",
    "TextToolResult",
    "TextToolSession",
]
