"""Internal representation of registered text tool."""

from dataclasses import dataclass

from text_tool.text_tool import TextTool


@dataclass
class TextToolRegistered:
    """Internal representation of a registered tool."""
    tool: TextTool
    display_name: str
    enabled_by_default: bool
