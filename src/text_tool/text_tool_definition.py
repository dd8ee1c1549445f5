"""Text tool definition."""

from dataclasses import dataclass
from typing import Any, Dict, List

from text_tool.text_tool_parameter import TextToolParameter


@dataclass
class TextToolDefinition:
    """Definition of an available tool."""
    name: str
    description: str
    parameters: List[TextToolParameter]

    def to_json_schema(self) -> Dict[str, Any]:
        """
        Convert the definition to a function-calling schema.

        Returns:
            Dictionary in the "type: function" layout used by LLM tool APIs
        """
        properties: Dict[str, Any] = {}
        required = []

        for param in self.parameters:
            properties[param.name] = param.to_json_schema()
            if param.required:
                required.append(param.name)

        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": properties,
                    "required": required
                }
            }
        }
