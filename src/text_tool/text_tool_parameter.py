"""Text tool parameter definition."""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class TextToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str  # "string", "integer", "number", "boolean", "object"
    description: str
    required: bool = True
    enum: List[str] | None = None
    properties: Dict[str, 'TextToolParameter'] | None = None  # For object types

    def to_json_schema(self) -> Dict[str, Any]:
        """
        Convert the parameter to a JSON schema fragment.

        Returns:
            JSON schema for this parameter
        """
        schema: Dict[str, Any] = {
            "type": self.type,
            "description": self.description
        }

        if self.enum:
            schema["enum"] = self.enum

        if self.properties:
            schema["properties"] = {
                name: prop.to_json_schema() for name, prop in self.properties.items()
            }

        return schema
