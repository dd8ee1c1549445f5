"""Singleton manager for text tools."""

import logging
from typing import Dict, List

from text_tool.text_tool import TextTool
from text_tool.text_tool_call import TextToolCall
from text_tool.text_tool_definition import TextToolDefinition
from text_tool.text_tool_exceptions import TextToolExecutionError
from text_tool.text_tool_registered import TextToolRegistered
from text_tool.text_tool_result import TextToolResult
from text_tool.text_tool_session import TextToolSession


class TextToolManager:
    """Singleton manager for text tools."""

    _instance: 'TextToolManager | None' = None

    def __new__(cls) -> 'TextToolManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_initialized'):
            self._registered_tools: Dict[str, TextToolRegistered] = {}
            self._enabled_tools: Dict[str, bool] = {}
            self._logger = logging.getLogger("TextToolManager")
            self._initialized = True

    def register_tool(self, tool: TextTool, display_name: str, enabled_by_default: bool = True) -> None:
        """
        Register a tool.

        Args:
            tool: The tool to register
            display_name: Human-readable name for the tool
            enabled_by_default: Whether the tool should be enabled by default

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        definition = tool.get_definition()

        if definition.name in self._registered_tools:
            raise ValueError(f"Tool '{definition.name}' is already registered")

        self._registered_tools[definition.name] = TextToolRegistered(
            tool=tool,
            display_name=display_name,
            enabled_by_default=enabled_by_default
        )

        # Set default enabled state if not already configured
        if definition.name not in self._enabled_tools:
            self._enabled_tools[definition.name] = enabled_by_default

        self._logger.info("Registered tool: %s (display: %s)", definition.name, display_name)

    def unregister_tool(self, name: str) -> None:
        """
        Unregister a tool.

        Args:
            name: Name of the tool to unregister
        """
        if name in self._registered_tools:
            del self._registered_tools[name]
            if name in self._enabled_tools:
                del self._enabled_tools[name]

            self._logger.info("Unregistered tool: %s", name)

    def set_tool_enabled(self, tool_name: str, enabled: bool) -> None:
        """
        Enable or disable a tool.

        Args:
            tool_name: Name of the tool to enable/disable
            enabled: Whether the tool should be enabled
        """
        self._enabled_tools[tool_name] = enabled
        self._logger.debug("Tool '%s' %s", tool_name, "enabled" if enabled else "disabled")

    def is_tool_enabled(self, tool_name: str) -> bool:
        """
        Check if a tool is enabled.

        Args:
            tool_name: Name of the tool to check

        Returns:
            True if the tool is enabled, False otherwise
        """
        return self._enabled_tools.get(tool_name, True)

    def get_tool_definitions(self) -> List[TextToolDefinition]:
        """
        Get definitions for all registered and enabled tools.

        Returns:
            List of tool definitions for enabled tools only
        """
        return [
            registered_tool.tool.get_definition()
            for tool_name, registered_tool in self._registered_tools.items()
            if self.is_tool_enabled(tool_name)
        ]

    def get_tool(self, name: str) -> TextTool | None:
        """
        Get a registered tool by its name.

        Args:
            name: Name of the tool to retrieve

        Returns:
            The registered tool instance, or None if not found
        """
        registered_tool = self._registered_tools.get(name)
        return registered_tool.tool if registered_tool else None

    def execute(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """
        Route a tool call to the tool it names.

        Args:
            tool_call: Tool call to run
            session: Session the call runs in

        Returns:
            Result from the tool

        Raises:
            TextToolExecutionError: If the tool is unknown, disabled, or fails
        """
        tool = self.get_tool(tool_call.name)
        if tool is None:
            available = ", ".join(sorted(self._registered_tools.keys()))
            raise TextToolExecutionError(f"Unknown tool: {tool_call.name}. Available tools: {available}")

        if not self.is_tool_enabled(tool_call.name):
            raise TextToolExecutionError(f"Tool '{tool_call.name}' is disabled")

        self._logger.debug("Executing tool call %s: %s", tool_call.id, tool_call.name)
        return tool.execute(tool_call, session)
