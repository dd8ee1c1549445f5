"""
Shared fixtures and utilities for text tool tests.
"""
from typing import Any, Dict

import pytest

from text_tool import (
    TextTool, TextToolArgumentDecoder, TextToolCall, TextToolDefinition, TextToolExecutionError, TextToolManager,
    TextToolOperationDefinition, TextToolParameter, TextToolResult, TextToolSession
)
from text_tool.editor import EditorTextTool


class EchoTextTool(TextTool):
    """Minimal operation-based tool for exercising the framework."""

    def get_definition(self) -> TextToolDefinition:
        return self._build_definition_from_operations(
            name="echo",
            description_prefix="Echoes its arguments.",
            additional_parameters=[
                TextToolParameter("text", "string", "Text to echo", False),
                TextToolParameter("count", "integer", "Repetitions", False),
            ]
        )

    def get_operation_definitions(self) -> Dict[str, TextToolOperationDefinition]:
        return {
            "say": TextToolOperationDefinition(
                name="say",
                handler=self._say,
                allowed_parameters={"text", "count"},
                required_parameters={"text"},
                description="Repeat text"
            ),
            "fail": TextToolOperationDefinition(
                name="fail",
                handler=self._fail,
                allowed_parameters=set(),
                required_parameters=set(),
                description="Raise an unexpected error"
            ),
            "refuse": TextToolOperationDefinition(
                name="refuse",
                handler=self._refuse,
                allowed_parameters=set(),
                required_parameters=set(),
                description="Raise an execution error"
            ),
        }

    def _say(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        text = TextToolArgumentDecoder.require_str("text", tool_call.arguments)
        count = TextToolArgumentDecoder.optional_int("count", tool_call.arguments, 1)
        session.push_history(f"said {text}")
        return TextToolResult(id=tool_call.id, name="echo", success=True, message=text * count)

    def _fail(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        raise RuntimeError("boom")

    def _refuse(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        raise TextToolExecutionError("refused", {"reason": "test"})


@pytest.fixture(autouse=True)
def reset_tool_manager():
    """Give every test a fresh tool manager singleton."""
    TextToolManager._instance = None
    yield
    TextToolManager._instance = None


@pytest.fixture
def make_tool_call():
    """Fixture providing a factory for tool calls."""
    def _make_tool_call(name: str, arguments: Dict[str, Any], call_id: str = "test_id") -> TextToolCall:
        return TextToolCall(id=call_id, name=name, arguments=arguments)

    return _make_tool_call


@pytest.fixture
def echo_tool():
    """Fixture providing the echo tool."""
    return EchoTextTool()


@pytest.fixture
def session(tmp_path):
    """Fixture providing a session rooted in a temporary directory."""
    return TextToolSession(working_directory=tmp_path, window_size=5, max_history=10)


@pytest.fixture
def editor_tool():
    """Fixture providing an editor tool with default settings."""
    return EditorTextTool()
