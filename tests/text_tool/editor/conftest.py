"""Shared fixtures for editor tool tests."""

import pytest


@pytest.fixture
def run_editor(editor_tool, session, make_tool_call):
    """Fixture providing a helper that runs one editor operation."""
    def _run_editor(operation: str, **arguments):
        return editor_tool.execute(make_tool_call("editor", {"operation": operation, **arguments}), session)

    return _run_editor
