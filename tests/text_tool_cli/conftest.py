"""Shared fixtures for command line tests."""

import pytest

from text_tool import TextToolManager


@pytest.fixture(autouse=True)
def reset_tool_manager():
    """Give every test a fresh tool manager singleton."""
    TextToolManager._instance = None
    yield
    TextToolManager._instance = None
