"""File editing tool built on the text_edit and span_scan packages."""

from text_tool.editor.editor_requests import (
    CreateRequest,
    DeleteFunctionRequest,
    DeleteLinesRequest,
    DeleteTextRequest,
    EditorRequestDecoder,
    EditRequest,
    FindRequest,
    GotoLineRequest,
    InsertRequest,
    OpenFileRequest,
    OverwriteRequest,
    ReplaceRequest,
)
from text_tool.editor.editor_settings import EditorSettings
from text_tool.editor.editor_text_tool import EditorTextTool


__all__ = [
    "CreateRequest",
    "DeleteFunctionRequest",
    "DeleteLinesRequest",
    "DeleteTextRequest",
    "EditRequest",
    "EditorRequestDecoder",
    "EditorSettings",
    "EditorTextTool",
    "FindRequest",
    "GotoLineRequest",
    "InsertRequest",
    "OpenFileRequest",
    "OverwriteRequest",
    "ReplaceRequest",
]
