import logging
import os
import shutil
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List

from span_scan import SpanScanLanguage, SpanScannerFactory
from text_edit import (
    MatchingOptions, MatchSuggestion, NormalizationOptions, TextEditApplier, TextEditLines,
    TextEditMatcher, TextEditPatternError, TextEditSelector, TextEditValidationError
)
from text_tool import (
    TextTool, TextToolCall, TextToolDefinition, TextToolExecutionError, TextToolOperationDefinition,
    TextToolParameter, TextToolResult, TextToolSession
)
from text_tool.editor.editor_requests import (
    CreateRequest, DeleteFunctionRequest, DeleteLinesRequest, DeleteTextRequest, EditorRequestDecoder,
    FindRequest, InsertRequest, OverwriteRequest, ReplaceRequest
)
from text_tool.editor.editor_settings import EditorSettings


class EditorTextTool(TextTool):
    """
    File editing tool.

    Pattern edits run the matcher, then the selector, then the applier against
    the file's exact content.  Structural deletions go through a span scanner.
    Every mutating operation reads the whole file, edits it in memory and
    writes it back through a temporary file and an atomic rename.

    Problems the caller can fix by adjusting arguments (no match, ambiguous
    match, bad occurrence or line range, unsupported language, unknown
    function) are returned as unsuccessful results carrying suggestions.
    Missing files, bad arguments and I/O failures raise TextToolExecutionError.
    """

    _umask_lock = threading.Lock()

    def __init__(self, settings: EditorSettings | None = None):
        """
        Initialize the editor tool.

        Args:
            settings: Editor settings; defaults are used if not given
        """
        self._settings = settings or EditorSettings.create_default()
        self._max_file_size_bytes = self._settings.max_file_size_mb * 1024 * 1024
        self._decoder = EditorRequestDecoder(self._settings)
        self._matcher = TextEditMatcher()
        self._selector = TextEditSelector()
        self._applier = TextEditApplier()
        self._logger = logging.getLogger("EditorTextTool")

    def get_definition(self) -> TextToolDefinition:
        """
        Get the tool definition.

        Returns:
            Tool definition with parameters and description
        """
        base_description = (
            "The editor tool finds and changes text in files. Text can be located literally, with a regular "
            "expression, or by fuzzy line similarity, after optional normalization of line endings, trailing "
            "whitespace, whitespace runs and case. When a pattern matches more than once, pass 'occurrence' "
            "to pick one. Functions can be deleted by name (Rust only). "
            f"Maximum file size: {self._settings.max_file_size_mb}MB."
        )

        normalization_properties = {
            "normalize_eol": TextToolParameter("normalize_eol", "boolean", "Treat CRLF and CR as LF (default true)", False),
            "trim_lines": TextToolParameter("trim_lines", "boolean", "Ignore trailing whitespace on lines", False),
            "normalize_whitespace": TextToolParameter(
                "normalize_whitespace", "boolean", "Treat any run of whitespace as a single space", False
            ),
            "ignore_case": TextToolParameter("ignore_case", "boolean", "Case-insensitive matching", False),
        }

        matching_properties = {
            "regex": TextToolParameter("regex", "boolean", "Treat old_text as a regular expression", False),
            "fuzzy": TextToolParameter("fuzzy", "boolean", "Fall back to fuzzy line matching (default true)", False),
            "fuzzy_threshold": TextToolParameter(
                "fuzzy_threshold", "number", "Minimum line similarity for fuzzy matches (default 0.8)", False
            ),
            "context_lines": TextToolParameter("context_lines", "integer", "Context lines around matches", False),
            "max_matches": TextToolParameter("max_matches", "integer", "Maximum matches reported", False),
        }

        return self._build_definition_from_operations(
            name="editor",
            description_prefix=base_description,
            additional_parameters=[
                TextToolParameter("path", "string", "Path to the file (relative to the working directory or absolute)", False),
                TextToolParameter("old_text", "string", "Text (or pattern) to find", False),
                TextToolParameter("new_text", "string", "Replacement text, or content for create/overwrite", False),
                TextToolParameter("mode", "string", "Edit mode (for edit operation)", False, enum=list(EditorRequestDecoder.EDIT_MODES)),
                TextToolParameter("occurrence", "integer", "1-based index of the match to use", False),
                TextToolParameter("preview", "boolean", "Report the change without writing the file", False),
                TextToolParameter("line_number", "integer", "1-based line number", False),
                TextToolParameter(
                    "position", "string", "Where to insert relative to line_number", False,
                    enum=["before_line", "after_line", "at_end"]
                ),
                TextToolParameter("text", "string", "Text to insert (for insert_text)", False),
                TextToolParameter("text_to_delete", "string", "Exact text to delete (for delete_text)", False),
                TextToolParameter("start_line", "integer", "First line to delete (for delete_lines)", False),
                TextToolParameter("end_line", "integer", "Last line to delete (for delete_lines)", False),
                TextToolParameter("file_name", "string", "Source file (for delete_function)", False),
                TextToolParameter("function_name", "string", "Name of the function (for delete_function)", False),
                TextToolParameter("content", "string", "File content (for create_file and overwrite_file)", False),
                TextToolParameter("create_parents", "boolean", "Create missing parent directories", False),
                TextToolParameter(
                    "normalization", "object", "Normalization applied before matching", False,
                    properties=normalization_properties
                ),
                TextToolParameter(
                    "matching", "object", "Matching behaviour options", False,
                    properties=matching_properties
                ),
            ]
        )

    def get_operation_definitions(self) -> Dict[str, TextToolOperationDefinition]:
        """
        Get operation definitions for this tool.

        Returns:
            Dictionary mapping operation names to their definitions
        """
        return {
            "edit": TextToolOperationDefinition(
                name="edit",
                handler=self._edit,
                allowed_parameters={
                    "path", "old_text", "new_text", "mode", "occurrence", "preview", "line_number",
                    "normalization", "matching", "create_parents"
                },
                required_parameters={"path"},
                description="Unified edit. mode is one of replace (default), delete, insert (new_text after "
                    "line_number), create or overwrite (new_text is the file content)"
            ),
            "find": TextToolOperationDefinition(
                name="find",
                handler=self._find,
                allowed_parameters={"path", "old_text", "occurrence", "normalization", "matching"},
                required_parameters={"path", "old_text"},
                description="Find old_text without changing the file; reports the matches or why there are none"
            ),
            "replace_text": TextToolOperationDefinition(
                name="replace_text",
                handler=self._replace_text,
                allowed_parameters={"path", "old_text", "new_text", "occurrence", "preview"},
                required_parameters={"path", "old_text"},
                description="Replace an exact occurrence of old_text with new_text"
            ),
            "delete_text": TextToolOperationDefinition(
                name="delete_text",
                handler=self._delete_text,
                allowed_parameters={"path", "text_to_delete", "occurrence", "preview"},
                required_parameters={"path", "text_to_delete"},
                description="Delete an exact occurrence of text_to_delete"
            ),
            "insert_text": TextToolOperationDefinition(
                name="insert_text",
                handler=self._insert_text,
                allowed_parameters={"path", "text", "line_number", "position", "preview"},
                required_parameters={"path", "text", "line_number"},
                description="Insert text as whole lines before or after line_number, or at the end of the file"
            ),
            "delete_lines": TextToolOperationDefinition(
                name="delete_lines",
                handler=self._delete_lines,
                allowed_parameters={"path", "start_line", "end_line", "preview"},
                required_parameters={"path", "start_line", "end_line"},
                description="Delete lines start_line to end_line (1-indexed, inclusive)"
            ),
            "delete_function": TextToolOperationDefinition(
                name="delete_function",
                handler=self._delete_function,
                allowed_parameters={"file_name", "path", "function_name", "preview"},
                required_parameters={"function_name"},
                description="Delete a function with its attributes and doc comments (Rust source only)"
            ),
            "create_file": TextToolOperationDefinition(
                name="create_file",
                handler=self._create_file,
                allowed_parameters={"path", "content", "create_parents", "preview"},
                required_parameters={"path"},
                description="Create a new file; fails if it already exists"
            ),
            "overwrite_file": TextToolOperationDefinition(
                name="overwrite_file",
                handler=self._overwrite_file,
                allowed_parameters={"path", "content", "preview"},
                required_parameters={"path", "content"},
                description="Replace the content of an existing file"
            ),
            "open_file": TextToolOperationDefinition(
                name="open_file",
                handler=self._open_file,
                allowed_parameters={"path", "line_number"},
                required_parameters={"path"},
                description="Open a file and show a window of numbered lines, optionally around line_number"
            ),
            "goto_line": TextToolOperationDefinition(
                name="goto_line",
                handler=self._goto_line,
                allowed_parameters={"line_number"},
                required_parameters={"line_number"},
                description="Move the open file's window to line_number"
            ),
            "session_summary": TextToolOperationDefinition(
                name="session_summary",
                handler=self._session_summary,
                allowed_parameters=set(),
                required_parameters=set(),
                description="Show open files and the history of operations in this session"
            ),
        }

    def _read_file(self, path: Path, display_path: str) -> str:
        """
        Read a whole file, keeping its line endings exactly as they are.

        Raises:
            TextToolExecutionError: If the file is missing, too large or unreadable
        """
        if not path.exists():
            raise TextToolExecutionError(f"File not found: {display_path}", {"error_type": "file_not_found"})

        if not path.is_file():
            raise TextToolExecutionError(f"Path is not a file: {display_path}")

        file_size = path.stat().st_size
        if file_size > self._max_file_size_bytes:
            size_mb = file_size / (1024 * 1024)
            max_mb = self._max_file_size_bytes / (1024 * 1024)
            raise TextToolExecutionError(f"File too large: {size_mb:.1f}MB (max: {max_mb:.1f}MB)")

        encoding = self._settings.encoding

        try:
            with open(path, 'r', encoding=encoding, newline='') as f:
                return f.read()

        except UnicodeDecodeError as e:
            raise TextToolExecutionError(
                f"Failed to decode file with encoding '{encoding}': {str(e)}"
            ) from e

        except PermissionError as e:
            raise TextToolExecutionError(f"Permission denied reading file: {str(e)}") from e

        except OSError as e:
            raise TextToolExecutionError(f"Failed to read file: {str(e)}") from e

    def _write_file(self, path: Path, content: str, create_parents: bool = False) -> None:
        """
        Write a whole file atomically.

        Raises:
            TextToolExecutionError: If the content is too large or the write fails
        """
        encoding = self._settings.encoding
        try:
            content_size = len(content.encode(encoding))

        except UnicodeEncodeError as e:
            raise TextToolExecutionError(f"Content cannot be encoded as {encoding}: {str(e)}") from e

        if content_size > self._max_file_size_bytes:
            size_mb = content_size / (1024 * 1024)
            max_mb = self._max_file_size_bytes / (1024 * 1024)
            raise TextToolExecutionError(f"Content too large: {size_mb:.1f}MB (max: {max_mb:.1f}MB)")

        tmp_path: Path | None = None
        try:
            if create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)

            # Write to temporary file first, then rename for atomicity
            with tempfile.NamedTemporaryFile(
                mode='w',
                encoding=encoding,
                newline='',
                dir=path.parent,
                delete=False,
                suffix='.tmp'
            ) as tmp_file:
                tmp_path = Path(tmp_file.name)
                tmp_file.write(content)

            # Existing files keep their permissions; new files get them from the umask
            if path.exists():
                shutil.copymode(path, tmp_path)

            else:
                tmp_path.chmod(0o666 & ~self._current_umask())

            tmp_path.replace(path)
            tmp_path = None

        except PermissionError as e:
            self._discard_temp_file(tmp_path)
            raise TextToolExecutionError(f"Permission denied writing file: {str(e)}") from e

        except OSError as e:
            self._discard_temp_file(tmp_path)
            raise TextToolExecutionError(f"Failed to write file: {str(e)}") from e

    @classmethod
    def _current_umask(cls) -> int:
        """Read the process umask, which can only be done by setting it."""
        with cls._umask_lock:
            umask = os.umask(0o022)
            os.umask(umask)

        return umask

    def _discard_temp_file(self, tmp_path: Path | None) -> None:
        """Remove a temporary file left behind by a failed write."""
        if tmp_path is None:
            return

        try:
            tmp_path.unlink(missing_ok=True)

        except OSError as e:
            self._logger.warning("Failed to remove temporary file %s: %s", tmp_path, str(e))

    def _display_path(self, path: Path, session: TextToolSession) -> str:
        """Path relative to the session's working directory where possible."""
        try:
            return str(path.relative_to(session.working_directory))

        except ValueError:
            return str(path)

    @staticmethod
    def _view_lines(content: str) -> List[str]:
        """Lines for the session window, without terminators."""
        return [line.rstrip('\n').removesuffix('\r') for line in TextEditLines.split_lines(content)]

    def _record(self, session: TextToolSession, path: Path, content: str, operation: str) -> None:
        """Update session bookkeeping after a file has been written."""
        session.refresh_file(path, self._view_lines(content))
        session.push_history(operation, path)
        self._logger.info("%s", operation)

    def _result(self, tool_call: TextToolCall, success: bool, message: str, data: Dict[str, Any]) -> TextToolResult:
        return TextToolResult(id=tool_call.id, name="editor", success=success, message=message, data=data)

    def _diagnostic(
        self,
        tool_call: TextToolCall,
        message: str,
        error_type: str,
        suggestions: List[MatchSuggestion],
        **details: Any
    ) -> TextToolResult:
        """Build an unsuccessful result the caller can act on."""
        data: Dict[str, Any] = {"error_type": error_type, **details}
        data["suggestions"] = [s.to_dict() for s in suggestions]
        return self._result(tool_call, False, message, data)

    def _edit(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Dispatch the unified edit operation on its mode."""
        request = self._decoder.decode_edit(tool_call.arguments)

        handlers: Dict[type, Callable[[TextToolCall, TextToolSession, Any], TextToolResult]] = {
            ReplaceRequest: self._run_replace,
            DeleteTextRequest: self._run_delete_text,
            InsertRequest: self._run_insert,
            CreateRequest: self._run_create,
            OverwriteRequest: self._run_overwrite,
        }
        return handlers[type(request)](tool_call, session, request)

    def _replace_text(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Replace an exact occurrence."""
        return self._run_replace(tool_call, session, self._decoder.decode_replace_text(tool_call.arguments))

    def _delete_text(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Delete an exact occurrence."""
        return self._run_delete_text(tool_call, session, self._decoder.decode_delete_text(tool_call.arguments))

    def _insert_text(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Insert lines."""
        return self._run_insert(tool_call, session, self._decoder.decode_insert_text(tool_call.arguments))

    def _create_file(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Create a file."""
        return self._run_create(tool_call, session, self._decoder.decode_create_file(tool_call.arguments))

    def _overwrite_file(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Overwrite a file."""
        return self._run_overwrite(tool_call, session, self._decoder.decode_overwrite_file(tool_call.arguments))

    def _run_replace(self, tool_call: TextToolCall, session: TextToolSession, request: ReplaceRequest) -> TextToolResult:
        return self._apply_pattern_edit(
            tool_call, session, "replace", request.path, request.old_text, request.new_text,
            request.occurrence, request.preview, request.normalization, request.matching
        )

    def _run_delete_text(
        self,
        tool_call: TextToolCall,
        session: TextToolSession,
        request: DeleteTextRequest
    ) -> TextToolResult:
        return self._apply_pattern_edit(
            tool_call, session, "delete", request.path, request.text_to_delete, "",
            request.occurrence, request.preview, request.normalization, request.matching
        )

    def _select_candidate(
        self,
        tool_call: TextToolCall,
        content: str,
        pattern: str,
        occurrence: int | None,
        normalization: NormalizationOptions,
        matching: MatchingOptions,
        display_path: str
    ) -> Any:
        """
        Find and select a candidate.

        Returns:
            Tuple of (candidates, selected candidate) on success, or a diagnostic TextToolResult
        """
        try:
            candidates = self._matcher.find_matches(content, pattern, matching, normalization)

        except TextEditPatternError as e:
            raise TextToolExecutionError(str(e), e.error_details) from e

        try:
            selection = self._selector.select(candidates, occurrence, content, pattern, normalization, matching.regex)

        except TextEditValidationError as e:
            return self._diagnostic(
                tool_call,
                f"{str(e)} in {display_path}",
                "occurrence_out_of_range",
                [MatchSuggestion(
                    "select_occurrence",
                    f"{len(candidates)} matches found",
                    f"Use 'occurrence: N' parameter to select specific match (1-{len(candidates)})"
                )],
                path=display_path,
                searched_pattern=pattern,
                total_matches=len(candidates)
            )

        if selection.candidate is None:
            assert selection.diagnostic is not None
            diagnostic = selection.diagnostic
            data = diagnostic.to_dict()
            return self._result(
                tool_call,
                False,
                f"{diagnostic.message} in {display_path}",
                {"path": display_path, "searched_pattern": pattern, **data}
            )

        return candidates, selection.candidate

    def _apply_pattern_edit(
        self,
        tool_call: TextToolCall,
        session: TextToolSession,
        mode: str,
        path_arg: str,
        pattern: str,
        replacement: str,
        occurrence: int | None,
        preview: bool,
        normalization: NormalizationOptions,
        matching: MatchingOptions
    ) -> TextToolResult:
        """Locate one occurrence of a pattern and replace it."""
        path = session.resolve_path(path_arg)
        display_path = self._display_path(path, session)
        content = self._read_file(path, display_path)

        selected = self._select_candidate(
            tool_call, content, pattern, occurrence, normalization, matching, display_path
        )
        if isinstance(selected, TextToolResult):
            return selected

        _candidates, candidate = selected

        if preview:
            return self._result(
                tool_call,
                True,
                f"Preview: Would {mode} occurrence {candidate.index} at line {candidate.line_start} in {display_path}",
                {
                    "path": display_path,
                    "mode": mode,
                    "preview": True,
                    "match": candidate.to_dict(),
                    "new_text": replacement
                }
            )

        outcome = self._applier.apply(content, candidate, replacement)
        self._write_file(path, outcome.content)

        verb = "Deleted" if mode == "delete" else "Replaced"
        self._record(
            session, path, outcome.content,
            f"{verb} occurrence {candidate.index} at line {candidate.line_start} in {display_path}"
        )

        return self._result(
            tool_call,
            True,
            f"Successfully {verb.lower()} occurrence {candidate.index} in {display_path}",
            {
                "path": display_path,
                "mode": mode,
                "strategy": candidate.strategy,
                "similarity": round(candidate.similarity, 4),
                "lines_changed": outcome.lines_changed,
                "characters_changed": outcome.characters_changed,
                "applied_at": [outcome.to_dict()]
            }
        )

    def _find(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Run the matcher and selector without writing."""
        request: FindRequest = self._decoder.decode_find(tool_call.arguments)
        path = session.resolve_path(request.path)
        display_path = self._display_path(path, session)
        content = self._read_file(path, display_path)

        selected = self._select_candidate(
            tool_call, content, request.pattern, request.occurrence,
            request.normalization, request.matching, display_path
        )
        if isinstance(selected, TextToolResult):
            return selected

        candidates, candidate = selected
        return self._result(
            tool_call,
            True,
            f"Found occurrence {candidate.index} at line {candidate.line_start} in {display_path}",
            {
                "path": display_path,
                "total_matches": len(candidates),
                "selected": candidate.to_dict(),
                "matches": [c.to_dict() for c in candidates]
            }
        )

    def _run_insert(self, tool_call: TextToolCall, session: TextToolSession, request: InsertRequest) -> TextToolResult:
        path = session.resolve_path(request.path)
        display_path = self._display_path(path, session)
        content = self._read_file(path, display_path)

        try:
            outcome = TextEditLines.insert_lines(content, request.line_number, request.text, request.position)

        except TextEditValidationError as e:
            return self._diagnostic(
                tool_call,
                f"{str(e)} in {display_path}",
                "invalid_line_range",
                [MatchSuggestion(
                    "check_line_number",
                    "Line number is outside the file",
                    "Use 'open_file' to check how many lines the file has"
                )],
                path=display_path,
                **(e.error_details or {})
            )

        if request.preview:
            return self._result(
                tool_call,
                True,
                f"Preview: Would insert text at line {outcome.start_line} in {display_path}",
                {
                    "path": display_path,
                    "preview": True,
                    "line_number": outcome.start_line,
                    "position": request.position,
                    "text": request.text
                }
            )

        self._write_file(path, outcome.content)
        self._record(session, path, outcome.content, f"Inserted text at line {outcome.start_line} in {display_path}")

        return self._result(
            tool_call,
            True,
            f"Successfully inserted text at line {outcome.start_line} in {display_path}",
            {
                "path": display_path,
                "line_number": outcome.start_line,
                "position": request.position,
                "text": request.text,
                "lines_added": outcome.lines_added,
                "total_lines": outcome.total_lines
            }
        )

    def _delete_lines(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Delete a range of lines."""
        request: DeleteLinesRequest = self._decoder.decode_delete_lines(tool_call.arguments)
        path = session.resolve_path(request.path)
        display_path = self._display_path(path, session)
        content = self._read_file(path, display_path)

        try:
            outcome = TextEditLines.delete_lines(content, request.start_line, request.end_line)

        except TextEditValidationError as e:
            return self._diagnostic(
                tool_call,
                f"{str(e)} in {display_path}",
                "invalid_line_range",
                [MatchSuggestion(
                    "check_line_range",
                    "Line range is outside the file",
                    "Use 'open_file' to check how many lines the file has"
                )],
                path=display_path,
                **(e.error_details or {})
            )

        data = {
            "path": display_path,
            "start_line": outcome.start_line,
            "end_line": outcome.end_line,
            "lines_deleted": outcome.lines_removed,
            "total_lines": outcome.total_lines
        }

        if request.preview:
            return self._result(
                tool_call,
                True,
                f"Preview: Would delete lines {outcome.start_line}-{outcome.end_line} in {display_path}",
                {**data, "preview": True}
            )

        self._write_file(path, outcome.content)
        self._record(
            session, path, outcome.content,
            f"Deleted lines {outcome.start_line}-{outcome.end_line} in {display_path}"
        )

        return self._result(
            tool_call,
            True,
            f"Successfully deleted lines {outcome.start_line}-{outcome.end_line} in {display_path}",
            data
        )

    def _delete_function(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Delete a function by name."""
        request: DeleteFunctionRequest = self._decoder.decode_delete_function(tool_call.arguments)
        path = session.resolve_path(request.path)
        display_path = self._display_path(path, session)

        language = SpanScanLanguage.from_file_name(path.name)
        scanner = SpanScannerFactory.create(language)
        if scanner is None:
            supported = ", ".join(lang.display_name for lang in SpanScannerFactory.supported_languages())
            return self._diagnostic(
                tool_call,
                f"Function deletion is not supported for {display_path} (supported: {supported})",
                "unsupported_language",
                [
                    MatchSuggestion(
                        "delete_lines",
                        "Delete by line range",
                        "Use 'delete_lines' with the function's start_line and end_line"
                    ),
                    MatchSuggestion(
                        "delete_text",
                        "Delete by exact text",
                        "Use 'delete_text' with the function's full text"
                    ),
                ],
                path=display_path,
                function_name=request.function_name
            )

        content = self._read_file(path, display_path)
        result = scanner.delete_function(content, request.function_name)
        if result is None:
            return self._diagnostic(
                tool_call,
                f"Function '{request.function_name}' not found in {display_path}",
                "function_not_found",
                [
                    MatchSuggestion(
                        "check_name",
                        "Function names are case-sensitive",
                        f"Check the exact spelling of '{request.function_name}'"
                    ),
                    MatchSuggestion(
                        "check_body",
                        "Declarations without a body are never deleted",
                        "Make sure the function has a body (trait method declarations ending in ';' are skipped)"
                    ),
                    MatchSuggestion(
                        "search",
                        "Locate the function first",
                        f"Use 'find' with old_text 'fn {request.function_name}' to see where it is"
                    ),
                    MatchSuggestion(
                        "delete_lines",
                        "Fall back to line-based deletion",
                        "Use 'delete_lines' with the function's start_line and end_line"
                    ),
                ],
                path=display_path,
                function_name=request.function_name
            )

        data = {
            "path": display_path,
            "function_name": request.function_name,
            "start_line": result.start_line,
            "end_line": result.end_line,
            "lines_deleted": result.lines_deleted
        }

        if request.preview:
            return self._result(
                tool_call,
                True,
                f"Preview: Would delete function '{request.function_name}' "
                    f"(lines {result.start_line}-{result.end_line}) in {display_path}",
                {**data, "preview": True}
            )

        self._write_file(path, result.content)
        self._record(
            session, path, result.content,
            f"Deleted function '{request.function_name}' (lines {result.start_line}-{result.end_line}) in {display_path}"
        )

        return self._result(
            tool_call,
            True,
            f"Successfully deleted function '{request.function_name}' in {display_path}",
            data
        )

    def _run_create(self, tool_call: TextToolCall, session: TextToolSession, request: CreateRequest) -> TextToolResult:
        path = session.resolve_path(request.path)
        display_path = self._display_path(path, session)

        if path.exists():
            raise TextToolExecutionError(f"File already exists: {display_path}")

        if not path.parent.exists() and not request.create_parents:
            raise TextToolExecutionError(
                f"Parent directory does not exist: {self._display_path(path.parent, session)}. "
                "Use 'create_parents: true' to create it"
            )

        data = {
            "path": display_path,
            "mode": "create",
            "content_length": len(request.content),
            "lines_created": TextEditLines.count_lines(request.content)
        }

        if request.preview:
            return self._result(
                tool_call,
                True,
                f"Preview: Would create file {display_path} with {len(request.content)} characters",
                {**data, "preview": True}
            )

        self._write_file(path, request.content, request.create_parents)
        session.push_history(f"Created file {display_path}", path)
        self._logger.info("Created file %s", display_path)

        return self._result(tool_call, True, f"Successfully created file {display_path}", data)

    def _run_overwrite(
        self,
        tool_call: TextToolCall,
        session: TextToolSession,
        request: OverwriteRequest
    ) -> TextToolResult:
        path = session.resolve_path(request.path)
        display_path = self._display_path(path, session)

        if not path.exists():
            raise TextToolExecutionError(f"File not found: {display_path}", {"error_type": "file_not_found"})

        if not path.is_file():
            raise TextToolExecutionError(f"Path is not a file: {display_path}")

        data = {
            "path": display_path,
            "mode": "overwrite",
            "content_length": len(request.content),
            "lines_written": TextEditLines.count_lines(request.content)
        }

        if request.preview:
            return self._result(
                tool_call,
                True,
                f"Preview: Would overwrite file {display_path} with {len(request.content)} characters",
                {**data, "preview": True}
            )

        self._write_file(path, request.content)
        self._record(session, path, request.content, f"Overwrote file {display_path}")

        return self._result(tool_call, True, f"Successfully overwrote file {display_path}", data)

    def _open_file(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Open a file into the session."""
        request = self._decoder.decode_open_file(tool_call.arguments)
        path = session.resolve_path(request.path)
        display_path = self._display_path(path, session)
        content = self._read_file(path, display_path)

        view = session.open_file(path, self._view_lines(content))
        if request.line_number is not None:
            moved = session.goto_line(request.line_number)
            if moved is None:
                return self._diagnostic(
                    tool_call,
                    f"Invalid line number {request.line_number}. File has {view['total_lines']} lines",
                    "invalid_line_range",
                    [],
                    path=display_path,
                    line_number=request.line_number,
                    total_lines=view['total_lines']
                )

            view = moved

        session.push_history(f"Opened file {display_path}", path)
        return self._result(
            tool_call,
            True,
            f"Opened {display_path} ({view['total_lines']} lines)",
            view
        )

    def _goto_line(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Move the current file's window."""
        request = self._decoder.decode_goto_line(tool_call.arguments)
        current = session.current_file()
        if current is None:
            return self._diagnostic(
                tool_call,
                "No file is open",
                "no_open_file",
                [MatchSuggestion("open_file", "Open a file first", "Use 'open_file' with the file's path")]
            )

        view = session.goto_line(request.line_number)
        if view is None:
            current_view = session.current_view() or {}
            return self._diagnostic(
                tool_call,
                f"Invalid line number {request.line_number}",
                "invalid_line_range",
                [],
                path=self._display_path(current, session),
                line_number=request.line_number,
                total_lines=current_view.get('total_lines', 0)
            )

        return self._result(tool_call, True, f"Moved to line {request.line_number}", view)

    def _session_summary(self, tool_call: TextToolCall, session: TextToolSession) -> TextToolResult:
        """Summarize the session."""
        summary = session.summary()
        return self._result(
            tool_call,
            True,
            f"{len(summary['open_files'])} open file(s), {summary['history_length']} operation(s) in history",
            summary
        )
