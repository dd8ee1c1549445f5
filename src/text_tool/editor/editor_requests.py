"""Typed editor requests and the decoder that builds them from tool call arguments."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from text_edit import MatchingOptions, NormalizationOptions
from text_tool import TextToolArgumentDecoder, TextToolExecutionError
from text_tool.editor.editor_settings import EditorSettings


@dataclass
class ReplaceRequest:
    """Replace one occurrence of a pattern."""
    path: str
    old_text: str
    new_text: str = ""
    occurrence: int | None = None
    preview: bool = False
    normalization: NormalizationOptions = field(default_factory=NormalizationOptions)
    matching: MatchingOptions = field(default_factory=MatchingOptions)


@dataclass
class DeleteTextRequest:
    """Delete one occurrence of a pattern."""
    path: str
    text_to_delete: str
    occurrence: int | None = None
    preview: bool = False
    normalization: NormalizationOptions = field(default_factory=NormalizationOptions)
    matching: MatchingOptions = field(default_factory=MatchingOptions)


@dataclass
class InsertRequest:
    """Insert text as whole lines next to a reference line."""
    path: str
    text: str
    line_number: int
    position: str = "after_line"
    preview: bool = False


@dataclass
class CreateRequest:
    """Create a new file."""
    path: str
    content: str
    create_parents: bool = False
    preview: bool = False


@dataclass
class OverwriteRequest:
    """Replace the whole content of an existing file."""
    path: str
    content: str
    preview: bool = False


@dataclass
class DeleteLinesRequest:
    """Delete an inclusive range of lines."""
    path: str
    start_line: int
    end_line: int
    preview: bool = False


@dataclass
class DeleteFunctionRequest:
    """Delete a function by name."""
    path: str
    function_name: str
    preview: bool = False


@dataclass
class FindRequest:
    """Search for a pattern without changing anything."""
    path: str
    pattern: str
    occurrence: int | None = None
    normalization: NormalizationOptions = field(default_factory=NormalizationOptions)
    matching: MatchingOptions = field(default_factory=MatchingOptions)


@dataclass
class OpenFileRequest:
    """Open a file into the session."""
    path: str
    line_number: int | None = None


@dataclass
class GotoLineRequest:
    """Move the current file's window."""
    line_number: int


EditRequest = Union[ReplaceRequest, DeleteTextRequest, InsertRequest, CreateRequest, OverwriteRequest]


class EditorRequestDecoder(TextToolArgumentDecoder):
    """
    Decodes editor tool arguments into typed requests.

    Every operation's arguments are decoded exactly once, here; handlers only
    ever see the resulting request objects.
    """

    EDIT_MODES = ("replace", "insert", "delete", "create", "overwrite")

    _POSITIONS = ("before_line", "after_line", "at_end")

    def __init__(self, settings: EditorSettings) -> None:
        """
        Initialize the decoder.

        Args:
            settings: Source of the default normalization and matching options
        """
        self._settings = settings

    def decode_edit(self, arguments: Dict[str, Any]) -> EditRequest:
        """
        Decode the unified edit operation into the request for its mode.

        Args:
            arguments: Tool call arguments

        Returns:
            One of the edit request types

        Raises:
            TextToolExecutionError: If arguments are missing or malformed
        """
        path = self._path(arguments)
        mode = self.optional_str("mode", arguments, "replace")
        if mode not in self.EDIT_MODES:
            raise TextToolExecutionError(
                f"Invalid mode '{mode}'. Use one of: {', '.join(self.EDIT_MODES)}",
                {"mode": mode}
            )

        new_text = self.optional_str("new_text", arguments, "") or ""
        preview = self.optional_bool("preview", arguments, False)

        if mode == "create":
            return CreateRequest(
                path=path,
                content=new_text,
                create_parents=self.optional_bool("create_parents", arguments, False),
                preview=preview
            )

        if mode == "overwrite":
            return OverwriteRequest(path=path, content=new_text, preview=preview)

        if mode == "insert":
            if arguments.get("line_number") is None:
                raise TextToolExecutionError("'line_number' is required for insert mode")

            return InsertRequest(
                path=path,
                text=new_text,
                line_number=self.require_int("line_number", arguments),
                position="after_line",
                preview=preview
            )

        old_text = self._pattern("old_text", arguments)
        occurrence = self.optional_int("occurrence", arguments)
        normalization = self._normalization(arguments)
        matching = self._matching(arguments)

        if mode == "delete":
            return DeleteTextRequest(
                path=path,
                text_to_delete=old_text,
                occurrence=occurrence,
                preview=preview,
                normalization=normalization,
                matching=matching
            )

        return ReplaceRequest(
            path=path,
            old_text=old_text,
            new_text=new_text,
            occurrence=occurrence,
            preview=preview,
            normalization=normalization,
            matching=matching
        )

    def decode_replace_text(self, arguments: Dict[str, Any]) -> ReplaceRequest:
        """Decode an exact, literal replacement."""
        normalization, matching = self._exact_options()
        return ReplaceRequest(
            path=self._path(arguments),
            old_text=self._pattern("old_text", arguments),
            new_text=self.optional_str("new_text", arguments, "") or "",
            occurrence=self.optional_int("occurrence", arguments),
            preview=self.optional_bool("preview", arguments, False),
            normalization=normalization,
            matching=matching
        )

    def decode_delete_text(self, arguments: Dict[str, Any]) -> DeleteTextRequest:
        """Decode an exact, literal deletion."""
        normalization, matching = self._exact_options()
        return DeleteTextRequest(
            path=self._path(arguments),
            text_to_delete=self._pattern("text_to_delete", arguments),
            occurrence=self.optional_int("occurrence", arguments),
            preview=self.optional_bool("preview", arguments, False),
            normalization=normalization,
            matching=matching
        )

    def decode_insert_text(self, arguments: Dict[str, Any]) -> InsertRequest:
        """Decode a line insertion."""
        position = self.optional_str("position", arguments, "after_line") or "after_line"
        if position not in self._POSITIONS:
            raise TextToolExecutionError(
                f"Invalid position '{position}'. Use 'before_line', 'after_line', or 'at_end'",
                {"position": position}
            )

        return InsertRequest(
            path=self._path(arguments),
            text=self.require_str("text", arguments),
            line_number=self.require_int("line_number", arguments),
            position=position,
            preview=self.optional_bool("preview", arguments, False)
        )

    def decode_delete_lines(self, arguments: Dict[str, Any]) -> DeleteLinesRequest:
        """Decode a line range deletion."""
        return DeleteLinesRequest(
            path=self._path(arguments),
            start_line=self.require_int("start_line", arguments),
            end_line=self.require_int("end_line", arguments),
            preview=self.optional_bool("preview", arguments, False)
        )

    def decode_delete_function(self, arguments: Dict[str, Any]) -> DeleteFunctionRequest:
        """
        Decode a structural deletion.

        The file may be given as either 'file_name' or 'path'.
        """
        if arguments.get("file_name") is not None:
            path = self.require_str("file_name", arguments)

        elif arguments.get("path") is not None:
            path = self.require_str("path", arguments)

        else:
            raise TextToolExecutionError("No 'file_name' argument provided")

        if not path:
            raise TextToolExecutionError("'file_name' must not be empty")

        function_name = self.require_str("function_name", arguments).strip()
        if not function_name:
            raise TextToolExecutionError("'function_name' must not be empty")

        return DeleteFunctionRequest(
            path=path,
            function_name=function_name,
            preview=self.optional_bool("preview", arguments, False)
        )

    def decode_create_file(self, arguments: Dict[str, Any]) -> CreateRequest:
        """Decode a file creation."""
        return CreateRequest(
            path=self._path(arguments),
            content=self.optional_str("content", arguments, "") or "",
            create_parents=self.optional_bool("create_parents", arguments, False),
            preview=self.optional_bool("preview", arguments, False)
        )

    def decode_overwrite_file(self, arguments: Dict[str, Any]) -> OverwriteRequest:
        """Decode a whole-file overwrite."""
        return OverwriteRequest(
            path=self._path(arguments),
            content=self.require_str("content", arguments),
            preview=self.optional_bool("preview", arguments, False)
        )

    def decode_find(self, arguments: Dict[str, Any]) -> FindRequest:
        """Decode a search."""
        return FindRequest(
            path=self._path(arguments),
            pattern=self._pattern("old_text", arguments),
            occurrence=self.optional_int("occurrence", arguments),
            normalization=self._normalization(arguments),
            matching=self._matching(arguments)
        )

    def decode_open_file(self, arguments: Dict[str, Any]) -> OpenFileRequest:
        """Decode a file open."""
        return OpenFileRequest(
            path=self._path(arguments),
            line_number=self.optional_int("line_number", arguments)
        )

    def decode_goto_line(self, arguments: Dict[str, Any]) -> GotoLineRequest:
        """Decode a window move."""
        return GotoLineRequest(line_number=self.require_int("line_number", arguments))

    def _path(self, arguments: Dict[str, Any]) -> str:
        """Extract the required, non-empty path."""
        path = self.require_str("path", arguments)
        if not path:
            raise TextToolExecutionError("'path' must not be empty")

        return path

    def _pattern(self, key: str, arguments: Dict[str, Any]) -> str:
        """Extract a required, non-empty search pattern."""
        pattern = self.require_str(key, arguments)
        if not pattern:
            raise TextToolExecutionError(f"'{key}' must not be empty")

        return pattern

    def _exact_options(self) -> Tuple[NormalizationOptions, MatchingOptions]:
        """Options for byte-exact literal matching: no normalization and no fuzzy fallback."""
        return (
            NormalizationOptions(normalize_eol=False),
            MatchingOptions(
                regex=False,
                fuzzy=False,
                context_lines=self._settings.matching.context_lines,
                max_matches=self._settings.matching.max_matches
            )
        )

    def _normalization(self, arguments: Dict[str, Any]) -> NormalizationOptions:
        """Merge per-call normalization flags over the settings defaults."""
        overrides = self.optional_dict("normalization", arguments)
        defaults = self._settings.normalization.to_dict()

        unknown = set(overrides) - set(defaults)
        if unknown:
            raise TextToolExecutionError(
                f"Unknown normalization option(s): {', '.join(sorted(unknown))}",
                {"unknown": sorted(unknown)}
            )

        return NormalizationOptions(**{
            key: self.optional_bool(key, overrides, default) for key, default in defaults.items()
        })

    def _matching(self, arguments: Dict[str, Any]) -> MatchingOptions:
        """Merge per-call matching options over the settings defaults."""
        overrides = self.optional_dict("matching", arguments)
        defaults = self._settings.matching

        unknown = set(overrides) - set(defaults.to_dict())
        if unknown:
            raise TextToolExecutionError(
                f"Unknown matching option(s): {', '.join(sorted(unknown))}",
                {"unknown": sorted(unknown)}
            )

        threshold = self.optional_float("fuzzy_threshold", overrides, defaults.fuzzy_threshold)
        if threshold is None or not 0.0 <= threshold <= 1.0:
            raise TextToolExecutionError("'fuzzy_threshold' must be between 0.0 and 1.0")

        context_lines = self.optional_int("context_lines", overrides, defaults.context_lines)
        if context_lines is None or context_lines < 0:
            raise TextToolExecutionError("'context_lines' must not be negative")

        max_matches = self.optional_int("max_matches", overrides, defaults.max_matches)
        if max_matches is None or max_matches < 1:
            raise TextToolExecutionError("'max_matches' must be at least 1")

        return MatchingOptions(
            regex=self.optional_bool("regex", overrides, defaults.regex),
            fuzzy=self.optional_bool("fuzzy", overrides, defaults.fuzzy),
            fuzzy_threshold=threshold,
            context_lines=context_lines,
            max_matches=max_matches
        )
