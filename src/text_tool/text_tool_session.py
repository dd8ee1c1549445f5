"""Per-caller session state shared by tool operations."""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from text_tool.text_tool_file_view import TextToolFileView


@dataclass
class TextToolHistoryEntry:
    """One line in the session's operation log."""
    timestamp: datetime
    operation: str
    path: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the entry to a dictionary."""
        return {
            'timestamp': self.timestamp.isoformat(),
            'operation': self.operation,
            'path': self.path
        }


class TextToolSession:
    """
    Session bookkeeping: open files, the current file and an operation log.

    A session is created by the caller and passed into every tool call.  The
    lock is only held while a piece of bookkeeping is read or updated, never
    across a search or an edit.
    """

    def __init__(
        self,
        working_directory: Path | None = None,
        window_size: int = 100,
        max_history: int = 100
    ) -> None:
        """
        Initialize the session.

        Args:
            working_directory: Directory relative paths are resolved against
            window_size: Number of lines shown per window for newly opened files
            max_history: Number of operation log entries kept
        """
        self._working_directory = (working_directory or Path.cwd()).resolve()
        self._window_size = window_size
        self._max_history = max_history
        self._open_files: Dict[Path, TextToolFileView] = {}
        self._current_file: Path | None = None
        self._history: List[TextToolHistoryEntry] = []
        self._lock = threading.Lock()
        self._logger = logging.getLogger("TextToolSession")

    @property
    def working_directory(self) -> Path:
        """Directory relative paths are resolved against."""
        return self._working_directory

    def resolve_path(self, path_str: str) -> Path:
        """
        Resolve a path against the working directory.

        Args:
            path_str: Absolute or relative path

        Returns:
            Absolute path
        """
        path = Path(path_str).expanduser()
        if not path.is_absolute():
            path = self._working_directory / path

        return path.resolve()

    def open_file(self, path: Path, lines: List[str]) -> Dict[str, Any]:
        """
        Open (or reopen) a file and make it current.

        Args:
            path: File path
            lines: File content as lines

        Returns:
            Snapshot of the file's window
        """
        with self._lock:
            view = TextToolFileView(path=path, lines=lines, window_size=self._window_size)
            self._open_files[path] = view
            self._current_file = path
            return view.to_dict()

    def current_file(self) -> Path | None:
        """Path of the current file, if any."""
        with self._lock:
            return self._current_file

    def goto_line(self, line_number: int) -> Dict[str, Any] | None:
        """
        Move the current file's window to a line.

        Args:
            line_number: Line to show (1-indexed)

        Returns:
            Snapshot of the window, or None if there is no current file or the line does not exist
        """
        with self._lock:
            if self._current_file is None:
                return None

            view = self._open_files[self._current_file]
            if not view.goto_line(line_number):
                return None

            return view.to_dict()

    def current_view(self) -> Dict[str, Any] | None:
        """Snapshot of the current file's window, if any."""
        with self._lock:
            if self._current_file is None:
                return None

            return self._open_files[self._current_file].to_dict()

    def refresh_file(self, path: Path, lines: List[str]) -> None:
        """
        Update an open file's content after it has been edited.

        Files that are not open are ignored.

        Args:
            path: File path
            lines: New content as lines
        """
        with self._lock:
            view = self._open_files.get(path)
            if view is not None:
                view.set_lines(lines)

    def push_history(self, operation: str, path: Path | None = None) -> None:
        """
        Append to the operation log, discarding the oldest entries beyond max_history.

        Args:
            operation: Human-readable description of what was done
            path: File the operation acted on
        """
        with self._lock:
            self._history.append(TextToolHistoryEntry(
                timestamp=datetime.now(),
                operation=operation,
                path=str(path) if path else None
            ))
            if len(self._history) > self._max_history:
                del self._history[:len(self._history) - self._max_history]

        self._logger.debug("History: %s", operation)

    def history(self) -> List[TextToolHistoryEntry]:
        """Copy of the operation log, oldest first."""
        with self._lock:
            return list(self._history)

    def summary(self) -> Dict[str, Any]:
        """
        Summarize the session.

        Returns:
            Dictionary with the working directory, open files, current file and history
        """
        with self._lock:
            return {
                'working_directory': str(self._working_directory),
                'current_file': str(self._current_file) if self._current_file else None,
                'open_files': [str(path) for path in self._open_files],
                'history_length': len(self._history),
                'history': [entry.to_dict() for entry in self._history]
            }
