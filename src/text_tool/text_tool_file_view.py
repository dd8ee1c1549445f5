"""Windowed view over a file's lines."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class TextToolFileView:
    """
    A file's lines plus the window currently being looked at.

    Attributes:
        path: File the lines came from
        lines: File content as lines, without terminators
        window_start: First line in the window (0-indexed)
        window_size: Number of lines shown at once
    """
    path: Path
    lines: List[str] = field(default_factory=list)
    window_start: int = 0
    window_size: int = 100

    @property
    def total_lines(self) -> int:
        """Number of lines in the file."""
        return len(self.lines)

    @property
    def window_end(self) -> int:
        """Exclusive end of the window (0-indexed)."""
        return min(self.window_start + self.window_size, len(self.lines))

    def goto_line(self, line_number: int) -> bool:
        """
        Move the window so that a line is centred in it, where possible.

        Args:
            line_number: Line to show (1-indexed)

        Returns:
            True if the line exists and the window moved
        """
        if line_number < 1 or line_number > len(self.lines):
            return False

        target = line_number - 1
        start = max(0, target - self.window_size // 2)
        max_start = max(0, len(self.lines) - self.window_size)
        self.window_start = min(start, max_start)
        return True

    def set_lines(self, lines: List[str]) -> None:
        """Replace the content, keeping the window inside the new bounds."""
        self.lines = lines
        max_start = max(0, len(lines) - self.window_size)
        self.window_start = min(self.window_start, max_start)

    def numbered_window(self) -> List[str]:
        """Lines in the window, each prefixed with its 1-indexed line number."""
        return [
            f"{self.window_start + i + 1:4} | {line}"
            for i, line in enumerate(self.lines[self.window_start:self.window_end])
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the view to a dictionary."""
        return {
            'path': str(self.path),
            'total_lines': len(self.lines),
            'window_start': self.window_start + 1 if self.lines else 0,
            'window_end': self.window_end,
            'is_at_start': self.window_start == 0,
            'is_at_end': self.window_end >= len(self.lines),
            'lines': self.numbered_window()
        }
