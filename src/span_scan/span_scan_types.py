"""Result types for structural span scanning."""

from dataclasses import dataclass


@dataclass
class FunctionSpan:
    """
    Location of a function's full text.

    Attributes:
        start_line: First line of the span (1-indexed), including attached attributes and doc comments
        end_line: Last line of the span (1-indexed, inclusive)
        declaration_line: Line holding the function keyword (1-indexed)
        char_start: Offset of the first character of start_line
        char_end: Offset just past the terminator of end_line
    """
    start_line: int
    end_line: int
    declaration_line: int
    char_start: int
    char_end: int


@dataclass
class ScanResult:
    """Outcome of deleting a function span."""

    start_line: int
    end_line: int
    content: str

    @property
    def lines_deleted(self) -> int:
        """Number of whole lines removed."""
        return self.end_line - self.start_line + 1
