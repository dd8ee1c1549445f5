"""Whole-line edits: deleting line ranges and inserting text between lines."""

from typing import List

from text_edit.text_edit_exceptions import TextEditValidationError
from text_edit.text_edit_types import LineEditOutcome


class TextEditLines:
    """Line-oriented edits that never split a line."""

    POSITIONS = ("before_line", "after_line", "at_end")

    @staticmethod
    def split_lines(content: str) -> List[str]:
        """
        Split content into lines, keeping each line's terminator.

        Only LF ends a line, so a CRLF pair stays attached to its line.

        Args:
            content: Text to split

        Returns:
            List of lines; joining them gives back the original content
        """
        lines = content.split('\n')
        result = [line + '\n' for line in lines[:-1]]
        if lines[-1]:
            result.append(lines[-1])

        return result

    @classmethod
    def count_lines(cls, content: str) -> int:
        """Number of lines in content; a final line without a newline still counts."""
        return len(cls.split_lines(content))

    @classmethod
    def delete_lines(cls, content: str, start_line: int, end_line: int) -> LineEditOutcome:
        """
        Delete an inclusive range of lines.

        Args:
            content: Text to edit
            start_line: First line to delete (1-indexed)
            end_line: Last line to delete (1-indexed, clamped to the last line)

        Returns:
            LineEditOutcome with the new content

        Raises:
            TextEditValidationError: If the range is invalid
        """
        if start_line < 1:
            raise TextEditValidationError(
                f"Invalid start_line {start_line}. Line numbers are 1-based",
                {"start_line": start_line}
            )

        if end_line < start_line:
            raise TextEditValidationError(
                f"Invalid line range: {start_line} > {end_line}",
                {"start_line": start_line, "end_line": end_line}
            )

        lines = cls.split_lines(content)
        total = len(lines)
        if start_line > total:
            raise TextEditValidationError(
                f"Invalid start_line {start_line}. File has {total} lines",
                {"start_line": start_line, "total_lines": total}
            )

        end_line = min(end_line, total)
        remaining = lines[:start_line - 1] + lines[end_line:]

        return LineEditOutcome(
            content=''.join(remaining),
            start_line=start_line,
            end_line=end_line,
            lines_removed=end_line - start_line + 1,
            total_lines=len(remaining)
        )

    @classmethod
    def insert_lines(cls, content: str, line_number: int, text: str, position: str = "after_line") -> LineEditOutcome:
        """
        Insert text as one or more whole lines.

        Args:
            content: Text to edit
            line_number: Reference line (1-indexed, may be one past the last line)
            text: Text to insert; a trailing newline is added if missing
            position: 'before_line', 'after_line' or 'at_end'

        Returns:
            LineEditOutcome; start_line is the line number the inserted text now starts at

        Raises:
            TextEditValidationError: If the line number or position is invalid
        """
        lines = cls.split_lines(content)
        total = len(lines)

        if line_number < 1 or line_number > total + 1:
            raise TextEditValidationError(
                f"Invalid line number {line_number}. File has {total} lines",
                {"line_number": line_number, "total_lines": total}
            )

        if position == "before_line":
            index = line_number - 1

        elif position == "after_line":
            index = min(line_number, total)

        elif position == "at_end":
            index = total

        else:
            raise TextEditValidationError(
                f"Invalid position '{position}'. Use 'before_line', 'after_line', or 'at_end'",
                {"position": position}
            )

        if not text.endswith('\n'):
            text += '\n'

        # The line we insert after must be terminated
        if index == total and lines and not lines[-1].endswith('\n'):
            lines[-1] += '\n'

        new_lines = cls.split_lines(text)
        result = lines[:index] + new_lines + lines[index:]

        return LineEditOutcome(
            content=''.join(result),
            start_line=index + 1,
            end_line=index + len(new_lines),
            lines_added=len(new_lines),
            total_lines=len(result)
        )
