"""Base lexical state machine for locating function spans in brace-delimited languages."""

import logging
import re
from abc import ABC, abstractmethod
from typing import List

from span_scan.span_scan_types import FunctionSpan, ScanResult


class SpanScanner(ABC):
    """
    Locates the full text of a named function.

    The scan runs in two passes over the raw characters.  The signature pass
    tracks parenthesis and angle-bracket depth until it sees the opening brace
    of the body (or a top-level semicolon, meaning there is no body).  The body
    pass tracks brace depth until it returns to zero.  Both passes step over
    comments, string literals and character literals so that brackets inside
    them are ignored.

    Subclasses provide the declaration pattern and decide which lines above a
    declaration belong to it (attributes, doc comments).
    """

    def __init__(self) -> None:
        self._input: str = ""
        self._input_len: int = 0
        self._position: int = 0
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def _declaration_pattern(self, function_name: str) -> re.Pattern[str]:
        """
        Build the pattern that finds a line-anchored declaration of a function.

        Args:
            function_name: Name of the function

        Returns:
            Compiled pattern; a match must start at the beginning of a line
        """

    @abstractmethod
    def _is_attached_line(self, stripped_line: str) -> bool:
        """
        Determine if a line above a declaration belongs to it.

        Args:
            stripped_line: The line with leading whitespace removed

        Returns:
            True if the line is an attribute or doc comment
        """

    def _starts_char_literal(self) -> bool:
        """
        Determine if the quote at the current position opens a character literal.

        Returns:
            True if a character literal starts here
        """
        return True

    def find_function_span(self, content: str, function_name: str) -> FunctionSpan | None:
        """
        Find the span of the first declaration of a function that has a body.

        Declarations without a body are skipped, as are declarations whose braces
        never balance.

        Args:
            content: Source text
            function_name: Name of the function

        Returns:
            FunctionSpan, or None if no declaration with a body was found
        """
        self._input = content
        self._input_len = len(content)

        code_position = 0
        for match in self._declaration_pattern(function_name).finditer(content):
            code_position = self._advance_through_code(code_position, match.start())
            if code_position != match.start():
                self._logger.debug(
                    "Declaration of '%s' at offset %d is inside a comment or literal", function_name, match.start()
                )
                continue

            body_start = self._scan_signature(match.end())
            if body_start is None:
                self._logger.debug("Declaration of '%s' at offset %d has no body", function_name, match.start())
                continue

            body_end = self._scan_body(body_start)
            if body_end is None:
                self._logger.debug("Body of '%s' at offset %d is never closed", function_name, body_start)
                continue

            return self._build_span(content, match.start(), body_end)

        return None

    def delete_function(self, content: str, function_name: str) -> ScanResult | None:
        """
        Delete a function, with its attached attributes and doc comments.

        Only whole lines are removed.

        Args:
            content: Source text
            function_name: Name of the function

        Returns:
            ScanResult with the new content, or None if the function was not found
        """
        span = self.find_function_span(content, function_name)
        if span is None:
            return None

        return ScanResult(
            start_line=span.start_line,
            end_line=span.end_line,
            content=content[:span.char_start] + content[span.char_end:]
        )

    def _advance_through_code(self, position: int, target: int) -> int:
        """
        Walk forward from a code position towards a target offset.

        Args:
            position: Offset known to be in code
            target: Offset to walk to

        Returns:
            The target if it is in code, otherwise the first code offset past it
        """
        self._position = position
        while self._position < target:
            if not self._skip_non_code():
                self._position += 1

        return self._position

    def _scan_signature(self, position: int) -> int | None:
        """
        Scan from the end of a declaration match to the opening brace of its body.

        Args:
            position: Offset to start scanning from

        Returns:
            Offset of the body's opening brace, or None if there is no body
        """
        self._position = position
        paren_depth = 0
        angle_depth = 0
        prev = ''

        while self._position < self._input_len:
            if self._skip_non_code():
                prev = ''
                continue

            ch = self._input[self._position]
            if ch == '(':
                paren_depth += 1

            elif ch == ')':
                paren_depth -= 1

            elif ch == '<':
                angle_depth += 1

            elif ch == '>':
                # '->' introduces a return type
                if prev != '-' and angle_depth > 0:
                    angle_depth -= 1

            elif paren_depth == 0 and angle_depth == 0:
                if ch == ';':
                    return None

                if ch == '{':
                    return self._position

            prev = ch
            self._position += 1

        return None

    def _scan_body(self, position: int) -> int | None:
        """
        Scan from a body's opening brace to just past its closing brace.

        Args:
            position: Offset of the opening brace

        Returns:
            Offset just past the closing brace, or None if it is never closed
        """
        self._position = position
        depth = 0

        while self._position < self._input_len:
            if self._skip_non_code():
                continue

            ch = self._input[self._position]
            if ch == '{':
                depth += 1

            elif ch == '}':
                depth -= 1
                if depth == 0:
                    return self._position + 1

            self._position += 1

        return None

    def _skip_non_code(self) -> bool:
        """
        Step over a comment or literal starting at the current position.

        Returns:
            True if the position was advanced
        """
        ch = self._input[self._position]
        next_ch = self._input[self._position + 1] if self._position + 1 < self._input_len else ''

        if ch == '/' and next_ch == '/':
            self._skip_line_comment()
            return True

        if ch == '/' and next_ch == '*':
            self._skip_block_comment()
            return True

        if ch == '"':
            self._skip_quoted('"')
            return True

        if ch == "'":
            if self._starts_char_literal():
                self._skip_quoted("'")

            else:
                self._position += 1

            return True

        return False

    def _skip_line_comment(self) -> None:
        """Skip to the newline that ends a line comment."""
        end = self._input.find('\n', self._position + 2)
        self._position = self._input_len if end == -1 else end

    def _skip_block_comment(self) -> None:
        """Skip past the end of a block comment."""
        end = self._input.find('*/', self._position + 2)
        self._position = self._input_len if end == -1 else end + 2

    def _skip_quoted(self, quote: str) -> None:
        """Skip past a string or character literal; a backslash escapes the next character."""
        self._position += 1

        while self._position < self._input_len:
            ch = self._input[self._position]
            if ch == '\\':
                self._position += 2
                continue

            self._position += 1
            if ch == quote:
                return

    def _build_span(self, content: str, declaration_start: int, body_end: int) -> FunctionSpan:
        """
        Work out the whole-line span for a declaration, widened over attached lines.

        Args:
            content: Source text
            declaration_start: Offset of the start of the declaration match
            body_end: Offset just past the closing brace

        Returns:
            FunctionSpan covering complete lines
        """
        lines = self._split_lines(content)
        declaration_line = content.count('\n', 0, declaration_start) + 1
        end_line = content.count('\n', 0, body_end - 1) + 1

        start_line = declaration_line
        while start_line > 1 and self._is_attached_line(lines[start_line - 2].lstrip()):
            start_line -= 1

        char_start = sum(len(line) for line in lines[:start_line - 1])
        char_end = char_start + sum(len(line) for line in lines[start_line - 1:end_line])

        return FunctionSpan(
            start_line=start_line,
            end_line=end_line,
            declaration_line=declaration_line,
            char_start=char_start,
            char_end=char_end
        )

    @staticmethod
    def _split_lines(content: str) -> List[str]:
        """Split on LF, keeping terminators."""
        lines = content.split('\n')
        result = [line + '\n' for line in lines[:-1]]
        if lines[-1]:
            result.append(lines[-1])

        return result
