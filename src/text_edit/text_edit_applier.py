"""Splice a replacement into the buffer a candidate was computed against."""

from text_edit.text_edit_exceptions import TextEditApplicationError
from text_edit.text_edit_types import EditOutcome, MatchCandidate


class TextEditApplier:
    """Applies a single replacement at a verified character range."""

    def apply(self, buffer: str, candidate: MatchCandidate, replacement: str) -> EditOutcome:
        """
        Replace the candidate's span with new text.

        Args:
            buffer: The exact buffer the candidate was found in
            candidate: Span to replace
            replacement: Text to put in its place

        Returns:
            EditOutcome describing the new buffer and the change

        Raises:
            TextEditApplicationError: If the candidate's offsets do not describe its
                matched text within this buffer
        """
        start = candidate.char_start
        end = candidate.char_end

        if start < 0 or end < start or end > len(buffer):
            raise TextEditApplicationError(
                f"Span {start}..{end} is outside the buffer (length {len(buffer)})",
                {"char_start": start, "char_end": end, "buffer_length": len(buffer)}
            )

        if buffer[start:end] != candidate.matched_text:
            raise TextEditApplicationError(
                f"Text at {start}..{end} does not match the candidate",
                {
                    "char_start": start,
                    "char_end": end,
                    "expected": candidate.matched_text,
                    "actual": buffer[start:end]
                }
            )

        return EditOutcome(
            content=buffer[:start] + replacement + buffer[end:],
            line_start=candidate.line_start,
            line_end=candidate.line_end,
            char_start=start,
            char_end=end,
            original_text=candidate.matched_text,
            new_text=replacement
        )
