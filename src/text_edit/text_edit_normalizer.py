"""Text normalization with optional position mapping back to the original buffer."""

import re
from dataclasses import dataclass, field, replace
from typing import List, Tuple

from text_edit.text_edit_types import NormalizationOptions


@dataclass
class NormalizedText:
    """
    Normalized text plus the original segment each character came from.

    Attributes:
        text: The normalized text
        starts: For each normalized character, start offset of its source segment
        ends: For each normalized character, exclusive end offset of its source segment
        original_length: Length of the original buffer
    """
    text: str
    starts: List[int] = field(default_factory=list)
    ends: List[int] = field(default_factory=list)
    original_length: int = 0

    def to_original_span(self, start: int, end: int) -> Tuple[int, int]:
        """
        Map a span of the normalized text onto the original buffer.

        Args:
            start: Start offset in the normalized text
            end: Exclusive end offset in the normalized text

        Returns:
            Tuple of (start, end) offsets in the original buffer
        """
        if start >= end:
            pos = self.starts[start] if start < len(self.starts) else self.original_length
            return pos, pos

        return self.starts[start], self.ends[end - 1]


class TextEditNormalizer:
    """
    Applies the configured normalization transforms.

    Transforms always run in the same order: line endings, trailing whitespace,
    whitespace collapsing, then case folding.  Applying them to text that is
    already normalized leaves it unchanged.
    """

    _WHITESPACE_RUN = re.compile(r'\s+')

    @classmethod
    def normalize(cls, text: str, options: NormalizationOptions) -> str:
        """
        Normalize text according to options.

        Args:
            text: Text to normalize
            options: Which transforms to apply

        Returns:
            Normalized text
        """
        result = text

        if options.normalize_eol:
            result = result.replace('\r\n', '\n').replace('\r', '\n')

        if options.trim_lines:
            result = '\n'.join(line.rstrip() for line in result.split('\n'))

        if options.normalize_whitespace:
            result = cls._WHITESPACE_RUN.sub(' ', result)
            if options.trim_lines and result.endswith(' '):
                result = result[:-1]

        if options.ignore_case:
            result = cls._lower(result)

        return result

    @classmethod
    def compile_regex(cls, pattern: str, options: NormalizationOptions) -> re.Pattern[str]:
        """
        Compile a regular expression for searching text normalized with options.

        The expression itself is never lower-cased, since that would turn escapes
        such as \\S, \\W and \\Z into different ones.  Case folding is done with
        re.IGNORECASE instead.

        Args:
            pattern: Regular expression source
            options: Normalization applied to the text being searched

        Returns:
            Compiled pattern

        Raises:
            re.error: If the expression is invalid
        """
        norm_pattern = cls.normalize(pattern, replace(options, ignore_case=False))
        flags = re.IGNORECASE if options.ignore_case else 0
        return re.compile(norm_pattern, flags)

    @classmethod
    def normalize_with_offsets(cls, text: str, options: NormalizationOptions) -> NormalizedText:
        """
        Normalize text and record where each output character came from.

        The resulting text is identical to `normalize(text, options)`.

        Args:
            text: Text to normalize
            options: Which transforms to apply

        Returns:
            NormalizedText carrying the position map
        """
        chars = list(text)
        starts = list(range(len(text)))
        ends = list(range(1, len(text) + 1))

        if options.normalize_eol:
            chars, starts, ends = cls._map_line_endings(chars, starts, ends)

        if options.trim_lines:
            chars, starts, ends = cls._map_trim_lines(chars, starts, ends)

        if options.normalize_whitespace:
            chars, starts, ends = cls._map_collapse_whitespace(chars, starts, ends, options.trim_lines)

        if options.ignore_case:
            chars, starts, ends = cls._map_lower(chars, starts, ends)

        return NormalizedText(''.join(chars), starts, ends, len(text))

    @staticmethod
    def _lower(text: str) -> str:
        """
        Lower-case text without ever changing its length relationship per character.

        str.lower() applies context-sensitive rules (e.g. Greek final sigma) and
        may expand some characters; fall back to per-character folding whenever
        the whole-string result differs in length so both code paths agree.
        """
        lowered = text.lower()
        if len(lowered) == len(text):
            return lowered

        return ''.join(ch.lower() for ch in text)

    @staticmethod
    def _map_line_endings(
        chars: List[str],
        starts: List[int],
        ends: List[int]
    ) -> Tuple[List[str], List[int], List[int]]:
        """Convert CRLF and lone CR into LF."""
        out_chars: List[str] = []
        out_starts: List[int] = []
        out_ends: List[int] = []
        i = 0
        count = len(chars)

        while i < count:
            ch = chars[i]
            if ch == '\r':
                if i + 1 < count and chars[i + 1] == '\n':
                    out_chars.append('\n')
                    out_starts.append(starts[i])
                    out_ends.append(ends[i + 1])
                    i += 2
                    continue

                out_chars.append('\n')
                out_starts.append(starts[i])
                out_ends.append(ends[i])
                i += 1
                continue

            out_chars.append(ch)
            out_starts.append(starts[i])
            out_ends.append(ends[i])
            i += 1

        return out_chars, out_starts, out_ends

    @staticmethod
    def _map_trim_lines(
        chars: List[str],
        starts: List[int],
        ends: List[int]
    ) -> Tuple[List[str], List[int], List[int]]:
        """Drop whitespace that sits immediately before a newline or the end of the buffer."""
        out_chars: List[str] = []
        out_starts: List[int] = []
        out_ends: List[int] = []
        pending: List[int] = []

        for i, ch in enumerate(chars):
            if ch == '\n':
                pending = []
                out_chars.append(ch)
                out_starts.append(starts[i])
                out_ends.append(ends[i])
                continue

            if ch.isspace():
                pending.append(i)
                continue

            for j in pending:
                out_chars.append(chars[j])
                out_starts.append(starts[j])
                out_ends.append(ends[j])

            pending = []
            out_chars.append(ch)
            out_starts.append(starts[i])
            out_ends.append(ends[i])

        return out_chars, out_starts, out_ends

    @staticmethod
    def _map_collapse_whitespace(
        chars: List[str],
        starts: List[int],
        ends: List[int],
        drop_trailing: bool
    ) -> Tuple[List[str], List[int], List[int]]:
        """Replace every run of whitespace with a single space."""
        out_chars: List[str] = []
        out_starts: List[int] = []
        out_ends: List[int] = []
        i = 0
        count = len(chars)

        while i < count:
            if not chars[i].isspace():
                out_chars.append(chars[i])
                out_starts.append(starts[i])
                out_ends.append(ends[i])
                i += 1
                continue

            run_start = i
            while i < count and chars[i].isspace():
                i += 1

            if drop_trailing and i == count:
                break

            out_chars.append(' ')
            out_starts.append(starts[run_start])
            out_ends.append(ends[i - 1])

        return out_chars, out_starts, out_ends

    @classmethod
    def _map_lower(
        cls,
        chars: List[str],
        starts: List[int],
        ends: List[int]
    ) -> Tuple[List[str], List[int], List[int]]:
        """Lower-case every character, keeping each expansion mapped to its source."""
        text = ''.join(chars)
        lowered = text.lower()
        if len(lowered) == len(text):
            return list(lowered), starts, ends

        out_chars: List[str] = []
        out_starts: List[int] = []
        out_ends: List[int] = []
        for i, ch in enumerate(chars):
            for lower_ch in ch.lower():
                out_chars.append(lower_ch)
                out_starts.append(starts[i])
                out_ends.append(ends[i])

        return out_chars, out_starts, out_ends
