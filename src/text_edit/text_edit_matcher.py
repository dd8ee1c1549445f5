"""Locate candidate spans for a pattern using literal, regex or fuzzy matching."""

import bisect
import logging
import re
from typing import List, Tuple

from text_edit.text_edit_exceptions import TextEditPatternError
from text_edit.text_edit_normalizer import TextEditNormalizer
from text_edit.text_edit_types import MatchCandidate, MatchingOptions, NormalizationOptions


class TextEditMatcher:
    """
    Finds every place a pattern occurs in a buffer.

    Literal and regex searches run over the normalized buffer and are mapped back
    onto the original one, so candidate offsets are always valid for splicing into
    the content that was passed in.  Fuzzy matching compares whole original lines.
    """

    def __init__(self) -> None:
        """Initialize the matcher."""
        self._logger = logging.getLogger("TextEditMatcher")

    def find_matches(
        self,
        content: str,
        pattern: str,
        matching: MatchingOptions,
        normalization: NormalizationOptions
    ) -> List[MatchCandidate]:
        """
        Find candidate spans for a pattern.

        Args:
            content: Buffer to search
            pattern: Text (or regular expression) to look for
            matching: Search strategy options
            normalization: Transforms applied before comparing

        Returns:
            List of candidates in left-to-right order, at most max_matches long

        Raises:
            TextEditPatternError: If regex matching is enabled and the pattern does not compile
        """
        line_offsets = self._line_offsets(content)
        lines = self._lines(content)

        if matching.regex:
            spans = self._find_regex(content, pattern, matching, normalization)
            strategy = "regex"

        else:
            spans = self._find_literal(content, pattern, matching, normalization)
            strategy = "literal"

        if spans:
            self._logger.debug("Found %d %s match(es)", len(spans), strategy)
            return [
                self._build_candidate(i + 1, start, end, content, lines, line_offsets, matching, 1.0, strategy)
                for i, (start, end) in enumerate(spans)
            ]

        if not matching.fuzzy:
            return []

        candidates = self._find_fuzzy(content, pattern, lines, line_offsets, matching, normalization)
        self._logger.debug("Found %d fuzzy match(es)", len(candidates))
        return candidates

    @staticmethod
    def levenshtein_distance(a: str, b: str) -> int:
        """
        Compute the edit distance between two strings.

        Args:
            a: First string
            b: Second string

        Returns:
            Minimum number of single-character insertions, deletions or substitutions
        """
        if len(a) < len(b):
            a, b = b, a

        if not b:
            return len(a)

        previous = list(range(len(b) + 1))
        for i, ca in enumerate(a):
            current = [i + 1]
            for j, cb in enumerate(b):
                insertions = previous[j + 1] + 1
                deletions = current[j] + 1
                substitutions = previous[j] + (ca != cb)
                current.append(min(insertions, deletions, substitutions))

            previous = current

        return previous[-1]

    @classmethod
    def similarity(cls, a: str, b: str) -> float:
        """
        Similarity score between two strings, from 0.0 to 1.0.

        Args:
            a: First string
            b: Second string

        Returns:
            1 - distance / longest length; 1.0 when both are identical or empty
        """
        if a == b:
            return 1.0

        longest = max(len(a), len(b))
        return 1.0 - cls.levenshtein_distance(a, b) / longest

    def _find_literal(
        self,
        content: str,
        pattern: str,
        matching: MatchingOptions,
        normalization: NormalizationOptions
    ) -> List[Tuple[int, int]]:
        """Non-overlapping substring search, returning original-buffer spans."""
        norm_pattern = TextEditNormalizer.normalize(pattern, normalization)
        if not norm_pattern:
            return []

        normalized = TextEditNormalizer.normalize_with_offsets(content, normalization)
        spans: List[Tuple[int, int]] = []
        pos = normalized.text.find(norm_pattern)
        while pos != -1 and len(spans) < matching.max_matches:
            spans.append(normalized.to_original_span(pos, pos + len(norm_pattern)))
            pos = normalized.text.find(norm_pattern, pos + len(norm_pattern))

        return spans

    def _find_regex(
        self,
        content: str,
        pattern: str,
        matching: MatchingOptions,
        normalization: NormalizationOptions
    ) -> List[Tuple[int, int]]:
        """Regular expression search, returning original-buffer spans."""
        try:
            compiled = TextEditNormalizer.compile_regex(pattern, normalization)

        except re.error as e:
            raise TextEditPatternError(
                f"Invalid regular expression '{pattern}': {e}",
                {"pattern": pattern, "position": e.pos}
            ) from e

        normalized = TextEditNormalizer.normalize_with_offsets(content, normalization)
        spans: List[Tuple[int, int]] = []
        for match in compiled.finditer(normalized.text):
            if len(spans) >= matching.max_matches:
                break

            # Empty matches have nothing to replace
            if match.end() == match.start():
                continue

            spans.append(normalized.to_original_span(match.start(), match.end()))

        return spans

    def _find_fuzzy(
        self,
        content: str,
        pattern: str,
        lines: List[str],
        line_offsets: List[int],
        matching: MatchingOptions,
        normalization: NormalizationOptions
    ) -> List[MatchCandidate]:
        """Compare the pattern against every line and keep those above the threshold."""
        norm_pattern = TextEditNormalizer.normalize(pattern, normalization)
        candidates: List[MatchCandidate] = []
        if not norm_pattern:
            return candidates

        for line_index, line in enumerate(lines):
            if len(candidates) >= matching.max_matches:
                break

            norm_line = TextEditNormalizer.normalize(line, normalization)
            longest = max(len(norm_line), len(norm_pattern))

            # The length difference alone is a lower bound on the edit distance
            if longest and 1.0 - abs(len(norm_line) - len(norm_pattern)) / longest < matching.fuzzy_threshold:
                continue

            score = self.similarity(norm_line, norm_pattern)
            if score < matching.fuzzy_threshold:
                continue

            start = line_offsets[line_index]
            candidates.append(self._build_candidate(
                len(candidates) + 1,
                start,
                start + len(line),
                content,
                lines,
                line_offsets,
                matching,
                score,
                "fuzzy"
            ))

        return candidates

    def _build_candidate(
        self,
        index: int,
        start: int,
        end: int,
        content: str,
        lines: List[str],
        line_offsets: List[int],
        matching: MatchingOptions,
        score: float,
        strategy: str
    ) -> MatchCandidate:
        """Create a candidate, working out its line range and context."""
        line_start = bisect.bisect_right(line_offsets, start)
        line_end = bisect.bisect_right(line_offsets, end - 1) if end > start else line_start

        context = max(0, matching.context_lines)
        context_before = lines[max(0, line_start - 1 - context):line_start - 1]
        context_after = lines[line_end:line_end + context]

        return MatchCandidate(
            index=index,
            line_start=line_start,
            line_end=line_end,
            char_start=start,
            char_end=end,
            matched_text=content[start:end],
            context_before=context_before,
            context_after=context_after,
            similarity=score,
            strategy=strategy
        )

    @staticmethod
    def _line_offsets(content: str) -> List[int]:
        """Offsets at which each line starts."""
        offsets = [0]
        pos = content.find('\n')
        while pos != -1:
            offsets.append(pos + 1)
            pos = content.find('\n', pos + 1)

        return offsets

    @staticmethod
    def _lines(content: str) -> List[str]:
        """Lines of the buffer without their terminators (a CR before LF is part of the terminator)."""
        if not content:
            return []

        lines = content.split('\n')
        if content.endswith('\n'):
            lines.pop()

        return [line[:-1] if line.endswith('\r') else line for line in lines]
