"""Pick a single candidate or explain why that is not possible."""

import logging
import re
from typing import List

from text_edit.text_edit_exceptions import TextEditValidationError
from text_edit.text_edit_normalizer import TextEditNormalizer
from text_edit.text_edit_types import (
    MatchCandidate, MatchDiagnostic, MatchSelection, MatchSuggestion, NormalizationOptions
)


class TextEditSelector:
    """Disambiguates the output of TextEditMatcher."""

    # Normalization flags tried when nothing matched: (flag, suggestion type, description, suggestion)
    _ALTERNATE_PROFILES = [
        (
            "ignore_case",
            "case_difference",
            "Pattern found with different case",
            "Enable case-insensitive matching with 'ignore_case: true'"
        ),
        (
            "normalize_eol",
            "eol_difference",
            "Pattern found with different line endings",
            "Line ending differences detected. Try 'normalize_eol: true'"
        ),
        (
            "normalize_whitespace",
            "whitespace_difference",
            "Pattern found with different whitespace",
            "Whitespace differences detected. Try 'normalize_whitespace: true'"
        ),
    ]

    def __init__(self) -> None:
        """Initialize the selector."""
        self._logger = logging.getLogger("TextEditSelector")

    def select(
        self,
        candidates: List[MatchCandidate],
        occurrence: int | None,
        content: str,
        pattern: str,
        normalization: NormalizationOptions,
        regex: bool = False
    ) -> MatchSelection:
        """
        Select one candidate.

        Args:
            candidates: Candidates produced by the matcher
            occurrence: Optional 1-based index of the candidate to use
            content: Buffer the candidates were found in (used only for diagnosis)
            pattern: Pattern that was searched for
            normalization: Normalization used for the search
            regex: True if the pattern is a regular expression

        Returns:
            MatchSelection holding either the chosen candidate or a diagnostic

        Raises:
            TextEditValidationError: If occurrence is outside 1..len(candidates)
        """
        if not candidates:
            self._logger.debug("No matches for pattern, generating suggestions")
            return MatchSelection(diagnostic=MatchDiagnostic(
                error_type="no_matches",
                message=f"No matches found for '{pattern}'",
                suggestions=self.no_match_suggestions(content, pattern, normalization, regex)
            ))

        count = len(candidates)
        if occurrence is None:
            if count == 1:
                return MatchSelection(candidate=candidates[0])

            return MatchSelection(diagnostic=MatchDiagnostic(
                error_type="multiple_matches",
                message=f"Found {count} occurrences of '{pattern}'",
                candidates=candidates,
                suggestions=self._multiple_match_suggestions(count)
            ))

        if occurrence < 1 or occurrence > count:
            raise TextEditValidationError(
                f"Invalid occurrence {occurrence}. Found {count} matches",
                {"occurrence": occurrence, "total_matches": count}
            )

        return MatchSelection(candidate=candidates[occurrence - 1])

    def no_match_suggestions(
        self,
        content: str,
        pattern: str,
        normalization: NormalizationOptions,
        regex: bool = False
    ) -> List[MatchSuggestion]:
        """
        Work out which extra normalization flag would have found the pattern.

        Each flag is tried on its own, on top of the caller's profile.  Flags that
        are already enabled cannot change the outcome and are skipped.

        Args:
            content: Buffer that was searched
            pattern: Pattern that was not found
            normalization: Normalization used for the search
            regex: True if the pattern is a regular expression

        Returns:
            One suggestion per flag that would have produced a match
        """
        suggestions: List[MatchSuggestion] = []
        current = normalization.to_dict()

        for flag, suggestion_type, description, suggestion in self._ALTERNATE_PROFILES:
            if current[flag]:
                continue

            if self._profile_finds(content, pattern, normalization.with_flag(flag), regex):
                suggestions.append(MatchSuggestion(suggestion_type, description, suggestion))

        return suggestions

    def _profile_finds(self, content: str, pattern: str, profile: NormalizationOptions, regex: bool) -> bool:
        """Check if a search under an alternate profile finds a non-empty match."""
        normalized = TextEditNormalizer.normalize(content, profile)

        if regex:
            try:
                compiled = TextEditNormalizer.compile_regex(pattern, profile)

            except re.error:
                return False

            return any(match.end() > match.start() for match in compiled.finditer(normalized))

        norm_pattern = TextEditNormalizer.normalize(pattern, profile)
        return bool(norm_pattern) and norm_pattern in normalized

    def _multiple_match_suggestions(self, count: int) -> List[MatchSuggestion]:
        """Suggestions for resolving an ambiguous match."""
        return [
            MatchSuggestion(
                "select_occurrence",
                f"{count} matches found",
                f"Use 'occurrence: N' parameter to select specific match (1-{count})"
            ),
            MatchSuggestion(
                "add_context",
                "Pattern is not unique",
                "Provide more context in old_text to make the match unique"
            ),
            MatchSuggestion(
                "navigate",
                "Inspect the matches",
                "Use file navigation tools to view matches: 'open_file' and 'goto_line <line_number>'"
            ),
        ]
