"""Shared dataclasses for text edit operations."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class NormalizationOptions:
    """Text transforms applied to both content and pattern before matching."""

    normalize_eol: bool = True  # CRLF and lone CR become LF
    trim_lines: bool = False  # Strip trailing whitespace from every line
    normalize_whitespace: bool = False  # Collapse whitespace runs to a single space
    ignore_case: bool = False  # Lower-case everything

    def with_flag(self, flag: str) -> 'NormalizationOptions':
        """
        Return a copy of these options with one flag switched on.

        Args:
            flag: Name of the flag to enable

        Returns:
            New NormalizationOptions instance
        """
        values = self.to_dict()
        values[flag] = True
        return NormalizationOptions(**values)

    def to_dict(self) -> Dict[str, bool]:
        """Convert the options to a dictionary."""
        return {
            'normalize_eol': self.normalize_eol,
            'trim_lines': self.trim_lines,
            'normalize_whitespace': self.normalize_whitespace,
            'ignore_case': self.ignore_case
        }


@dataclass
class MatchingOptions:
    """Controls how candidates are searched for."""

    regex: bool = False
    fuzzy: bool = True
    fuzzy_threshold: float = 0.8
    context_lines: int = 3
    max_matches: int = 10

    def to_dict(self) -> Dict[str, Any]:
        """Convert the options to a dictionary."""
        return {
            'regex': self.regex,
            'fuzzy': self.fuzzy,
            'fuzzy_threshold': self.fuzzy_threshold,
            'context_lines': self.context_lines,
            'max_matches': self.max_matches
        }


@dataclass
class MatchCandidate:
    """A single location where a pattern was found."""

    index: int  # 1-based ordinal among all candidates
    line_start: int  # 1-indexed, inclusive
    line_end: int  # 1-indexed, inclusive
    char_start: int  # Offset into the original buffer
    char_end: int  # Exclusive offset into the original buffer
    matched_text: str
    context_before: List[str] = field(default_factory=list)
    context_after: List[str] = field(default_factory=list)
    similarity: float = 1.0
    strategy: str = "literal"  # 'literal', 'regex' or 'fuzzy'

    def to_dict(self) -> Dict[str, Any]:
        """Convert the candidate to a dictionary."""
        return {
            'index': self.index,
            'line_start': self.line_start,
            'line_end': self.line_end,
            'char_start': self.char_start,
            'char_end': self.char_end,
            'matched_text': self.matched_text,
            'context_before': self.context_before,
            'context_after': self.context_after,
            'similarity': round(self.similarity, 4),
            'strategy': self.strategy
        }


@dataclass
class MatchSuggestion:
    """A remediation hint attached to a diagnostic."""

    type: str
    description: str
    suggestion: str

    def to_dict(self) -> Dict[str, str]:
        """Convert the suggestion to a dictionary."""
        return {
            'type': self.type,
            'description': self.description,
            'suggestion': self.suggestion
        }


@dataclass
class MatchDiagnostic:
    """Why a search did not resolve to exactly one candidate."""

    error_type: str  # 'no_matches' or 'multiple_matches'
    message: str
    candidates: List[MatchCandidate] = field(default_factory=list)
    suggestions: List[MatchSuggestion] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the diagnostic to a dictionary."""
        result: Dict[str, Any] = {
            'error_type': self.error_type,
            'suggestions': [s.to_dict() for s in self.suggestions]
        }

        if self.candidates:
            result['total_matches'] = len(self.candidates)
            result['matches'] = [c.to_dict() for c in self.candidates]

        return result


@dataclass
class MatchSelection:
    """Outcome of disambiguating candidates: either one candidate or a diagnostic."""

    candidate: MatchCandidate | None = None
    diagnostic: MatchDiagnostic | None = None

    @property
    def success(self) -> bool:
        """True if a single candidate was selected."""
        return self.candidate is not None


@dataclass
class EditOutcome:
    """Result of splicing a replacement into a buffer."""

    content: str
    line_start: int
    line_end: int
    char_start: int
    char_end: int
    original_text: str
    new_text: str

    @property
    def lines_changed(self) -> int:
        """Number of lines covered by the replaced span."""
        return self.line_end - self.line_start + 1

    @property
    def characters_changed(self) -> int:
        """Net change in length; negative for deletions."""
        return len(self.new_text) - len(self.original_text)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the outcome to a dictionary (without the full content)."""
        return {
            'line_start': self.line_start,
            'line_end': self.line_end,
            'char_start': self.char_start,
            'char_end': self.char_end,
            'original_text': self.original_text,
            'new_text': self.new_text
        }


@dataclass
class LineEditOutcome:
    """Result of a whole-line deletion or insertion."""

    content: str
    start_line: int
    end_line: int
    lines_removed: int = 0
    lines_added: int = 0
    total_lines: int = 0
