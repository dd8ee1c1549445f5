"""
Text matching and splicing.

This package locates the span to change in a buffer under several matching
and normalization regimes, disambiguates between candidates, and splices a
replacement into the buffer without disturbing the surrounding text.
"""

from text_edit.text_edit_applier import TextEditApplier
from text_edit.text_edit_exceptions import (
    TextEditApplicationError,
    TextEditError,
    TextEditPatternError,
    TextEditValidationError,
)
from text_edit.text_edit_lines import TextEditLines
from text_edit.text_edit_matcher import TextEditMatcher
from text_edit.text_edit_normalizer import NormalizedText, TextEditNormalizer
from text_edit.text_edit_selector import TextEditSelector
from text_edit.text_edit_types import (
    EditOutcome,
    LineEditOutcome,
    MatchCandidate,
    MatchDiagnostic,
    MatchingOptions,
    MatchSelection,
    MatchSuggestion,
    NormalizationOptions,
)

__all__ = [
    # Exceptions
    'TextEditError',
    'TextEditValidationError',
    'TextEditPatternError',
    'TextEditApplicationError',
    # Types
    'NormalizationOptions',
    'MatchingOptions',
    'MatchCandidate',
    'MatchSuggestion',
    'MatchDiagnostic',
    'MatchSelection',
    'EditOutcome',
    'LineEditOutcome',
    'NormalizedText',
    # Core classes
    'TextEditNormalizer',
    'TextEditMatcher',
    'TextEditSelector',
    'TextEditApplier',
    'TextEditLines',
]
