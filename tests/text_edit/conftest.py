"""Shared fixtures for text edit tests."""

import pytest

from text_edit import (
    MatchingOptions, NormalizationOptions, TextEditApplier, TextEditMatcher, TextEditSelector
)


@pytest.fixture
def matcher():
    """Fixture providing a matcher."""
    return TextEditMatcher()


@pytest.fixture
def selector():
    """Fixture providing a selector."""
    return TextEditSelector()


@pytest.fixture
def applier():
    """Fixture providing an applier."""
    return TextEditApplier()


@pytest.fixture
def default_normalization():
    """Fixture providing the default normalization profile (line endings only)."""
    return NormalizationOptions()


@pytest.fixture
def exact_normalization():
    """Fixture providing a profile with every transform off."""
    return NormalizationOptions(normalize_eol=False)


@pytest.fixture
def literal_matching():
    """Fixture providing literal matching without fuzzy fallback."""
    return MatchingOptions(fuzzy=False)
