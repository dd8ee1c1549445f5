"""Shared fixtures for span scanner tests."""

import pytest

from span_scan.rust.rust_span_scanner import RustSpanScanner


@pytest.fixture
def rust_scanner():
    """Fixture providing a Rust span scanner."""
    return RustSpanScanner()
