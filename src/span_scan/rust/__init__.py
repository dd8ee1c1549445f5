"""Rust span scanning."""

from span_scan.rust.rust_span_scanner import RustSpanScanner

__all__ = [
    'RustSpanScanner',
]
