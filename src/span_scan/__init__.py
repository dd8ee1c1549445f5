"""
Structural span scanning.

Scanners locate the complete text of a named function (signature, body and
any attached attributes or doc comments) so it can be removed as a unit.
"""

from span_scan.span_scan_language import SpanScanLanguage
from span_scan.span_scan_types import FunctionSpan, ScanResult
from span_scan.span_scanner import SpanScanner
from span_scan.span_scanner_factory import SpanScannerFactory

__all__ = [
    'SpanScanLanguage',
    'FunctionSpan',
    'ScanResult',
    'SpanScanner',
    'SpanScannerFactory',
]
