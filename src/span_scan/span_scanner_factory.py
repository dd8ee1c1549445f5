"""Creates the span scanner for a source language."""

import logging
from typing import Callable, Dict

from span_scan.rust.rust_span_scanner import RustSpanScanner
from span_scan.span_scan_language import SpanScanLanguage
from span_scan.span_scanner import SpanScanner


class SpanScannerFactory:
    """Maps languages to span scanner implementations."""

    _SCANNERS: Dict[SpanScanLanguage, Callable[[], SpanScanner]] = {
        SpanScanLanguage.RUST: RustSpanScanner,
    }

    _logger = logging.getLogger("SpanScannerFactory")

    @classmethod
    def create(cls, language: SpanScanLanguage) -> SpanScanner | None:
        """
        Create a scanner for a language.

        Args:
            language: Language to scan

        Returns:
            A new scanner, or None if the language is not supported
        """
        scanner_class = cls._SCANNERS.get(language)
        if scanner_class is None:
            cls._logger.debug("No span scanner for language %s", language.name)
            return None

        return scanner_class()

    @classmethod
    def supported_languages(cls) -> list[SpanScanLanguage]:
        """Languages that have a scanner."""
        return list(cls._SCANNERS.keys())
