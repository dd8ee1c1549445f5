"""Languages understood by the structural span scanners."""

import os
from enum import IntEnum, auto
from typing import Dict


class SpanScanLanguage(IntEnum):
    """Source language family for structural scanning."""
    UNKNOWN = -1
    RUST = auto()

    @classmethod
    def from_file_name(cls, file_name: str | None) -> 'SpanScanLanguage':
        """
        Detect the language from a file name's extension.

        Args:
            file_name: Path or name of the file

        Returns:
            The detected language, or SpanScanLanguage.UNKNOWN
        """
        if not file_name:
            return cls.UNKNOWN

        ext = os.path.splitext(file_name)[1].lower()
        return _EXTENSION_TO_LANGUAGE.get(ext, cls.UNKNOWN)

    @property
    def display_name(self) -> str:
        """Human-readable language name."""
        return _LANGUAGE_TO_NAME.get(self, "unknown")


_EXTENSION_TO_LANGUAGE: Dict[str, SpanScanLanguage] = {
    '.rs': SpanScanLanguage.RUST,
}

_LANGUAGE_TO_NAME: Dict[SpanScanLanguage, str] = {
    SpanScanLanguage.RUST: "rust",
}
