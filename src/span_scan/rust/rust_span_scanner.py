"""Rust declaration pattern and attached-line rules for the span scanner."""

import re

from span_scan.span_scanner import SpanScanner


class RustSpanScanner(SpanScanner):
    """
    Span scanner for Rust source.

    Declarations may carry any combination of the `pub` (including `pub(crate)`
    and friends), `const`, `async`, `unsafe`, `default` and `extern "abi"`
    modifiers.  Attributes (`#[...]`) and doc comments (`///`, `//!`) directly
    above a declaration are treated as part of it.
    """

    _MODIFIERS = r'(?:pub(?:\([^)]*\))?|const|async|unsafe|default|extern(?:[ \t]+"[^"]*")?)'

    _ATTACHED_PREFIXES = ('#[', '///', '//!')

    def _declaration_pattern(self, function_name: str) -> re.Pattern[str]:
        return re.compile(
            rf'(?m)^[ \t]*(?:{self._MODIFIERS}[ \t]+)*fn[ \t]+{re.escape(function_name)}\b'
        )

    def _is_attached_line(self, stripped_line: str) -> bool:
        return stripped_line.startswith(self._ATTACHED_PREFIXES)

    def _starts_char_literal(self) -> bool:
        """
        Distinguish a character literal from a lifetime.

        `'x'` and `'\\n'` are character literals; `'a` in `&'a str` is a lifetime.
        """
        pos = self._position
        if pos + 1 < self._input_len and self._input[pos + 1] == '\\':
            return True

        return pos + 2 < self._input_len and self._input[pos + 2] == "'"
