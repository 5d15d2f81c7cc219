"""
Text preprocessing utilities for full-name parsing.

RESPONSIBILITIES:
- Strip the "ATTN:" attention marker used on business mailing labels
- Repair mojibake and curly quotes left by copy/paste and exports
- Collapse whitespace so every pattern sees the same token boundaries
- NO name-shape decisions (those belong to the patterns)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import ftfy

if TYPE_CHECKING:
    from nomina.types import NameParserConfig

ATTENTION_PREFIX = "ATTN:"


class TextPreprocessor:
    """Input cleaning applied once before the input is fanned out to the patterns."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def preprocess_input(self, raw: str) -> str:
        """
        Return the string every pattern parses.

        Plain ASCII input is unchanged apart from the prefix strip and
        whitespace collapse; HTML entities are left as written.
        """
        raw = self.strip_attention_prefix(raw)
        raw = ftfy.fix_text(raw, unescape_html=False)
        return self._config.whitespace_pattern.sub(" ", raw).strip()

    @staticmethod
    def strip_attention_prefix(raw: str) -> str:
        """Remove a leading, case-sensitive "ATTN:" and trim what remains."""
        if raw.startswith(ATTENTION_PREFIX):
            return raw[len(ATTENTION_PREFIX):].strip()
        return raw
