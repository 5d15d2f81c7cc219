"""
Full Name Parsing Module

This module splits a free-form person name into title, first/middle/last name,
nickname, suffix and a display name.

## Overview

The core functionality is provided by the `FullNameParser` class. It does not
hold one grammar of names; instead every registered pattern tries to read the
whole input on its own, and the most confident reading wins:

1. **Input Preprocessing**: Strips the "ATTN:" mailing-label marker, repairs text
2. **Fan-out**: Every pattern in the registry parses the same cleaned string
3. **Collection**: Patterns that do not recognise the shape return None
4. **Selection**: The candidate with the strictly highest score wins; on a tie
   the pattern registered first wins
5. **Projection**: The winner's fields become the `NameParseResult`

## Usage Examples

```python
parser = FullNameParser()

result = parser.parse("Mr Jack Johnson")
# Returns: NameParseResult(title="Mr", first_name="Jack", last_name="Johnson", ...)

result = parser.parse("Pasquale (Pat) Vacoturo")
# Returns: NameParseResult(first_name="Pasquale", nick_name="Pat", last_name="Vacoturo", ...)

result = parser.parse("Jack Johnson Enterprises")
# Returns: NameParseResult(display_name="Jack Johnson Enterprises") - nothing matched
```

## Thread Safety

Patterns and config are immutable, so one parser can be shared across threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nomina.patterns import NamePattern, build_patterns
from nomina.text_processing.text_preprocessor import TextPreprocessor
from nomina.types import NameParseResult, NameParserConfig, ParsedName

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("nomina.parser")


class FullNameParser:
    """Parses full names by arbitrating between independent name patterns."""

    def __init__(self, config: NameParserConfig | None = None, patterns: Sequence[NamePattern] | None = None):
        self._config = config or NameParserConfig.create_default()
        self._preprocessor = TextPreprocessor(self._config)
        self._patterns = tuple(patterns) if patterns is not None else build_patterns(self._config)

    @property
    def config(self) -> NameParserConfig:
        return self._config

    @property
    def patterns(self) -> tuple[NamePattern, ...]:
        return self._patterns

    def parse(self, full_name: str | None) -> NameParseResult:
        """
        Main API method: parse one full name.

        Never raises for string input. When no pattern recognises the name the
        result carries only `display_name`, set to the original input.
        """
        if not full_name:
            return NameParseResult.unparsed(full_name)

        cleaned = self._preprocessor.preprocess_input(full_name)

        best = self._select(self._collect_candidates(cleaned))
        if best is None:
            logger.debug(f"No pattern matched {full_name!r}")
            return NameParseResult.unparsed(full_name)

        logger.debug(f"Selected candidate with score {best.score} for {full_name!r}")
        return NameParseResult.from_candidate(best)

    def parse_names(self, names: Sequence[str | None]) -> list[NameParseResult]:
        """Parse a batch of names in input order."""
        return [self.parse(name) for name in names]

    def _collect_candidates(self, cleaned: str) -> list[ParsedName]:
        candidates = []
        for pattern in self._patterns:
            # Pattern errors are programming errors and propagate to the caller
            candidate = pattern.try_parse(cleaned)
            if candidate is None:
                continue
            logger.debug(f"{type(pattern).__name__} scored {candidate.score} for {cleaned!r}")
            candidates.append(candidate)
        return candidates

    @staticmethod
    def _select(candidates: list[ParsedName]) -> ParsedName | None:
        """Highest score wins; strict comparison keeps the earliest registered on ties."""
        best = None
        for candidate in candidates:
            if best is None or candidate.score > best.score:
                best = candidate
        return best
