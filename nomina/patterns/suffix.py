"""
Generational and professional suffixes: "Jack Johnson Jr", "Mr Jack B. Johnson, III",
"Giovanni Van Der Hutte Sr.".
"""
from __future__ import annotations

from nomina.patterns.base import SCORE_SPECIFIC, NamePattern
from nomina.types import ParsedName


class SuffixPattern(NamePattern):
    """`[Title] First [Middle] Last[,] Suffix` with an optional particle family name."""

    score = SCORE_SPECIFIC

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        if len(tokens) < 3 or not self._config.is_suffix(tokens[-1]):
            return None

        suffix = tokens[-1].rstrip(",")
        rest = tokens[:-1]
        rest[-1] = rest[-1].rstrip(",")

        title, given = self._split_title(rest)
        if len(given) < 2 or not self._all_names(given):
            return None

        first_name = given[0]
        middle_name = None
        last_name = self._family_name(given[1:])
        if last_name is None and len(given) == 3:
            middle_name, last_name = given[1], given[2]
        if last_name is None:
            return None

        return self._candidate(
            title=title,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            suffix=suffix,
            display_name=full_name,
        )
