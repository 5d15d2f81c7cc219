"""
Family-name-first input with a comma: "Johnson, Jack", "Van Der Hutte, Giovanni",
"Johnson, Dr Jack B. Jr".
"""
from __future__ import annotations

from nomina.patterns.base import SCORE_STRONG, NamePattern
from nomina.types import ParsedName


class LastCommaFirstPattern(NamePattern):
    """`Last, [Title] First [Middle] [Suffix]`, displayed in natural order."""

    score = SCORE_STRONG

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        if full_name.count(",") != 1:
            return None

        family_part, given_part = (part.split() for part in full_name.split(","))
        if not family_part or not given_part or not self._all_names(family_part):
            return None

        title, given = self._split_title(given_part)
        # "Johnson, Jr" is a suffix after a comma, not an inverted name
        if self._config.is_suffix(given[0]):
            return None

        suffix = None
        if len(given) > 1 and self._config.is_suffix(given[-1]):
            suffix, given = given[-1], given[:-1]

        if len(given) > 2 or not self._all_names(given):
            return None

        first_name = given[0]
        middle_name = given[1] if len(given) == 2 else None
        last_name = " ".join(family_part)

        shown = [part for part in (title, first_name, middle_name, last_name, suffix) if part]
        return self._candidate(
            title=title,
            first_name=first_name,
            middle_name=middle_name,
            last_name=last_name,
            suffix=suffix,
            display_name=" ".join(shown),
        )
