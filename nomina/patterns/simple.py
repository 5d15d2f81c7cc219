"""
Plain token-count patterns: "Jack", "Mr Johnson", "[Mr] Jack Johnson" and
"[Mr] Jack B. Johnson". The preprocessed input is passed through as the
display name.
"""
from __future__ import annotations

from nomina.patterns.base import SCORE_BASE, NamePattern
from nomina.types import ParsedName


class FirstNamePattern(NamePattern):
    """A lone given name."""

    score = SCORE_BASE

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        if len(tokens) != 1 or not self._config.is_name_token(tokens[0]):
            return None
        return self._candidate(first_name=tokens[0], display_name=full_name)


class TitleLastNamePattern(NamePattern):
    """Title followed by a family name ("Dr Watson")."""

    score = SCORE_BASE

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        if len(tokens) != 2 or not self._config.is_title(tokens[0]):
            return None
        if not self._config.is_name_token(tokens[1]):
            return None
        return self._candidate(title=tokens[0], last_name=tokens[1], display_name=full_name)


class FirstLastNamePattern(NamePattern):
    """Optional title, given name, family name."""

    score = SCORE_BASE

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        title, rest = self._split_title(tokens)
        if len(rest) != 2 or not self._all_names(rest):
            return None
        return self._candidate(title=title, first_name=rest[0], last_name=rest[1], display_name=full_name)


class FirstMiddleLastNamePattern(NamePattern):
    """Optional title, given name, middle name or initial, family name."""

    score = SCORE_BASE

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        title, rest = self._split_title(tokens)
        if len(rest) != 3 or not self._all_names(rest):
            return None
        first, middle, last = rest
        return self._candidate(
            title=title,
            first_name=first,
            middle_name=middle,
            last_name=last,
            display_name=full_name,
        )
