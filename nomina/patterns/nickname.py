"""
Nicknames given as an aside between the given and family names:
'Pasquale (Pat) Vacoturo', 'Robert "Bob" Smith'.
"""
from __future__ import annotations

from nomina.patterns.base import SCORE_SPECIFIC, NamePattern
from nomina.types import ParsedName


class FirstNickLastNamePattern(NamePattern):
    """Optional title, given name, quoted or bracketed nickname, family name."""

    score = SCORE_SPECIFIC

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        match = self._config.nickname_pattern.match(full_name)
        if not match:
            return None

        nick_name = self._config.whitespace_pattern.sub(" ", match.group("nick")).strip()
        if not nick_name:
            return None

        title, given = self._split_title(match.group("head").split())
        if len(given) != 1 or not self._config.is_name_token(given[0]):
            return None

        tail = match.group("tail").split()
        last_name = self._family_name(tail)
        if last_name is None:
            return None

        # The aside is not part of the name shown to people
        shown = [title, given[0], last_name] if title else [given[0], last_name]
        return self._candidate(
            title=title,
            first_name=given[0],
            last_name=last_name,
            nick_name=nick_name,
            display_name=" ".join(shown),
        )
