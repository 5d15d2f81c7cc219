"""
Compound family names built from particles: "Giovanni Van Der Hutte",
"Mr Ludwig van Beethoven", "Jack De La Cruz".
"""
from __future__ import annotations

from nomina.patterns.base import SCORE_SPECIFIC, NamePattern
from nomina.types import ParsedName


class CompoundLastNamePattern(NamePattern):
    """
    Optional title, given name, then a family name that starts with a particle.
    Everything after the given name is folded into `last_name`.
    """

    score = SCORE_SPECIFIC

    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        title, rest = self._split_title(tokens)
        if len(rest) < 3 or not self._all_names(rest) or self._config.is_particle(rest[0]):
            return None

        # _family_name requires the chain to open with a particle
        last_name = self._family_name(rest[1:])
        if last_name is None:
            return None

        return self._candidate(
            title=title,
            first_name=rest[0],
            last_name=last_name,
            display_name=full_name,
        )
