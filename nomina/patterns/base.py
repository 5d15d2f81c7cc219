"""
Pattern contract for full-name parsing.

Every pattern is one heuristic reading of the whole input. A pattern either
returns a scored `ParsedName` candidate or None when the input does not have
the shape it expects. Patterns are pure: they hold only the immutable config,
never look at each other's results and never raise for any string input.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from nomina.types import NameParserConfig, ParsedName

# Shared confidence scale; every pattern scores on it so candidates are comparable
SCORE_BASE = 100
SCORE_STRONG = 150
SCORE_SPECIFIC = 200


class NamePattern(ABC):
    """Base class for all name patterns."""

    score: ClassVar[int] = SCORE_BASE

    def __init__(self, config: NameParserConfig):
        self._config = config

    def try_parse(self, full_name: str) -> ParsedName | None:
        """Return a candidate for `full_name`, or None when the shape does not fit."""
        tokens = full_name.split()
        if not tokens or self._looks_like_organization(tokens):
            return None
        return self._match(full_name, tokens)

    @abstractmethod
    def _match(self, full_name: str, tokens: list[str]) -> ParsedName | None:
        """Pattern-specific shape check on a non-empty, non-organization token list."""

    def _candidate(self, **fields) -> ParsedName:
        return ParsedName(score=self.score, **fields)

    # ---------- shared token helpers ----------
    def _looks_like_organization(self, tokens: list[str]) -> bool:
        """Company names ("Jack Johnson Enterprises") are declined by every person pattern."""
        return any(self._config.is_organization_marker(t) for t in tokens)

    def _split_title(self, tokens: list[str]) -> tuple[str | None, list[str]]:
        if len(tokens) > 1 and self._config.is_title(tokens[0]):
            return tokens[0], tokens[1:]
        return None, tokens

    def _all_names(self, tokens: list[str]) -> bool:
        return bool(tokens) and all(self._config.is_name_token(t) for t in tokens)

    def _family_name(self, tokens: list[str]) -> str | None:
        """
        Join a family name: a single name token, or a particle chain such as
        "Van Der Hutte". Returns None for anything else.
        """
        if not self._all_names(tokens):
            return None
        if len(tokens) == 1:
            return tokens[0]
        if (
            self._config.is_particle(tokens[0])
            and not self._config.is_particle(tokens[-1])
            and not self._config.is_suffix(tokens[-1])
        ):
            return " ".join(tokens)
        return None
