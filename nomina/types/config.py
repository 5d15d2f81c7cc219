"""
Configuration for full-name parsing.

This module holds the vocabularies (titles, suffixes, particles, organization
markers) and the precompiled regular expressions shared by every pattern.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace

import regex

DEFAULT_TITLES = frozenset(
    {
        "mr", "mrs", "ms", "miss", "mx", "dr", "prof", "professor", "rev", "reverend",
        "fr", "father", "sir", "dame", "lord", "lady", "hon", "capt", "captain", "sgt",
        "lt", "col", "gen", "maj", "cpl", "adm", "cmdr", "rabbi", "judge",
    },
)

DEFAULT_SUFFIXES = frozenset(
    {"jr", "sr", "ii", "iii", "iv", "v", "phd", "md", "dds", "esq", "cpa", "rn", "dvm"},
)

# Low-content tokens that prefix a family name, can be chained ("Van Der", "De La").
DEFAULT_PARTICLES = frozenset(
    {
        "van", "der", "den", "de", "del", "della", "dela", "di", "da", "dos", "das", "du",
        "la", "le", "von", "zu", "ter", "ten", "st", "ste", "san", "bin", "ibn", "abu", "al", "el",
    },
)

DEFAULT_ORGANIZATION_MARKERS = frozenset(
    {
        "enterprises", "enterprise", "inc", "incorporated", "llc", "llp", "lp", "ltd", "limited",
        "corp", "corporation", "co", "company", "group", "holdings", "associates", "partners",
        "industries", "services", "solutions", "systems", "foundation", "trust", "bank",
        "university", "gmbh", "plc", "ag", "&",
    },
)


@dataclass(frozen=True)
class NameParserConfig:
    """Immutable vocabularies and regex patterns used by the name patterns."""

    titles: frozenset[str]
    suffixes: frozenset[str]
    particles: frozenset[str]
    organization_markers: frozenset[str]

    # Letters (with any combining marks) joined by internal apostrophes, hyphens or periods
    # ("O'Neil", "Smith-Jones", "J.R.", "शर्मा")
    name_token_pattern: regex.Pattern[str]
    # "(Pat)", "\"Pat\"" or curly-quoted asides between the given and family names; delimiters must pair
    nickname_pattern: regex.Pattern[str]
    whitespace_pattern: re.Pattern[str]

    @classmethod
    def create_default(cls) -> NameParserConfig:
        return cls(
            titles=DEFAULT_TITLES,
            suffixes=DEFAULT_SUFFIXES,
            particles=DEFAULT_PARTICLES,
            organization_markers=DEFAULT_ORGANIZATION_MARKERS,
            name_token_pattern=regex.compile(r"^(?:\p{L}\p{M}*)+(?:['’.\-](?:\p{L}\p{M}*)+)*\.?$"),
            nickname_pattern=regex.compile(
                r"^(?P<head>.+?)\s+"
                r"(?:\((?P<nick>[^()\"“”]+?)\)|\"(?P<nick>[^()\"“”]+?)\"|“(?P<nick>[^()\"“”]+?)”)"
                r"\s+(?P<tail>.+)$",
            ),
            whitespace_pattern=re.compile(r"\s+"),
        )

    def with_vocabulary(
        self,
        *,
        titles: set[str] | frozenset[str] = frozenset(),
        suffixes: set[str] | frozenset[str] = frozenset(),
        particles: set[str] | frozenset[str] = frozenset(),
        organization_markers: set[str] | frozenset[str] = frozenset(),
    ) -> NameParserConfig:
        """Return a copy with extra vocabulary words (matched case-insensitively)."""
        return replace(
            self,
            titles=self.titles | _lowered(titles),
            suffixes=self.suffixes | _lowered(suffixes),
            particles=self.particles | _lowered(particles),
            organization_markers=self.organization_markers | _lowered(organization_markers),
        )

    # Vocabulary lookups ignore case and a trailing period/comma ("Mr.", "Jr.,").
    @staticmethod
    def vocabulary_key(token: str) -> str:
        return token.rstrip(".,").lower()

    def is_title(self, token: str) -> bool:
        return self.vocabulary_key(token) in self.titles

    def is_suffix(self, token: str) -> bool:
        return self.vocabulary_key(token) in self.suffixes

    def is_particle(self, token: str) -> bool:
        return self.vocabulary_key(token) in self.particles

    def is_organization_marker(self, token: str) -> bool:
        return self.vocabulary_key(token) in self.organization_markers

    def is_name_token(self, token: str) -> bool:
        return bool(self.name_token_pattern.match(token)) and not self.is_title(token)


def _lowered(words) -> frozenset[str]:
    return frozenset(w.lower() for w in words)
